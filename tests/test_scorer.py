"""Tests for the individual scoring terms."""

from seqfuzz.config import ScoringConfig
from seqfuzz.scorer import (
    case_match_bonus,
    first_letter_bonus,
    leading_letter_penalty,
    neighbor_bonus,
    score,
    sequential_bonus,
    string_match_bonus,
    unmatched_letter_penalty,
)


class TestLeadingLetterPenalty:
    """Tests for the late-start penalty."""

    def test_match_at_start(self, default_config):
        """Test no penalty when matching from index 0."""
        assert leading_letter_penalty([0, 1], default_config) == 0

    def test_scales_with_start(self, default_config):
        """Test penalty grows with the first position."""
        assert leading_letter_penalty([2], default_config) == -6

    def test_clamped(self, default_config):
        """Test penalty never exceeds the max."""
        assert leading_letter_penalty([10], default_config) == -25

    def test_no_positions(self, default_config):
        """Test empty positions get the max penalty."""
        assert leading_letter_penalty([], default_config) == -25


class TestSequentialBonus:
    """Tests for the contiguous run bonus."""

    def test_counts_adjacent_pairs(self, default_config):
        """Test each adjacent pair counts once."""
        assert sequential_bonus([0, 1, 2, 5, 6], default_config) == 45

    def test_single_position(self, default_config):
        """Test a lone position has no pairs."""
        assert sequential_bonus([3], default_config) == 0

    def test_no_positions(self, default_config):
        """Test empty positions score nothing."""
        assert sequential_bonus([], default_config) == 0


class TestUnmatchedLetterPenalty:
    """Tests for the unmatched character penalty."""

    def test_gaps_and_trailing(self, default_config):
        """Test gaps between matches and after the last one are counted."""
        # (0, 2) leaves 1, (2, 5) leaves 2
        assert unmatched_letter_penalty([0, 2], "abcdef", default_config) == -3

    def test_contiguous_to_end(self, default_config):
        """Test ending on the last character nets one letter back."""
        assert unmatched_letter_penalty([0, 1], "ab", default_config) == 1

    def test_no_positions(self, default_config):
        """Test every character counts when nothing matched."""
        assert unmatched_letter_penalty([], "abc", default_config) == -3


class TestNeighborBonus:
    """Tests for separator and camelCase word-start bonuses."""

    def test_after_separator(self, default_config):
        """Test match after a separator."""
        assert neighbor_bonus([4], "foo_bar", default_config) == 30

    def test_camel_hump(self, default_config):
        """Test uppercase after lowercase."""
        assert neighbor_bonus([3], "fooBar", default_config) == 30

    def test_all_caps_is_not_a_hump(self, default_config):
        """Test uppercase after uppercase earns nothing."""
        assert neighbor_bonus([3], "FOOBAR", default_config) == 0

    def test_digit_is_not_a_hump(self, default_config):
        """Test caseless characters never trigger the camel bonus."""
        assert neighbor_bonus([3], "abc1", default_config) == 0

    def test_first_position_ignored(self, default_config):
        """Test index 0 has no neighbor."""
        assert neighbor_bonus([0], "Foo", default_config) == 0

    def test_separator_takes_precedence(self):
        """Test separator bonus is used even when the char is also a hump."""
        config = ScoringConfig(separator_bonus=7, camel_bonus=11)
        assert neighbor_bonus([4], "foo_Bar", config) == 7


class TestFirstLetterBonus:
    """Tests for the prefix bonus."""

    def test_prefix(self, default_config):
        """Test bonus when index 0 matched."""
        assert first_letter_bonus([0, 3], default_config) == 15

    def test_not_prefix(self, default_config):
        """Test no bonus otherwise."""
        assert first_letter_bonus([1], default_config) == 0
        assert first_letter_bonus([], default_config) == 0


class TestCaseMatchBonus:
    """Tests for the exact-case bonus."""

    def test_counts_same_case(self, default_config):
        """Test only characters with identical case count."""
        assert case_match_bonus([0, 3], "FooBar", "fb", default_config) == 0
        assert case_match_bonus([0, 3], "FooBar", "Fb", default_config) == 1
        assert case_match_bonus([0, 3], "FooBar", "FB", default_config) == 2

    def test_partial_positions(self, default_config):
        """Test only located characters are compared."""
        assert case_match_bonus([0], "Foo", "Fx", default_config) == 1


class TestStringMatchBonus:
    """Tests for the whole-string bonus."""

    def test_equal_ignoring_case(self, default_config):
        """Test bonus for equal strings with different case."""
        assert string_match_bonus("Food", "fOOD", default_config) == 20

    def test_different(self, default_config):
        """Test no bonus for a prefix."""
        assert string_match_bonus("Food", "foo", default_config) == 0


class TestScore:
    """Tests for the combined score."""

    def test_sum_of_terms(self, default_config):
        """Test the documented hellw score."""
        assert score([0, 1, 2, 3, 7], "Hello, world!", "hellw", default_config) == 187

    def test_initial_score_offsets(self):
        """Test initial_score shifts every score equally."""
        base = score([0, 2], "abc", "ac")
        shifted = score([0, 2], "abc", "ac", ScoringConfig(initial_score=0))
        assert base - shifted == 100

    def test_zero_weights(self):
        """Test a config of all zeros scores zero."""
        config = ScoringConfig(
            sequential_bonus=0,
            separator_bonus=0,
            camel_bonus=0,
            first_letter_bonus=0,
            leading_letter_penalty=0,
            max_leading_letter_penalty=0,
            unmatched_letter_penalty=0,
            case_match_bonus=0,
            string_match_bonus=0,
            initial_score=0,
        )
        assert score([0, 1, 2, 3, 7], "Hello, world!", "hellw", config) == 0
