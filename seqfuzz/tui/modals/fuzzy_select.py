"""Generic fzf-style fuzzy select modal ranked by seqfuzz scores."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Generic, Optional, TypeVar

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, ListItem, ListView, Static

from ...collection import match_all
from ...config import DEFAULT_CONFIG, ScoringConfig

T = TypeVar("T")
R = TypeVar("R")


def highlight_text(text: str, positions: Sequence[int], style: str = "bold yellow") -> Text:
    """Build a rich Text with the matched positions styled."""
    rendered = Text(text)
    for pos in positions:
        rendered.stylize(style, pos, pos + 1)
    return rendered


class FuzzySelectItem(ListItem):
    """List item carrying the underlying object it displays."""

    def __init__(self, display_text: str | Text, item: Any, **kwargs) -> None:
        super().__init__(Static(display_text), **kwargs)
        self._display_text = display_text
        self.item = item


class FuzzySelectModal(ModalScreen[Optional[R]], Generic[T, R]):
    """fzf-style fuzzy select modal.

    Opens as an overlay, type to filter, Up/Down to navigate, Enter to
    select. Items are ranked best match first; an empty query lists all
    items in their original order. Returns ``result_fn(item)`` on
    success, None on cancel.
    """

    DEFAULT_CSS = """
    FuzzySelectModal {
        align: center middle;
    }

    FuzzySelectModal > #fuzzy-container {
        width: 70;
        height: 80%;
        max-height: 40;
        background: $surface;
        border: thick $primary;
        padding: 1;
    }

    FuzzySelectModal > #fuzzy-container > #fuzzy-title {
        height: 1;
        text-style: bold;
        margin-bottom: 1;
    }

    FuzzySelectModal > #fuzzy-container > #fuzzy-input {
        height: 3;
        margin-bottom: 1;
    }

    FuzzySelectModal > #fuzzy-container > #fuzzy-list {
        height: 1fr;
        border: solid $primary-background;
    }

    FuzzySelectModal > #fuzzy-container > #fuzzy-footer {
        height: 1;
        text-align: center;
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
        Binding("down", "cursor_down", "Down", show=False),
        Binding("up", "cursor_up", "Up", show=False),
        Binding("ctrl+n", "cursor_down", "Down", show=False),
        Binding("ctrl+p", "cursor_up", "Up", show=False),
    ]

    def __init__(
        self,
        items: Sequence[T],
        display_fn: Callable[[T], str] = str,
        search_fn: Callable[[T], str] = str,
        result_fn: Callable[[T], R] = lambda item: item,
        placeholder: str = "Type to search...",
        title: str | None = None,
        show_all_on_empty: bool = True,
        max_results: int = 100,
        initial_query: str = "",
        config: ScoringConfig = DEFAULT_CONFIG,
        **kwargs,
    ) -> None:
        """Initialize the fuzzy select modal.

        Args:
            items: Items to choose from.
            display_fn: Text shown for an item.
            search_fn: Text matched against the query for an item.
            result_fn: Converts the chosen item into the dismiss result.
            placeholder: Input placeholder.
            title: Optional title shown above the input.
            show_all_on_empty: List every item while the query is empty.
            max_results: Maximum number of rows rendered.
            initial_query: Query pre-filled in the input.
            config: Scoring weights used for ranking.
        """
        super().__init__(**kwargs)
        self._items = list(items)
        self._display_fn = display_fn
        self._search_fn = search_fn
        self._result_fn = result_fn
        self._placeholder = placeholder
        self._title = title
        self._show_all_on_empty = show_all_on_empty
        self._max_results = max_results
        self._initial_query = initial_query
        self._config = config
        self._filtered_items: list[T] = []
        self._positions: list[tuple[int, ...]] = []
        self._populate_generation = 0

    def compose(self) -> ComposeResult:
        with Vertical(id="fuzzy-container"):
            if self._title:
                yield Static(self._title, id="fuzzy-title")
            yield Input(value=self._initial_query, placeholder=self._placeholder, id="fuzzy-input")
            yield ListView(id="fuzzy-list")
            yield Static("↑/↓ navigate • Enter select • Esc cancel", id="fuzzy-footer")

    def on_mount(self) -> None:
        self._filter_items(self._initial_query.strip())
        self._populate_list()
        self.query_one("#fuzzy-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        self._filter_items(event.value.strip())
        self._populate_list()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_select()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        if isinstance(event.item, FuzzySelectItem):
            self.dismiss(self._result_fn(event.item.item))

    def _filter_items(self, query: str) -> None:
        """Rank items against query, keeping matches only."""
        if not query:
            self._filtered_items = list(self._items) if self._show_all_on_empty else []
            self._positions = [()] * len(self._filtered_items)
            return

        ranked = match_all(
            self._items,
            query,
            self._search_fn,
            filter=True,
            sort=True,
            config=self._config,
        )
        self._filtered_items = [item for item, _ in ranked]
        self._positions = [result.positions for _, result in ranked]

    def _display(self, item: T, positions: tuple[int, ...]) -> Text:
        # Positions index the search text, so only highlight when it is displayed as-is
        display_text = self._display_fn(item)
        if positions and display_text == self._search_fn(item):
            return highlight_text(display_text, positions)
        return Text(display_text)

    def _populate_list(self) -> None:
        self._populate_generation += 1
        generation = self._populate_generation

        list_view = self.query_one("#fuzzy-list", ListView)
        list_view.clear()

        query = self.query_one("#fuzzy-input", Input).value.strip()
        if not query and not self._show_all_on_empty:
            list_view.append(ListItem(Static("[dim]Type to search...[/dim]")))
            return

        if not self._filtered_items:
            list_view.append(ListItem(Static("No matches found")))
            return

        rows = zip(self._filtered_items[: self._max_results], self._positions)
        for item, positions in rows:
            list_view.append(FuzzySelectItem(self._display(item, positions), item))

        def set_selection() -> None:
            if generation != self._populate_generation:
                return
            if len(list_view) > 0:
                list_view.index = 0

        self.call_after_refresh(set_selection)

    def _selected_item(self) -> T | None:
        if not self._filtered_items:
            return None
        index = self.query_one("#fuzzy-list", ListView).index or 0
        if index >= min(len(self._filtered_items), self._max_results):
            return None
        return self._filtered_items[index]

    def action_cursor_down(self) -> None:
        self.query_one("#fuzzy-list", ListView).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one("#fuzzy-list", ListView).action_cursor_up()

    def action_select(self) -> None:
        """Dismiss with the highlighted item, if any."""
        item = self._selected_item()
        if item is not None:
            self.dismiss(self._result_fn(item))

    def action_cancel(self) -> None:
        self.dismiss(None)
