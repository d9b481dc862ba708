"""Standalone picker app wrapping FuzzySelectModal."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from textual.app import App, ComposeResult
from textual.widgets import Static

from ..config import DEFAULT_CONFIG, ScoringConfig
from .modals import FuzzySelectModal


class PickerApp(App[Optional[str]]):
    """Pick one string from a list and exit with it (None on cancel)."""

    def __init__(
        self,
        lines: Sequence[str],
        query: str = "",
        title: str | None = None,
        config: ScoringConfig = DEFAULT_CONFIG,
    ) -> None:
        super().__init__()
        self._lines = list(lines)
        self._query = query
        self._title = title
        self._config = config

    def compose(self) -> ComposeResult:
        yield Static(f"{len(self._lines)} candidates", id="picker-status")

    def on_mount(self) -> None:
        modal: FuzzySelectModal[str, str] = FuzzySelectModal(
            self._lines,
            placeholder="Type to filter...",
            title=self._title,
            initial_query=self._query,
            config=self._config,
        )
        self.push_screen(modal, self._on_result)

    def _on_result(self, result: Optional[str]) -> None:
        self.exit(result)
