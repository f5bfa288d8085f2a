"""UI message models for spectrum display communication."""

from __future__ import annotations

from textual.message import Message


class CaptureModeChanged(Message):
    """Posted by the spectrum pane when the rendered mode flips."""

    def __init__(self, previous: str | None, current: str) -> None:
        super().__init__()
        self.previous = previous
        self.current = current
