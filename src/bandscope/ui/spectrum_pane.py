"""Widget that displays rendered spectrum frames."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from bandscope.events import CaptureModeChanged
from bandscope.visualizer.base import Frame, RenderRegion


class SpectrumPane(Static):
    DEFAULT_CSS = """
    SpectrumPane {
        height: 1fr;
        width: 1fr;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._last_frame: Frame | None = None
        self._error_text: str | None = None

    @property
    def last_frame(self) -> Frame | None:
        return self._last_frame

    @property
    def error_text(self) -> str | None:
        return self._error_text

    def render_region(self) -> RenderRegion:
        """Current drawable area; re-read every tick since the terminal may resize."""
        return RenderRegion(width=self.size.width, height=self.size.height)

    def show_frame(self, frame: Frame) -> None:
        previous = self._last_frame.mode if self._last_frame is not None else None
        self._last_frame = frame
        self._error_text = None
        self.update(Text("\n").join(frame.lines))
        if previous != frame.mode:
            self.post_message(CaptureModeChanged(previous, frame.mode))

    def show_error(self, message: str) -> None:
        self._last_frame = None
        self._error_text = message
        self.update(message)
