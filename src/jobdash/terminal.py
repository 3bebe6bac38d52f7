"""Scoped ownership of the terminal for the lifetime of the dashboard."""

from __future__ import annotations

import logging
import sys
import termios
from typing import Any, TextIO

from rich.console import Console
from rich.live import Live

from .errors import TerminalError
from .render import render_frame
from .theme import DashboardTheme, get_theme
from .types import Frame

logger = logging.getLogger(__name__)


class TerminalSession:
    """Alternate-screen Rich display, restored on every exit path.

    Usage:
        with TerminalSession() as session:
            app.run(events, session.draw)
    """

    def __init__(
        self,
        console: Console | None = None,
        theme: DashboardTheme | None = None,
        stdin: TextIO | None = None,
    ):
        self.console = console or Console(highlight=False)
        self.theme = theme or get_theme()
        self._stdin = stdin if stdin is not None else sys.stdin
        self._live: Live | None = None
        self._saved_mode: list[Any] | None = None

    def __enter__(self) -> "TerminalSession":
        if self._stdin is None or not self._stdin.isatty():
            raise TerminalError("Standard input is not a terminal")
        if not self.console.is_terminal:
            raise TerminalError("Standard output is not a terminal")

        # readkey() toggles raw mode per call; the reader thread may die mid-read
        fd = self._stdin.fileno()
        try:
            self._saved_mode = termios.tcgetattr(fd)
        except termios.error as e:
            raise TerminalError(f"Cannot read terminal mode: {e}") from e

        self._live = Live(
            console=self.console,
            screen=True,
            auto_refresh=False,
            transient=True,
        )
        self._live.start()
        logger.debug("Terminal session started (%dx%d)", self.console.width, self.console.height)
        return self

    def __exit__(self, *exc_info) -> bool:
        if self._live is not None:
            self._live.stop()
            self._live = None
        if self._saved_mode is not None:
            termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None
        logger.debug("Terminal session restored")
        return False

    def draw(self, frame: Frame) -> None:
        """Replace the screen contents with a render of ``frame``."""
        if self._live is None:
            raise TerminalError("Terminal session is not active")
        self._live.update(render_frame(frame, self.console.height, self.theme), refresh=True)
