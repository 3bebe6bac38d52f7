"""Dashboard state and the render loop that drives it."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Protocol

from .selection import SelectionList
from .types import Event, Frame, InputEvent, Job, Key, TickEvent

logger = logging.getLogger(__name__)


class EventSource(Protocol):
    """Anything with a blocking next() returning Events, e.g. EventMultiplexer."""

    def next(self) -> Event: ...


class App:
    """Application state: the job list and its cursor.

    The first job is highlighted from the start.
    """

    def __init__(self, jobs: Iterable[Job]):
        self.jobs: SelectionList[Job] = SelectionList(jobs)
        self.jobs.next()

    def update(self) -> None:
        """Called on every tick. Jobs are static, so nothing changes yet."""

    def handle(self, event: Event) -> bool:
        """Apply one event. Returns False when the loop should stop."""
        if isinstance(event, TickEvent):
            self.update()
            return True

        if isinstance(event, InputEvent):
            if event.key is Key.QUIT:
                return False
            if event.key is Key.DOWN:
                self.jobs.next()
            elif event.key is Key.UP:
                self.jobs.previous()
            return True

        raise TypeError(f"Unknown event: {event!r}")

    def frame(self) -> Frame:
        """Snapshot of the current state for the renderer."""
        return Frame(items=tuple(self.jobs.items), selected=self.jobs.selected)

    def run(self, events: EventSource, draw: Callable[[Frame], None]) -> None:
        """Draw, then redraw after each event until a quit key arrives.

        Args:
            events: Source of events, read one at a time.
            draw: Called with a Frame once per redraw. Errors propagate.
        """
        draw(self.frame())
        while True:
            event = events.next()
            if not self.handle(event):
                logger.debug("Quit received, leaving render loop")
                return
            draw(self.frame())
