"""Merge keyboard input and a periodic tick into one event stream.

Two daemon threads feed a single FIFO channel:

- the input thread blocks on ``read_key()`` and forwards each key press,
- the tick thread sleeps ``tick_rate`` seconds and offers a tick.

At most one tick waits in the channel at a time. Further ticks are dropped
until the pending one is consumed, so the tick thread never waits on a slow
reader. The threads are never joined; they end with the process.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable

import readchar

from .keys import classify
from .types import Event, InputEvent, TickEvent

logger = logging.getLogger(__name__)

DEFAULT_TICK_RATE = 0.25  # seconds


class EventMultiplexer:
    """Single-consumer view over the input and tick producers.

    Args:
        read_key: Blocking callable returning one key press. An empty
            string means the input stream is closed.
        tick_rate: Seconds between ticks.
    """

    def __init__(
        self,
        read_key: Callable[[], str] = readchar.readkey,
        tick_rate: float = DEFAULT_TICK_RATE,
    ):
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate!r}")

        self.tick_rate = tick_rate
        self._read_key = read_key
        self._queue: queue.Queue[Event] = queue.Queue()
        self._tick_pending = threading.Event()
        self._input_alive = threading.Event()
        self._input_thread: threading.Thread | None = None
        self._tick_thread: threading.Thread | None = None

    @property
    def input_alive(self) -> bool:
        """Whether the input thread is still forwarding key presses."""
        return self._input_alive.is_set()

    def start(self) -> "EventMultiplexer":
        """Spawn the producer threads. May only be called once."""
        if self._input_thread is not None:
            raise RuntimeError("EventMultiplexer already started")

        self._input_alive.set()
        self._input_thread = threading.Thread(
            target=self._run_input, name="jobdash-input", daemon=True
        )
        self._tick_thread = threading.Thread(
            target=self._run_ticker, name="jobdash-tick", daemon=True
        )
        self._input_thread.start()
        self._tick_thread.start()
        logger.debug("Event producers started (tick_rate=%.3fs)", self.tick_rate)
        return self

    def next(self, timeout: float | None = None) -> Event:
        """Block until an event arrives and return it.

        Raises:
            queue.Empty: If ``timeout`` is given and nothing arrived in time.
        """
        event = self._queue.get(timeout=timeout)
        if isinstance(event, TickEvent):
            self._tick_pending.clear()
        return event

    def _run_input(self) -> None:
        try:
            while True:
                try:
                    raw = self._read_key()
                except KeyboardInterrupt:
                    # readchar raises on Ctrl+C in raw mode
                    raw = readchar.key.CTRL_C
                except Exception as e:
                    # termios.error and OSError both mean the tty is gone
                    logger.warning("Input stream failed, ignoring further input: %s", e)
                    return

                if not raw:
                    logger.info("Input stream closed, continuing on ticks only")
                    return

                self._queue.put(InputEvent(key=classify(raw), raw=raw))
        finally:
            self._input_alive.clear()

    def _run_ticker(self) -> None:
        while True:
            time.sleep(self.tick_rate)
            self._offer_tick()

    def _offer_tick(self) -> bool:
        """Queue a tick unless one is already waiting. Returns True if queued."""
        if self._tick_pending.is_set():
            logger.debug("Tick still pending, dropping")
            return False
        self._tick_pending.set()
        self._queue.put(TickEvent(at=time.monotonic()))
        return True
