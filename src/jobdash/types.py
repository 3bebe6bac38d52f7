"""Type definitions for jobdash.

Job records, their launcher variants, and the events passed from the
input/tick producers to the render loop.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Key(str, Enum):
    """Navigation keys understood by the render loop."""

    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


# ── launchers ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BazelTarget:
    """A job launched as a bazel binary target."""

    target: str

    kind = "bazel"

    def describe(self) -> str:
        return f"bazel run {self.target}"


@dataclass(frozen=True)
class YarnScript:
    """A job launched as a script inside a yarn workspace."""

    workspace: str
    script: str

    kind = "yarn"

    def describe(self) -> str:
        return f"yarn workspace {self.workspace} {self.script}"


@dataclass(frozen=True)
class Unspecified:
    """A job with no launcher configured."""

    kind = "unspecified"

    def describe(self) -> str:
        return "no launcher configured"


Launcher = Union[BazelTarget, YarnScript, Unspecified]


@dataclass(frozen=True)
class Job:
    """A named job loaded from configuration. Never mutated after loading."""

    name: str
    launcher: Launcher = field(default_factory=Unspecified)
    dependencies: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Job name must be a non-empty string")


# ── events ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class InputEvent:
    """A key press read from the terminal."""

    key: Key
    raw: str = ""


@dataclass(frozen=True)
class TickEvent:
    """Periodic event signalling that time has passed.

    ``at`` is the ``time.monotonic()`` reading when the tick was queued.
    """

    at: float = field(default_factory=time.monotonic)


Event = Union[InputEvent, TickEvent]


# ── draw snapshot ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Frame:
    """Everything the renderer needs for one redraw."""

    items: tuple[Job, ...]
    selected: int | None = None

    @property
    def status(self) -> Job | None:
        """The job whose detail belongs in the status panel, if any."""
        if self.selected is None:
            return None
        return self.items[self.selected]
