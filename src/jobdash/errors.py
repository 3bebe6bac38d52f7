"""Exceptions raised by jobdash."""

from __future__ import annotations


class JobdashError(Exception):
    """Base class for jobdash errors."""


class ConfigError(JobdashError):
    """The configuration file is missing or cannot be turned into jobs."""


class TerminalError(JobdashError):
    """The terminal session could not be acquired."""
