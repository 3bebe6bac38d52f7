"""Configuration loading for jobdash.

A config file holds a list of job tables and an optional ``dashboard``
table. TOML (the native format) and YAML are both accepted:

    [dashboard]
    tick_rate_ms = 250

    [[job]]
    name = "api"
    bazel = { target = "//services/api:server" }
    dependencies = ["db"]

    [[job]]
    name = "web"
    yarn = { workspace = "web", script = "start" }
"""

from __future__ import annotations

import copy
import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .types import BazelTarget, Job, Launcher, Unspecified, YarnScript

logger = logging.getLogger(__name__)

DEFAULT_DASHBOARD: dict[str, Any] = {
    "tick_rate_ms": 250,
    "theme": None,
    "debug": False,
}

_YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass
class DashboardConfig:
    """Parsed configuration: the ordered jobs plus dashboard settings."""

    jobs: list[Job] = field(default_factory=list)
    tick_rate_ms: int = DEFAULT_DASHBOARD["tick_rate_ms"]
    theme: str | None = None
    debug: bool = False

    @property
    def tick_rate(self) -> float:
        """Tick interval in seconds."""
        return self.tick_rate_ms / 1000


def get_config_dir() -> Path:
    """Get the jobdash config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "jobdash"


def get_log_path() -> Path:
    """Get the path to the debug log file."""
    return get_config_dir() / "debug.log"


def _read_raw(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text()
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    else:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a table/mapping")
    return data


def _require_str(table: dict[str, Any], key: str, where: str) -> str:
    value = table.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{where}: '{key}' must be a non-empty string")
    return value


def _parse_launcher(raw: dict[str, Any], where: str) -> Launcher:
    bazel = raw.get("bazel")
    yarn = raw.get("yarn")

    if bazel is not None and yarn is not None:
        raise ConfigError(f"{where}: set either 'bazel' or 'yarn', not both")

    if bazel is not None:
        if not isinstance(bazel, dict):
            raise ConfigError(f"{where}: 'bazel' must be a table")
        return BazelTarget(target=_require_str(bazel, "target", f"{where}.bazel"))

    if yarn is not None:
        if not isinstance(yarn, dict):
            raise ConfigError(f"{where}: 'yarn' must be a table")
        return YarnScript(
            workspace=_require_str(yarn, "workspace", f"{where}.yarn"),
            script=_require_str(yarn, "script", f"{where}.yarn"),
        )

    return Unspecified()


def parse_job(raw: Any, index: int = 0) -> Job:
    """Build a Job from one ``[[job]]`` table."""
    where = f"job[{index}]"
    if not isinstance(raw, dict):
        raise ConfigError(f"{where}: expected a table, got {type(raw).__name__}")

    name = _require_str(raw, "name", where)
    where = f"job '{name}'"

    deps = raw.get("dependencies") or []
    if not isinstance(deps, list) or not all(isinstance(d, str) for d in deps):
        raise ConfigError(f"{where}: 'dependencies' must be a list of strings")

    return Job(name=name, launcher=_parse_launcher(raw, where), dependencies=tuple(deps))


def _parse_dashboard(raw: Any, path: Path) -> dict[str, Any]:
    if raw is None:
        return copy.deepcopy(DEFAULT_DASHBOARD)
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: 'dashboard' must be a table")

    settings = {**DEFAULT_DASHBOARD, **raw}
    tick_rate_ms = settings["tick_rate_ms"]
    if isinstance(tick_rate_ms, bool) or not isinstance(tick_rate_ms, int) or tick_rate_ms <= 0:
        raise ConfigError(f"{path}: 'dashboard.tick_rate_ms' must be a positive integer")
    return settings


def load_config(path: str | Path) -> DashboardConfig:
    """Load jobs and dashboard settings from a TOML or YAML file.

    Raises:
        ConfigError: If the file is missing, unparsable, or a job is malformed.
    """
    path = Path(path)
    data = _read_raw(path)

    raw_jobs = data.get("job", [])
    if not isinstance(raw_jobs, list):
        raise ConfigError(f"{path}: 'job' must be a list of tables")

    jobs = [parse_job(raw, i) for i, raw in enumerate(raw_jobs)]
    settings = _parse_dashboard(data.get("dashboard"), path)

    logger.debug("Loaded %d jobs from %s", len(jobs), path)
    return DashboardConfig(
        jobs=jobs,
        tick_rate_ms=settings["tick_rate_ms"],
        theme=settings["theme"],
        debug=bool(settings["debug"]),
    )
