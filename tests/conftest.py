"""Pytest fixtures for jobdash tests."""

import logging
import textwrap

import pytest

from jobdash import theme
from jobdash.types import BazelTarget, Job, Unspecified, YarnScript


SAMPLE_TOML = textwrap.dedent(
    """\
    [dashboard]
    tick_rate_ms = 100

    [[job]]
    name = "api"
    bazel = { target = "//services/api:server" }
    dependencies = ["db"]

    [[job]]
    name = "web"
    yarn = { workspace = "web", script = "start" }
    dependencies = ["api", "cdn"]

    [[job]]
    name = "db"
    """
)


@pytest.fixture(autouse=True)
def default_theme(monkeypatch):
    """Start every test on the default palette with no env override."""
    monkeypatch.delenv("JOBDASH_THEME", raising=False)
    monkeypatch.setattr(theme, "_current_theme", theme._BASE_THEME)


@pytest.fixture
def sample_jobs():
    """Three jobs covering every launcher variant."""
    return [
        Job("api", BazelTarget("//services/api:server"), ("db",)),
        Job("web", YarnScript("web", "start"), ("api", "cdn")),
        Job("db", Unspecified()),
    ]


@pytest.fixture
def write_config(tmp_path):
    """Write config text to a file in tmp_path and return its path."""

    def _write(content: str, name: str = "jobs.toml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return path

    return _write


@pytest.fixture
def sample_config(write_config):
    return write_config(SAMPLE_TOML)


@pytest.fixture
def restore_logging():
    """Undo changes the CLI makes to the package logger."""
    pkg_logger = logging.getLogger("jobdash")
    handlers = list(pkg_logger.handlers)
    level = pkg_logger.level
    propagate = pkg_logger.propagate
    yield
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate
