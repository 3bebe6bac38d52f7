from __future__ import annotations

import io

import pytest
from rich.console import Console

from jobdash import cli
from jobdash.errors import TerminalError


@pytest.fixture
def consoles(monkeypatch):
    out = Console(file=io.StringIO(), width=120)
    err = Console(file=io.StringIO(), width=120)
    monkeypatch.setattr(cli, "console", out)
    monkeypatch.setattr(cli, "err_console", err)
    return out.file, err.file


@pytest.fixture
def captured_run(monkeypatch):
    seen = []
    monkeypatch.setattr(cli, "run_dashboard", seen.append)
    return seen


@pytest.fixture(autouse=True)
def _isolate(restore_logging, tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


def test_print_config_lists_jobs(sample_config, consoles, captured_run):
    out, _ = consoles
    cli.main([str(sample_config), "--print-config"])

    text = out.getvalue()
    assert "api" in text
    assert "yarn workspace web start" in text
    assert captured_run == []


def test_runs_dashboard_with_config(sample_config, consoles, captured_run):
    cli.main([str(sample_config)])

    assert len(captured_run) == 1
    assert [j.name for j in captured_run[0].jobs] == ["api", "web", "db"]
    assert captured_run[0].tick_rate_ms == 100


def test_tick_rate_flag_overrides_file(sample_config, consoles, captured_run):
    cli.main([str(sample_config), "--tick-rate", "40"])
    assert captured_run[0].tick_rate == pytest.approx(0.04)


def test_rejects_non_positive_tick_rate(sample_config, consoles, captured_run):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(sample_config), "--tick-rate", "0"])
    assert exc.value.code == 2


def test_missing_config_exits_1(tmp_path, consoles, captured_run):
    _, err = consoles
    with pytest.raises(SystemExit) as exc:
        cli.main([str(tmp_path / "missing.toml")])

    assert exc.value.code == 1
    assert "Error:" in err.getvalue()
    assert captured_run == []


def test_terminal_failure_exits_1(sample_config, consoles, monkeypatch):
    _, err = consoles

    def fail(cfg):
        raise TerminalError("Standard input is not a terminal")

    monkeypatch.setattr(cli, "run_dashboard", fail)
    with pytest.raises(SystemExit) as exc:
        cli.main([str(sample_config)])

    assert exc.value.code == 1
    assert "not a terminal" in err.getvalue()


def test_debug_writes_log_file(sample_config, consoles, tmp_path):
    cli.main([str(sample_config), "--debug", "--print-config"])
    assert (tmp_path / "xdg" / "jobdash" / "debug.log").exists()


def test_theme_flag_sets_theme(sample_config, consoles, captured_run):
    from jobdash import theme

    cli.main([str(sample_config), "--theme", "dusk"])
    assert theme.get_theme().name == "dusk"


def test_theme_flag_wins_over_env(sample_config, consoles, captured_run, monkeypatch):
    from jobdash import theme

    monkeypatch.setenv("JOBDASH_THEME", "plain")
    cli.main([str(sample_config), "--theme", "dusk"])
    assert theme.get_theme().name == "dusk"


def test_env_theme_without_flag(sample_config, consoles, captured_run, monkeypatch):
    from jobdash import theme

    monkeypatch.setenv("JOBDASH_THEME", "plain")
    cli.main([str(sample_config)])
    assert theme.get_theme().name == "plain"
