"""CLI interface for jobdash."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from . import __version__
from .app import App
from .config import DashboardConfig, get_log_path, load_config
from .errors import JobdashError
from .events import EventMultiplexer
from .render import jobs_table
from .terminal import TerminalSession
from .theme import available_themes, set_theme

logger = logging.getLogger(__name__)

console = Console(highlight=False)
err_console = Console(highlight=False, stderr=True)


def setup_logging(debug: bool) -> None:
    """Route package logs to the debug file, or to stderr for warnings only.

    With the dashboard on the alternate screen, debug output must not
    go to the terminal.
    """
    pkg_logger = logging.getLogger("jobdash")
    for old in list(pkg_logger.handlers):
        pkg_logger.removeHandler(old)
        old.close()

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    if debug:
        log_path = get_log_path()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
        pkg_logger.setLevel(logging.DEBUG)
    else:
        handler = logging.StreamHandler(sys.stderr)
        pkg_logger.setLevel(logging.WARNING)
    handler.setFormatter(fmt)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False


def run_dashboard(cfg: DashboardConfig) -> None:
    """Open the terminal, start the event producers and run until quit."""
    app = App(cfg.jobs)
    with TerminalSession(console=console) as session:
        events = EventMultiplexer(tick_rate=cfg.tick_rate).start()
        app.run(events, session.draw)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="jobdash",
        description="jobdash: browse configured jobs in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Keys:
  up/k, down/j   move the highlight (wraps around)
  q, Ctrl+C      quit
""",
    )
    parser.add_argument("--version", action="version", version=f"jobdash {__version__}")
    parser.add_argument("config", help="Job configuration file (.toml, .yaml or .yml)")
    parser.add_argument(
        "--tick-rate",
        type=int,
        metavar="MS",
        help="Refresh interval in milliseconds (overrides dashboard.tick_rate_ms)",
    )
    parser.add_argument(
        "--theme",
        choices=available_themes(),
        help="Color theme (wins over JOBDASH_THEME and dashboard.theme)",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the parsed jobs and exit without starting the dashboard",
    )
    parser.add_argument("--debug", action="store_true", help=f"Write debug log to {get_log_path()}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.tick_rate is not None and args.tick_rate <= 0:
        parser.error("--tick-rate must be a positive number of milliseconds")

    try:
        cfg = load_config(args.config)
    except JobdashError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if args.tick_rate is not None:
        cfg.tick_rate_ms = args.tick_rate
    setup_logging(args.debug or cfg.debug)
    set_theme(cfg.theme, override=args.theme)

    if args.print_config:
        console.print(jobs_table(cfg.jobs))
        return

    logger.info("Starting dashboard with %d jobs from %s", len(cfg.jobs), args.config)
    try:
        run_dashboard(cfg)
    except JobdashError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
