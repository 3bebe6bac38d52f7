"""Rich renderables for the dashboard.

The left pane lists every job with the highlighted one marked; the right
pane shows the highlighted job's detail or an empty-state message.
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .theme import DashboardTheme, get_theme
from .types import BazelTarget, Frame, Job, YarnScript

NO_SELECTION_MESSAGE = "No selected job"

# Lines per job row: name plus launcher summary
_ROW_HEIGHT = 2
# Panel borders, scroll markers, footer
_RESERVED_LINES = 5


def max_visible_jobs(height: int) -> int:
    """How many job rows fit in a terminal of the given height."""
    return max(1, (height - _RESERVED_LINES) // _ROW_HEIGHT)


def visible_window(selected: int | None, count: int, max_visible: int) -> tuple[int, int]:
    """Return the [start, end) slice of jobs to show, keeping the cursor visible."""
    if count <= max_visible:
        return 0, count
    start = 0
    if selected is not None and selected >= max_visible:
        start = selected - max_visible + 1
    return start, min(start + max_visible, count)


def _job_row(job: Job, is_selected: bool, theme: DashboardTheme) -> Text:
    indent = " " * len(theme.highlight_symbol)
    prefix = theme.highlight_symbol if is_selected else indent
    style = theme.highlight if is_selected else theme.item

    row = Text(f"{prefix}{job.name}", style=style)
    row.append("\n")
    row.append(f"{indent}{job.launcher.describe()}", style=f"{style} italic".strip())
    return row


def render_job_list(frame: Frame, theme: DashboardTheme, max_visible: int) -> Panel:
    """Render the ordered job list with the selected row highlighted."""
    start, end = visible_window(frame.selected, len(frame.items), max_visible)

    rows: list[RenderableType] = []
    if start > 0:
        rows.append(Text(f"  ↑ {start} more above", style=theme.muted))
    for index in range(start, end):
        rows.append(_job_row(frame.items[index], index == frame.selected, theme))
    below = len(frame.items) - end
    if below > 0:
        rows.append(Text(f"  ↓ {below} more below", style=theme.muted))
    if not frame.items:
        rows.append(Text("No jobs configured", style=theme.muted))

    return Panel(Group(*rows), title="Jobs", title_align="left", border_style=theme.border)


def render_job_detail(job: Job, all_jobs: tuple[Job, ...], theme: DashboardTheme) -> Table:
    """Render the full detail of one job as a key/value grid."""
    known = {j.name for j in all_jobs}
    dependents = [j.name for j in all_jobs if job.name in j.dependencies]

    grid = Table.grid(padding=(0, 2))
    grid.add_column(style=theme.muted, no_wrap=True)
    grid.add_column()

    grid.add_row("Name", Text(job.name, style=f"bold {theme.accent}"))
    grid.add_row("Launcher", job.launcher.kind)
    launcher = job.launcher
    if isinstance(launcher, BazelTarget):
        grid.add_row("Target", launcher.target)
    elif isinstance(launcher, YarnScript):
        grid.add_row("Workspace", launcher.workspace)
        grid.add_row("Script", launcher.script)
    grid.add_row("Command", Text(launcher.describe(), style="italic"))

    deps = Text()
    for i, dep in enumerate(job.dependencies):
        if i:
            deps.append("\n")
        if dep in known:
            deps.append(dep)
        else:
            deps.append(f"{dep} (not configured)", style=theme.warning)
    grid.add_row("Depends on", deps if job.dependencies else Text("none", style=theme.muted))
    grid.add_row(
        "Required by",
        Text("\n".join(dependents)) if dependents else Text("none", style=theme.muted),
    )
    return grid


def render_status(frame: Frame, theme: DashboardTheme) -> Panel:
    job = frame.status
    if job is None:
        body: RenderableType = Text(NO_SELECTION_MESSAGE, style=theme.muted)
    else:
        body = render_job_detail(job, frame.items, theme)
    return Panel(body, title="Status", title_align="left", border_style=theme.border)


def render_footer(frame: Frame, theme: DashboardTheme) -> Text:
    position = "-" if frame.selected is None else str(frame.selected + 1)
    return Text(
        f" ↑↓/jk nav • q quit    {position}/{len(frame.items)}",
        style=theme.muted,
    )


def render_frame(frame: Frame, height: int, theme: DashboardTheme | None = None) -> Layout:
    """Build the full-screen layout for one draw."""
    theme = theme or get_theme()

    layout = Layout()
    layout.split_column(Layout(name="body", ratio=1), Layout(name="footer", size=1))
    layout["body"].split_row(
        Layout(render_job_list(frame, theme, max_visible_jobs(height)), name="jobs"),
        Layout(render_status(frame, theme), name="status"),
    )
    layout["footer"].update(render_footer(frame, theme))
    return layout


def jobs_table(jobs: list[Job], theme: DashboardTheme | None = None) -> Table:
    """Summary table of all configured jobs, for non-interactive output."""
    theme = theme or get_theme()
    table = Table(title="Configured jobs", title_justify="left", border_style=theme.border)
    table.add_column("Name", style=f"bold {theme.accent}")
    table.add_column("Launcher")
    table.add_column("Command", style="italic")
    table.add_column("Depends on")
    for job in jobs:
        table.add_row(
            job.name,
            job.launcher.kind,
            job.launcher.describe(),
            ", ".join(job.dependencies) or "-",
        )
    return table
