"""Shared Rich UI helpers.

Diagnostics go to stderr so stdout carries only the report.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console(stderr=True)
out = Console()
_LABEL_WIDTH = 9


def _label(name: str) -> str:
    padded = f"{name}:".ljust(_LABEL_WIDTH)
    return f"{padded}"


def format_line(name: str, msg: str) -> str:
    """Build one formatted output line."""
    return f"{_label(name)} {msg}"


def report(name: str, msg: str) -> None:
    console.print(format_line(name, msg), highlight=False)


def report_error(
    summary: str,
    *,
    cause: str | None = None,
    action: str | None = None,
    detail: str | None = None,
) -> None:
    """Print a structured, user-facing error block."""
    report("error", f"[red]{summary}[/red]")
    if cause:
        report("cause", escape(cause))
    if action:
        report("action", action)
    if detail:
        report("detail", escape(detail))


def report_step(step: str, detail: str | None = None) -> None:
    """Print pipeline step marker."""
    if detail:
        report("step", f"{step} | {detail}")
    else:
        report("step", step)


def make_table(
    *,
    title: str | None = None,
    show_header: bool = True,
    header_style: str = "dim",
) -> Table:
    """Create a table with shared CLI defaults."""
    return Table(title=title, show_header=show_header, header_style=header_style)


def render_table(table: Table) -> None:
    out.print(table)


def fmt_duration(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:>6.1f}ms"
    if seconds < 60:
        return f"{seconds:>6.1f}s"
    elif seconds < 3600:
        return f"{seconds / 60:>6.1f}m"
    return f"{seconds / 3600:>6.1f}h"
