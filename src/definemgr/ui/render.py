"""Rich rendering for the define manager's terminal front end."""
from __future__ import annotations
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.box import ROUNDED

from ..engine.replicate import ReplicationReport
from ..session import DefineSession
from ..targets import known_targets

console = Console()

def defines_table(session: DefineSession) -> Table:
    table = Table(title=f"Scripting Defines - {session.selected.value}", box=ROUNDED)
    table.add_column("#", justify="right", style="bright_black")
    table.add_column("Define", style="bright_white")
    table.add_column("State", justify="center")
    for i, entry in enumerate(session.managed):
        state = "[green]on[/green]" if entry.enabled else "[bright_black]off[/bright_black]"
        table.add_row(str(i), entry.token, state)
    if not len(session.managed):
        table.add_row("-", "[bright_black](no managed defines)[/bright_black]", "")
    return table

def targets_table(session: DefineSession) -> Table:
    table = Table(title="Build Targets", box=ROUNDED)
    table.add_column("Target")
    table.add_column("Defines", overflow="fold")
    for target in known_targets():
        marker = " *" if target == session.selected else ""
        table.add_row(target.value + marker, session.flags.get_flags(target) or "")
    return table

def show_report(report: ReplicationReport, out: Optional[Console] = None):
    out = out or console
    for target, tokens in report.applied.items():
        out.print(f"[green]Defines saved for {target.value}[/green] ({len(tokens)})")
    for failure in report.failures:
        out.print(f"[red]{failure}[/red]")
    if len(report.applied) > 1 and report.ok:
        out.print(Panel("Defines applied to all groups", border_style="green"))

def show_note(out: Optional[Console] = None):
    (out or console).print(
        "[bright_black]Only managed defines are added or removed; other defines "
        "on each target are kept as they are.[/bright_black]"
    )

def target_choices() -> list:
    return [t.value for t in known_targets()]
