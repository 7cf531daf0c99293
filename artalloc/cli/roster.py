"""Roster management commands."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..allocation import extract_priority_order, move_priority_field
from ..config import (
    Config,
    MemberConfig,
    RosterConfig,
    load_roster,
    roster_priority_fields,
    save_roster,
)

console = Console()
roster_app = typer.Typer(help="Manage the team roster")


def _load(config: Config) -> RosterConfig:
    try:
        return load_roster(config.roster_path)
    except FileNotFoundError:
        console.print("[red]Roster file not found. Run 'artalloc init' first.[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@roster_app.command("list")
def roster_list() -> None:
    """List team members in priority order."""
    config = Config()
    fields = roster_priority_fields(_load(config))

    if not fields:
        console.print("[yellow]No team members configured.[/yellow]")
        return

    table = Table(title="Team Roster")
    table.add_column("Priority", style="green", justify="right")
    table.add_column("ID", style="magenta")
    table.add_column("Name", style="cyan")

    for position, field in enumerate(fields, 1):
        table.add_row(str(position), field.id, field.label)

    console.print(table)


@roster_app.command("add")
def roster_add(
    label: str = typer.Option(..., "--name", "-n", help="Member name used on allocations"),
    member_id: Optional[str] = typer.Option(None, "--id", help="Member id (default: next number)"),
) -> None:
    """Add a team member at the lowest priority."""
    config = Config()
    try:
        roster = load_roster(config.roster_path)
    except FileNotFoundError:
        roster = RosterConfig()

    if any(m.label == label or m.id == member_id for m in roster.members):
        console.print(f"[red]Member '{label}' or id already exists.[/red]")
        raise typer.Exit(1)

    if member_id is None:
        numeric = [int(m.id) for m in roster.members if m.id.isdigit()]
        member_id = str(max(numeric, default=0) + 1)

    roster.members.append(MemberConfig(id=member_id, label=label))
    roster.priority_order.append(member_id)
    save_roster(roster, config.roster_path)

    console.print(f"[green]✅ Added member: {label} ({member_id})[/green]")


@roster_app.command("remove")
def roster_remove(
    label: str = typer.Argument(..., help="Member name to remove"),
) -> None:
    """Remove a team member."""
    config = Config()
    roster = _load(config)

    removed = [m for m in roster.members if m.label == label]
    if not removed:
        console.print(f"[red]Member '{label}' not found.[/red]")
        raise typer.Exit(1)

    removed_ids = {m.id for m in removed}
    roster.members = [m for m in roster.members if m.label != label]
    roster.priority_order = [i for i in roster.priority_order if i not in removed_ids]
    save_roster(roster, config.roster_path)
    console.print(f"[green]✅ Removed member: {label}[/green]")


@roster_app.command("move")
def roster_move(
    label: str = typer.Argument(..., help="Member name to move"),
    position: int = typer.Argument(..., help="New priority position (1 = first)", min=1),
) -> None:
    """Move a team member to a new priority position."""
    config = Config()
    roster = _load(config)
    fields = roster_priority_fields(roster)

    labels = [field.label for field in fields]
    if label not in labels:
        console.print(f"[red]Member '{label}' not found.[/red]")
        raise typer.Exit(1)

    target = min(position, len(fields)) - 1
    moved = move_priority_field(fields, labels.index(label), target)
    roster.priority_order = extract_priority_order(moved)
    save_roster(roster, config.roster_path)
    console.print(f"[green]✅ Moved {label} to position {target + 1}[/green]")


@roster_app.command("reset-order")
def roster_reset_order() -> None:
    """Reset priority order to the order members were added."""
    config = Config()
    roster = _load(config)
    roster.priority_order = [m.id for m in roster.members]
    save_roster(roster, config.roster_path)
    console.print("[green]✅ Priority order reset[/green]")
