"""Init command implementation."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..allocation import AllocationMethod, normalize_method
from ..config import AllocationConfig, ConfigModel, MemberConfig, RosterConfig, save_config, save_roster
from ..config.loader import DEFAULT_CONFIG_DIR

console = Console()


def create_default_members() -> List[MemberConfig]:
    """Create the default team roster."""
    return [
        MemberConfig(id="1", label="Ruchi"),
        MemberConfig(id="2", label="Karishma"),
        MemberConfig(id="3", label="Amiti"),
        MemberConfig(id="4", label="Anuradha"),
        MemberConfig(id="5", label="Ncxml"),
    ]


def init_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR,
        "--config-dir",
        "-c",
        envvar="ARTALLOC_CONFIG_DIR",
        help="Configuration directory",
    ),
    output_dir: Path = typer.Option(
        Path.home() / "Article-Allocations",
        "--output-dir",
        "-o",
        help="Directory for allocation JSON files",
    ),
    timezone: str = typer.Option("UTC", "--timezone", "-t", help="Timezone for month/date stamps"),
    method: str = typer.Option(
        AllocationMethod.BY_PRIORITY.value,
        "--method",
        "-m",
        help="Default allocation method",
    ),
    webhook_url: Optional[str] = typer.Option(None, "--webhook-url", help="Allocations webhook URL"),
    seed_roster: bool = typer.Option(
        True,
        "--seed-roster/--no-seed-roster",
        help="Seed the default team roster",
    ),
) -> None:
    """Initialize Article Allocator configuration and roster."""
    console.print(Panel.fit("Article Allocator - Initialization", style="bold blue"))

    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"
    roster_path = config_dir / "roster.yaml"

    config = ConfigModel(
        timezone=timezone,
        allocation=AllocationConfig(
            default_method=normalize_method(method).value,
            output_dir=str(output_dir),
        ),
        webhook={"allocations_url": webhook_url},
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    if seed_roster:
        members = create_default_members()
        roster = RosterConfig(members=members, priority_order=[m.id for m in members])
        save_roster(roster, roster_path)
        console.print(f"✅ Created roster: {roster_path} (seeded with {len(members)} members)")
    else:
        save_roster(RosterConfig(), roster_path)
        console.print(f"✅ Created roster: {roster_path} (empty)")

    output_dir.mkdir(parents=True, exist_ok=True)
    console.print(f"✅ Created output directory: {output_dir}")

    console.print(
        Panel(
            f"[green]✅ Article Allocator initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Roster: {roster_path}\n"
            f"Output: {output_dir}\n\n"
            f"Next steps:\n"
            f"1. Review the roster: [bold]artalloc roster list[/bold]\n"
            f"2. Allocate: [bold]artalloc allocate articles.txt -n Ruchi=5[/bold]\n"
            f"3. Submit: [bold]artalloc submit <allocation.json>[/bold]",
            style="green",
        )
    )
