"""Submit command implementation."""

import json
from pathlib import Path
from typing import Optional

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from ..allocation import transform_allocation_to_payload
from ..config import Config
from ..models import FinalAllocationResult

console = Console()


def load_allocation(path: Path) -> FinalAllocationResult:
    """Read an allocation JSON file written by 'artalloc allocate'."""
    if not path.exists():
        raise FileNotFoundError(f"Allocation file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return FinalAllocationResult.model_validate(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in allocation file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid allocation file: {e}")


def submit_command(
    allocation_path: Path = typer.Argument(..., help="Allocation JSON written by 'artalloc allocate'"),
    url: Optional[str] = typer.Option(None, "--url", help="Webhook URL. Default: from config"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the payload instead of sending it"),
) -> None:
    """Send an allocation to the allocations webhook."""
    config = Config()

    try:
        allocation = load_allocation(allocation_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    payload = [item.to_wire() for item in transform_allocation_to_payload(allocation)]

    if dry_run:
        console.print_json(json.dumps(payload))
        return

    webhook_url = url or config.get_webhook_url()
    if not webhook_url:
        console.print("[red]No webhook URL configured. Pass --url or set webhook.allocations_url.[/red]")
        raise typer.Exit(1)

    console.print(f"[dim]Submitting {len(payload)} rows...[/dim]")
    with httpx.Client(timeout=config.config.webhook.timeout) as client:
        try:
            response = client.post(webhook_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            console.print(f"[red]❌ Submission failed - {e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ Submitted {len(payload)} rows ({response.status_code})[/green]")
