"""Allocate and validate command implementations."""

import json
from pathlib import Path
from typing import Dict, List, Optional

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from ..allocation import (
    apply_requested_counts,
    build_final_allocation,
    build_preview,
    check_allocation,
    format_allocation_for_copy,
    normalize_method,
    print_allocation_summary,
    validate_ddn_articles,
)
from ..config import Config
from ..models import AllocationCheck, ParsedArticle, PriorityField
from ..parsing import filter_allocated_articles, parse_articles, parse_pasted_allocation
from ..utils import current_month_and_date

console = Console()


def parse_counts(raw_counts: Optional[List[str]]) -> Dict[str, int]:
    """Parse repeated ``LABEL=COUNT`` options into a mapping."""
    counts: Dict[str, int] = {}
    for raw in raw_counts or []:
        label, sep, value = raw.rpartition("=")
        label = label.strip()
        if not sep or not label:
            raise typer.BadParameter(f"Expected LABEL=COUNT, got {raw!r}")
        try:
            count = int(value.strip())
        except ValueError:
            raise typer.BadParameter(f"Count for {label!r} is not a number: {value!r}")
        if count < 0:
            raise typer.BadParameter(f"Count for {label!r} cannot be negative")
        counts[label] = count
    return counts


def read_articles(path: Path, pasted: bool) -> List[ParsedArticle]:
    """Read articles from a line file or from pasted spreadsheet text."""
    text = path.read_text(encoding="utf-8")
    if pasted:
        return parse_pasted_allocation(text)
    return parse_articles(text.splitlines())


def read_optional_text(path: Optional[Path]) -> Optional[str]:
    if path is None:
        return None
    return path.read_text(encoding="utf-8")


def load_requesters(config: Config, counts: Dict[str, int]) -> List[PriorityField]:
    """Roster fields in priority order with the requested counts applied."""
    fields = config.load_priority_fields()
    known = {field.label for field in fields}
    unknown = sorted(set(counts) - known)
    if unknown:
        raise ValueError(f"Not on the roster: {', '.join(unknown)}")
    return apply_requested_counts(fields, counts)


def print_check(check: AllocationCheck, total_articles: int) -> None:
    """Print pre-flight numbers and any errors."""
    table = Table(title="Allocation Check", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Total articles", str(total_articles))
    table.add_row("Requested", str(check.allocated_article_count))
    table.add_row("Remaining", str(check.remaining_articles))
    console.print(table)

    for error in check.errors:
        console.print(f"[red]❌ {error}[/red]")


def _prepare(
    articles_path: Path,
    pasted: bool,
    exclude: Optional[Path],
    ddn: Optional[Path],
    counts: Optional[List[str]],
    config: Config,
):
    articles = read_articles(articles_path, pasted)

    exclude_text = read_optional_text(exclude)
    if exclude_text:
        filtered = filter_allocated_articles(articles, exclude_text.split())
        articles = filtered.parsed_articles
        if filtered.filtered_out_count:
            shown = ", ".join(filtered.filtered_out_articles[:3])
            more = filtered.filtered_out_count - 3
            suffix = f" and {more} more" if more > 0 else ""
            console.print(
                f"[yellow]⚠️  {filtered.filtered_out_count} already allocated "
                f"and removed: {shown}{suffix}[/yellow]"
            )

    requesters = load_requesters(config, parse_counts(counts))
    ddn_text = read_optional_text(ddn)
    check = check_allocation(
        requesters,
        len(articles),
        ddn_text,
        [article.article_id for article in articles],
    )
    return articles, requesters, ddn_text, check


def allocate_command(
    articles_path: Path = typer.Argument(..., help="File with one 'ARTICLE_ID [PAGES]' per line"),
    counts: Optional[List[str]] = typer.Option(
        None,
        "--count",
        "-n",
        help="Requested count as LABEL=COUNT (repeatable)",
    ),
    ddn: Optional[Path] = typer.Option(None, "--ddn", "-d", help="File with DDN article ids, one per line"),
    method: Optional[str] = typer.Option(
        None,
        "--method",
        "-m",
        help="'allocate by pages' or 'allocate by priority'. Default: from config",
    ),
    pasted: bool = typer.Option(False, "--pasted", help="Input is text pasted from a spreadsheet"),
    exclude: Optional[Path] = typer.Option(
        None,
        "--exclude",
        help="File with article ids already allocated on earlier days",
    ),
    month: Optional[str] = typer.Option(None, "--month", help="Month stamp. Default: current month"),
    date: Optional[str] = typer.Option(None, "--date", help="Date stamp (DD/MM/YYYY). Default: today"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Where to write the allocation JSON"),
    allow_over: bool = typer.Option(False, "--allow-over", help="Allocate even when over-allocated"),
    preview: bool = typer.Option(False, "--preview", help="Print the flat preview rows as well"),
    copy: bool = typer.Option(False, "--copy", help="Print 'ARTICLE_ID NAME' lines for pasting"),
) -> None:
    """Allocate articles to the team and write the result as JSON."""
    try:
        config = Config()
        articles, requesters, ddn_text, check = _prepare(
            articles_path, pasted, exclude, ddn, counts, config
        )
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if not articles:
        console.print("[yellow]No articles to allocate.[/yellow]")
        raise typer.Exit(1)

    if check.ddn_validation_error:
        console.print(f"[red]❌ {check.ddn_validation_error}[/red]")
        raise typer.Exit(1)

    if check.is_over_allocated:
        print_check(check, len(articles))
        if not allow_over:
            console.print("[red]Refusing to allocate. Lower the counts or pass --allow-over.[/red]")
            raise typer.Exit(1)

    ddn_ids = validate_ddn_articles(ddn_text, []).articles
    allocation_method = normalize_method(method or config.config.allocation.default_method)
    default_month, default_date = current_month_and_date(config.config.timezone)
    month = month or default_month
    date = date or default_date

    result = build_final_allocation(
        requesters, articles, ddn_ids, allocation_method, month, date
    )

    console.print(f"[dim]Method: {allocation_method.value} - {len(articles)} articles[/dim]")
    print_allocation_summary(result)

    if preview:
        rows = build_preview(requesters, articles, ddn_ids, allocation_method, month, date)
        table = Table(title="Preview")
        for column in ("Done by", "Article", "Pages", "Month", "Date"):
            table.add_column(column)
        for row in rows.display_articles:
            table.add_row(row.name, row.article_id, str(row.pages), row.month, row.date)
        console.print(table)

    if copy:
        console.print(format_allocation_for_copy(result), markup=False, highlight=False)

    if output is None:
        stamp = pendulum.now(config.config.timezone).format("YYYY-MM-DD_HHmmss")
        output = config.output_dir / f"allocation_{stamp}.json"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(result.to_wire(), indent=2), encoding="utf-8")
    console.print(f"[green]✅ Allocation saved to: {output}[/green]")


def validate_command(
    articles_path: Path = typer.Argument(..., help="File with one 'ARTICLE_ID [PAGES]' per line"),
    counts: Optional[List[str]] = typer.Option(
        None,
        "--count",
        "-n",
        help="Requested count as LABEL=COUNT (repeatable)",
    ),
    ddn: Optional[Path] = typer.Option(None, "--ddn", "-d", help="File with DDN article ids, one per line"),
    pasted: bool = typer.Option(False, "--pasted", help="Input is text pasted from a spreadsheet"),
    exclude: Optional[Path] = typer.Option(
        None,
        "--exclude",
        help="File with article ids already allocated on earlier days",
    ),
) -> None:
    """Check DDN ids and requested counts without allocating."""
    try:
        config = Config()
        articles, _, _, check = _prepare(articles_path, pasted, exclude, ddn, counts, config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    print_check(check, len(articles))

    if check.errors:
        raise typer.Exit(1)

    console.print("[green]✅ Allocation is valid[/green]")
