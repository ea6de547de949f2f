"""show command: print the PR status table to the terminal."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from prstatus_cli.commands.common import fetch_options, prepare_fetch
from prstatus_core.config import load_labels, resolve_limit
from prstatus_core.fetchers.base import FetchError
from prstatus_core.report import collect_rows
from prstatus_core.status import format_reviewers

console = Console()

_STATUS_STYLE = {
    "draft": "dim",
    "approved": "green",
    "changes_requested": "red",
    "in_review": "yellow",
    "not_reviewed": "white",
}


@click.command("show")
@fetch_options
@click.pass_context
def show_cmd(ctx, repo: str | None, backend: str | None, limit: int | None, locale: str | None):
    """Print the status of open pull requests without writing any file."""
    config, fetcher = prepare_fetch(ctx, repo=repo, backend=backend, limit=limit, locale=locale)
    labels = load_labels(config)

    try:
        rows = collect_rows(fetcher, resolve_limit(config))
    except FetchError as e:
        raise click.ClickException(str(e))

    if not rows:
        console.print("[yellow]No open pull requests found.[/yellow]")
        return

    table = Table(title=labels["title"], show_header=True, header_style="bold cyan")
    table.add_column(labels["column_number"], style="bold", width=6)
    table.add_column(labels["column_title"], max_width=50)
    table.add_column(labels["column_author"])
    table.add_column(labels["column_reviewers"])
    table.add_column(labels["column_created"], width=10)
    table.add_column(labels["column_updated"], width=10)

    for row in rows:
        pr = row.pull_request
        style = _STATUS_STYLE.get(row.status, "white")
        table.add_row(
            pr.number_label,
            f"{escape(pr.title)}\n[{style}]({escape(labels[row.status])})[/{style}]",
            escape(pr.author),
            escape(format_reviewers(row.reviewers, unassigned=labels["unassigned"], separator="\n")),
            pr.created_date,
            pr.updated_date,
        )

    console.print(table)
