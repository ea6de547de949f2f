"""generate command: write the PR status page."""

from __future__ import annotations

import click
from rich.console import Console

from prstatus_cli.commands.common import fetch_options, prepare_fetch
from prstatus_core.fetchers.base import FetchError
from prstatus_core.report import generate_report

console = Console()


@click.command("generate")
@click.argument("output_dir", default=".", type=click.Path(file_okay=False))
@fetch_options
@click.pass_context
def generate_cmd(ctx, output_dir: str, repo: str | None, backend: str | None, limit: int | None, locale: str | None):
    """Write the status table of open pull requests to OUTPUT_DIR/PR_Status.md.

    OUTPUT_DIR defaults to the current directory and is created if missing.
    The file is overwritten on every run. Point it at a checked-out wiki
    repository to publish the page.
    """
    config, fetcher = prepare_fetch(ctx, repo=repo, backend=backend, limit=limit, locale=locale)

    try:
        path = generate_report(fetcher, config, output_dir)
    except FetchError as e:
        raise click.ClickException(str(e))

    console.print(f"[green]PR status written to {path}[/green]")
