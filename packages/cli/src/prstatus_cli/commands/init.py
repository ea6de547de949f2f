"""init command: interactive setup wizard.

Writes .prstatus.yml and, optionally, a GitHub Actions workflow that
regenerates PR_Status.md in the repository wiki whenever PRs or reviews
change.
"""

from __future__ import annotations

import importlib.metadata
from pathlib import Path

import click
import yaml
from rich.console import Console

from prstatus_cli.git import detect_repo_from_git
from prstatus_core.config import LOCALES
from prstatus_core.fetchers.factory import BACKENDS

console = Console()

_WORKFLOW_TEMPLATE = """\
name: PR Status

on:
  pull_request:
    types: [opened, reopened, synchronize, closed, ready_for_review, converted_to_draft, review_requested]
  pull_request_review:
    types: [submitted, dismissed]
  schedule:
    - cron: "0 0 * * *"
  workflow_dispatch:

concurrency:
  group: pr-status
  cancel-in-progress: false

jobs:
  status:
    runs-on: ubuntu-latest
    permissions:
      contents: write
      pull-requests: read

    steps:
      - uses: actions/checkout@v4

      - name: Check out wiki
        uses: actions/checkout@v4
        with:
          repository: ${{{{ github.repository }}}}.wiki
          path: wiki

      - name: Set up Python
        uses: actions/setup-python@v5
        with:
          python-version: "3.12"

      - name: Install prstatus
        run: pip install "prstatus=={version}"

      - name: Generate PR status page
        env:
          GH_TOKEN: ${{{{ secrets.GITHUB_TOKEN }}}}
          GITHUB_TOKEN: ${{{{ secrets.GITHUB_TOKEN }}}}
        run: prstatus generate wiki --backend {backend}

      - name: Publish wiki
        working-directory: wiki
        run: |
          git config user.name "github-actions[bot]"
          git config user.email "41898282+github-actions[bot]@users.noreply.github.com"
          git add {filename}
          git diff --cached --quiet || git commit -m "Update PR status"
          git push
"""


@click.command("init")
@click.option("--repo", default=None, help="GitHub repository (owner/name). Auto-detected from git remote.")
def init_cmd(repo: str | None):
    """Set up prstatus for a repository.

    Creates .prstatus.yml and optionally a GitHub Actions workflow that keeps
    the wiki's PR_Status.md page current.
    """
    console.print("\n[bold cyan]prstatus init[/bold cyan] setup wizard\n")

    if repo is None:
        repo = detect_repo_from_git()
        if repo:
            console.print(f"[dim]Detected repository: {repo}[/dim]")
        else:
            repo = click.prompt("GitHub repository (owner/name)")

    console.print("\nFetch backend:")
    console.print("  [bold]gh[/bold]  : GitHub CLI, uses your `gh auth login` session (default)")
    console.print("  [bold]api[/bold] : GitHub REST API via GITHUB_TOKEN")
    backend = click.prompt("Backend", type=click.Choice(BACKENDS), default="gh")

    locale = click.prompt("Label language", type=click.Choice(sorted(LOCALES)), default="en")

    config: dict = {"repo": repo, "backend": backend, "locale": locale}
    if backend == "api":
        # The api backend talks to GitHub directly; no external tools needed.
        config["required_tools"] = []

    _write_config(config)
    console.print("[green]Created .prstatus.yml[/green]")

    setup_ci = click.confirm("\nGenerate .github/workflows/prstatus.yml for GitHub Actions?", default=True)
    if setup_ci:
        _write_workflow(backend)
        console.print("[green]Created .github/workflows/prstatus.yml[/green]")
        console.print(
            "\n[yellow]The workflow pushes to the repository wiki. Create the first wiki page "
            "on GitHub so the wiki repository exists.[/yellow]"
        )

    console.print("\n[bold green]Setup complete![/bold green]")
    console.print("Generate the page with: [bold]prstatus generate <output-dir>[/bold]")


def _write_config(config: dict) -> None:
    """Write or update .prstatus.yml, preserving any existing keys."""
    path = Path(".prstatus.yml")
    existing: dict = {}
    if path.exists():
        existing = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    existing.update(config)
    path.write_text(yaml.dump(existing, default_flow_style=False, sort_keys=False, allow_unicode=True), encoding="utf-8")


def _get_version() -> str:
    try:
        return importlib.metadata.version("prstatus")
    except importlib.metadata.PackageNotFoundError:
        return "0.1.0"


def _write_workflow(backend: str, filename: str = "PR_Status.md") -> None:
    workflow_dir = Path(".github/workflows")
    workflow_dir.mkdir(parents=True, exist_ok=True)
    workflow_path = workflow_dir / "prstatus.yml"
    workflow_path.write_text(_WORKFLOW_TEMPLATE.format(version=_get_version(), backend=backend, filename=filename))
