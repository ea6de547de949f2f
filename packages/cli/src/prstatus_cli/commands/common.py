"""Shared setup for the commands that fetch pull requests."""

from __future__ import annotations

import click

from prstatus_cli.git import detect_repo_from_git
from prstatus_core.config import LOCALES, apply_overrides, load_config, load_labels, resolve_limit
from prstatus_core.fetchers.base import BaseFetcher
from prstatus_core.fetchers.factory import BACKENDS, build_fetcher
from prstatus_core.preflight import PrerequisiteError, check_prerequisites


def fetch_options(f):
    """Attach the --repo/--backend/--limit/--locale options shared by fetching commands."""
    options = [
        click.option("--repo", default=None, help="GitHub repository (owner/name). Overrides config file."),
        click.option("--backend", type=click.Choice(BACKENDS), default=None, help="Fetch backend."),
        click.option("--limit", type=int, default=None, help="Maximum number of open PRs (1-100)."),
        click.option("--locale", type=click.Choice(sorted(LOCALES)), default=None, help="Label language."),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def prepare_fetch(ctx: click.Context, **overrides) -> tuple[dict, BaseFetcher]:
    """Merge CLI overrides, run the preflight check and build the fetcher.

    Missing tools abort with exit code 1; configuration mistakes are usage
    errors (exit code 2).
    """
    base = ctx.obj.get("config") if ctx.obj else None
    config = apply_overrides(base if base is not None else load_config(), overrides)

    try:
        check_prerequisites(config.get("required_tools") or [])
    except PrerequisiteError as e:
        raise click.ClickException(str(e))

    if config.get("backend") == "api" and not config.get("repo"):
        config["repo"] = detect_repo_from_git()

    try:
        load_labels(config)
        resolve_limit(config)
        fetcher = build_fetcher(config)
    except ValueError as e:
        raise click.UsageError(str(e))

    return config, fetcher
