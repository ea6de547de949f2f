"""CLI entry point for prstatus.

Commands:
  generate: write the open-PR status table to <OUTPUT_DIR>/PR_Status.md
  show    : print the same table to the terminal
  init    : interactive setup wizard (.prstatus.yml + GitHub Actions workflow)
"""

from __future__ import annotations

import importlib.metadata
import logging

import click

from prstatus_cli.commands.generate import generate_cmd
from prstatus_cli.commands.init import init_cmd
from prstatus_cli.commands.show import show_cmd

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(
    version=importlib.metadata.version("prstatus"),
    prog_name="prstatus",
)
@click.option(
    "--config",
    "config_path",
    default=".prstatus.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="PRSTATUS_CONFIG",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Verbosity of the diagnostic stream (stderr). INFO echoes raw API payloads.",
    envvar="PRSTATUS_LOG_LEVEL",
)
@click.pass_context
def main(ctx: click.Context, config_path: str, log_level: str):
    """Render the review status of open GitHub pull requests as a Markdown table."""
    from prstatus_core.config import load_config
    from prstatus_cli.auth import resolve_github_token

    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    ctx.ensure_object(dict)

    config = load_config(config_path)

    # Resolve token early so all subcommands share the same resolution.
    token = resolve_github_token()
    if token:
        config["github_token"] = token

    ctx.obj["config"] = config


main.add_command(generate_cmd)
main.add_command(show_cmd)
main.add_command(init_cmd)
