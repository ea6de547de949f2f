"""Prerequisite checks run before any fetch."""

from __future__ import annotations

import logging
import shutil

logger = logging.getLogger(__name__)


class PrerequisiteError(Exception):
    """A required external command is not on PATH."""


def missing_tools(tools: list[str]) -> list[str]:
    return [tool for tool in tools if shutil.which(tool) is None]


def check_prerequisites(tools: list[str]) -> None:
    """Raise PrerequisiteError naming the first tool that cannot be found."""
    missing = missing_tools(tools)
    if missing:
        raise PrerequisiteError(f"Required command not found: {missing[0]}")
    logger.debug("Prerequisites present: %s", ", ".join(tools) or "(none)")
