"""Token lookup for the `api` backend.

The `gh` backend never needs this: gh authenticates itself. The api backend
accepts the same sources gh does, so a machine that can run `gh pr list`
can also run `prstatus generate --backend api`.
"""

from __future__ import annotations

import logging
import os
import subprocess

logger = logging.getLogger(__name__)

# Checked in order. GH_TOKEN is the variable gh itself reads in Actions.
TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")


def _token_from_env() -> str | None:
    for name in TOKEN_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            logger.debug("Using GitHub token from %s.", name)
            return value
    return None


def _token_from_gh_session(timeout: float) -> str | None:
    try:
        result = subprocess.run(["gh", "auth", "token"], capture_output=True, text=True, timeout=timeout)
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        logger.debug("gh auth token unavailable: %s", type(e).__name__)
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def resolve_github_token(timeout: float = 5) -> str | None:
    """Return a token from the environment or the gh session, else None.

    Returns None instead of raising; the fetcher factory reports the
    missing token as a usage error when the api backend is selected.
    """
    return _token_from_env() or _token_from_gh_session(timeout)
