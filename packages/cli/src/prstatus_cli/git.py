from __future__ import annotations

import re
import subprocess

# https://github.com/owner/repo(.git), ssh://git@github.com/owner/repo, git@github.com:owner/repo.git
_GITHUB_REMOTE_RE = re.compile(r"github\.com[:/](?P<owner>[^/\s]+)/(?P<name>[^/\s]+?)(?:\.git)?/?$")


def parse_github_slug(url: str) -> str | None:
    """Return ``owner/name`` for a github.com remote URL, or None."""
    match = _GITHUB_REMOTE_RE.search(url.strip())
    if not match:
        return None
    return f"{match['owner']}/{match['name']}"


def detect_repo_from_git(remote: str = "origin") -> str | None:
    """Read ``remote``'s URL from the working copy and parse it."""
    try:
        result = subprocess.run(
            ["git", "remote", "get-url", remote],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return parse_github_slug(result.stdout)
