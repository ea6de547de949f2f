from __future__ import annotations

import json
import logging
import subprocess

from prstatus_core.fetchers.base import PR_DETAIL_FIELDS, PR_LIST_FIELDS, BaseFetcher, FetchError

logger = logging.getLogger(__name__)


class GhCliFetcher(BaseFetcher):
    """Fetches pull requests by shelling out to the GitHub CLI.

    Authentication is whatever `gh auth login` (or GH_TOKEN) set up. When
    ``repo`` is None gh resolves the repository from the working directory.
    """

    def __init__(self, repo: str | None = None, gh_path: str = "gh"):
        self.repo = repo
        self.gh_path = gh_path

    def _fetch_pull_requests(self, limit: int) -> list[dict]:
        return self._run_json(
            ["pr", "list", "--state", "open", "--limit", str(limit), "--json", ",".join(PR_LIST_FIELDS)]
        )

    def _fetch_details(self, pr_number: int) -> dict:
        return self._run_json(["pr", "view", str(pr_number), "--json", ",".join(PR_DETAIL_FIELDS)])

    def _run_json(self, args: list[str]):
        cmd = [self.gh_path, *args]
        if self.repo:
            cmd += ["--repo", self.repo]
        logger.debug("Running %s", " ".join(cmd))

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8")
        except FileNotFoundError:
            raise FetchError(f"{self.gh_path} command not found")

        if result.returncode != 0:
            raise FetchError(f"`{' '.join(cmd)}` exited with {result.returncode}: {result.stderr.strip()}")

        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise FetchError(f"`{' '.join(cmd)}` returned invalid JSON: {e}")
