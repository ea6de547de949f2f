from __future__ import annotations

from prstatus_core.fetchers.base import BaseFetcher

BACKENDS = ("gh", "api")


def build_fetcher(config: dict) -> BaseFetcher:
    """Instantiate the configured fetch backend.

    Backend selection:
      backend: gh  → GhCliFetcher (repo optional, gh infers it from cwd)
      backend: api → ApiFetcher   (requires repo and github_token)
    """
    backend = config.get("backend", "gh")

    if backend == "gh":
        from prstatus_core.fetchers.gh_cli import GhCliFetcher

        return GhCliFetcher(repo=config.get("repo"))

    if backend == "api":
        from prstatus_core.fetchers.api import ApiFetcher

        if not config.get("repo"):
            raise ValueError("The api backend needs a repository (owner/name).")
        if not config.get("github_token"):
            raise ValueError("The api backend needs a GitHub token. Set GITHUB_TOKEN or run `gh auth login`.")
        return ApiFetcher(repo=config["repo"], token=config["github_token"])

    raise ValueError(f"Unknown backend: {backend!r}. Choose one of: {', '.join(BACKENDS)}.")
