import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "backend": "gh",
    "repo": None,  # None = let gh infer the repository from the working directory
    "limit": 100,
    "output_filename": "PR_Status.md",
    "locale": "en",
    "labels": {},  # per-key overrides on top of the locale's labels
    "required_tools": ["gh", "jq"],
}

MAX_LIMIT = 100

LOCALES: dict[str, dict[str, str]] = {
    "en": {
        "title": "Pull Request Status",
        "updated": "Updated",
        "column_number": "PR#",
        "column_title": "Title",
        "column_author": "Author",
        "column_reviewers": "Reviewers",
        "column_created": "Created",
        "column_updated": "Updated",
        "draft": "Draft",
        "approved": "Approved",
        "changes_requested": "Changes requested",
        "in_review": "In review",
        "not_reviewed": "Not reviewed",
        "unassigned": "Unassigned",
    },
    "ja": {
        "title": "Pull Request Status",
        "updated": "Updated",
        "column_number": "PR#",
        "column_title": "タイトル",
        "column_author": "作成者",
        "column_reviewers": "レビュワー",
        "column_created": "作成日",
        "column_updated": "更新日",
        "draft": "ドラフト",
        "approved": "承認済み",
        "changes_requested": "修正依頼",
        "in_review": "レビュー中",
        "not_reviewed": "未レビュー",
        "unassigned": "未割当",
    },
}


def apply_overrides(config: dict, overrides: Optional[dict]) -> dict:
    """Return a copy of ``config`` with every non-None override applied."""
    merged = dict(config)
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    return merged


def load_config(config_path: str = ".prstatus.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .prstatus.yml in the current directory
      3. CLI argument overrides
    """
    config = {
        **DEFAULT_CONFIG,
        "labels": dict(DEFAULT_CONFIG["labels"]),
        "required_tools": list(DEFAULT_CONFIG["required_tools"]),
    }

    path = Path(config_path)
    if path.exists():
        with open(path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    config = apply_overrides(config, cli_overrides)

    config["github_token"] = os.environ.get("GITHUB_TOKEN")

    return config


def load_labels(config: dict) -> dict[str, str]:
    """
    Resolve display labels for the configured locale.

    Keys under ``labels`` in the config replace individual entries, so a team
    can rename a single status without defining a whole locale.
    """
    locale = config.get("locale") or "en"
    if locale not in LOCALES:
        raise ValueError(f"Unknown locale: {locale!r}. Choose one of: {', '.join(sorted(LOCALES))}.")
    labels = dict(LOCALES[locale])
    labels.update(config.get("labels") or {})
    return labels


def resolve_limit(config: dict) -> int:
    limit = config.get("limit")
    limit = MAX_LIMIT if limit is None else int(limit)
    if not 1 <= limit <= MAX_LIMIT:
        raise ValueError(f"limit must be between 1 and {MAX_LIMIT}, got {limit}.")
    return limit
