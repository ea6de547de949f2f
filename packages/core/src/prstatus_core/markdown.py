"""Markdown rendering of the PR status page."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from prstatus_core.status import format_reviewers

if TYPE_CHECKING:
    from prstatus_core.report import StatusRow

_COLUMNS = ("column_number", "column_title", "column_author", "column_reviewers", "column_created", "column_updated")


def escape_cell(text: str) -> str:
    """Flatten newlines and escape pipes so text stays inside one table cell."""
    return " ".join(text.splitlines()).replace("|", "\\|")


def _table_line(cells) -> str:
    return "| " + " | ".join(cells) + " |"


def render_header(labels: dict[str, str], generated_at: datetime) -> str:
    lines = [
        f"# {labels['title']}",
        "",
        f"{labels['updated']}: {generated_at:%Y-%m-%d %H:%M:%S}",
        "",
        _table_line(labels[c] for c in _COLUMNS),
        _table_line("---" for _ in _COLUMNS),
    ]
    return "\n".join(lines) + "\n"


def render_row(row: StatusRow, labels: dict[str, str]) -> str:
    pr = row.pull_request
    title_cell = f"[{escape_cell(pr.title)}]({pr.url})<br>({labels[row.status]})"
    return _table_line(
        [
            pr.number_label,
            title_cell,
            escape_cell(pr.author),
            escape_cell(format_reviewers(row.reviewers, unassigned=labels["unassigned"])),
            pr.created_date,
            pr.updated_date,
        ]
    )


def render_document(rows: list[StatusRow], labels: dict[str, str], generated_at: datetime) -> str:
    return render_header(labels, generated_at) + "".join(render_row(r, labels) + "\n" for r in rows)


def write_document(content: str, output_dir: str | Path = ".", filename: str = "PR_Status.md") -> Path:
    """Overwrite ``output_dir/filename`` with ``content``, creating the directory."""
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(content, encoding="utf-8")
    return path
