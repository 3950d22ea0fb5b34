"""Deployment rows: ordering, filtering and cursor-centred windowing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class DeploymentRow:
    """One deployment as shown in the deployments table."""

    uid: str
    namespace: str = ""
    name: str = ""
    replicas: int = 0
    ready: int = 0
    up_to_date: int = 0
    available: int = 0
    created_at: datetime | None = None
    updated: datetime | None = None


def _rows_of(
    rows: Mapping[str, DeploymentRow] | Iterable[DeploymentRow],
) -> Iterable[DeploymentRow]:
    return rows.values() if isinstance(rows, Mapping) else rows


def sorted_deploy_rows(
    rows: Mapping[str, DeploymentRow] | Iterable[DeploymentRow],
) -> list[DeploymentRow]:
    """Rows ordered by namespace, then name."""
    return sorted(_rows_of(rows), key=lambda r: (r.namespace, r.name))


def filter_deploy_rows(
    rows: Iterable[DeploymentRow], namespace: str = "", filter_text: str = ""
) -> list[DeploymentRow]:
    """Keep rows in the namespace (if set) whose name or namespace holds the text.

    The text match is case-insensitive; the input order is kept.
    """
    needle = filter_text.lower()
    return [
        r
        for r in rows
        if (not namespace or r.namespace == namespace)
        and (not needle or needle in r.name.lower() or needle in r.namespace.lower())
    ]


def window_around(rows: Sequence[T], cursor_index: int, max_rows: int) -> list[T]:
    """The slice of rows shown in a table of max_rows lines, one being the header.

    The window is centred on the cursor where possible and clamped to the
    ends; a negative cursor index counts as the first row.
    """
    rows = list(rows)
    visible = max_rows - 1
    if max_rows <= 0 or len(rows) <= visible:
        return rows
    idx = max(cursor_index, 0)
    start = max(idx - visible // 2, 0)
    end = start + visible
    if end > len(rows):
        end = len(rows)
        start = max(end - visible, 0)
    return rows[start:end]


def ready_status(row: DeploymentRow) -> tuple[str, str]:
    """Return the READY cell text and its severity: "ok", "warn" or "bad".

    Fewer ready than wanted replicas is a warning; none ready while some
    are wanted is bad.
    """
    text = f"{row.ready}/{row.replicas}"
    if row.ready == 0 and row.replicas > 0:
        return text, "bad"
    if row.ready < row.replicas:
        return text, "warn"
    return text, "ok"