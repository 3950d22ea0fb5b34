"""Cluster event rows: scoping, recent-warning lookup and grouping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta

WARN_RECENCY = timedelta(minutes=10)
"""How recent a Warning must be to mark its object as currently warning."""


def _ts(when: datetime | None) -> float:
    return when.timestamp() if when is not None else float("-inf")


@dataclass(frozen=True)
class EventRow:
    """A single observed Event object."""

    uid: str
    namespace: str = ""
    reason: str = ""
    message: str = ""
    type: str = ""
    count: int = 0
    first_seen: datetime | None = None
    last_seen: datetime | None = None
    involved_kind: str = ""
    involved_name: str = ""
    involved_ns: str = ""


@dataclass(frozen=True)
class EventGroup:
    """Events sharing one (reason, message) pair, with their counts summed."""

    reason: str
    message: str
    type: str
    count: int
    last_seen: datetime | None
    involved_kind: str
    involved_name: str
    involved_ns: str


@dataclass(frozen=True)
class EventScope:
    """Restricts events to one involved object, matched exactly."""

    kind: str
    namespace: str
    name: str

    def matches(self, row: EventRow) -> bool:
        """Whether the row's involved object is this scope's object."""
        return (
            row.involved_kind == self.kind
            and row.involved_name == self.name
            and row.involved_ns == self.namespace
        )


def warn_key(kind: str, namespace: str, name: str) -> str:
    """Key used by recent_warning_index."""
    return f"{kind}/{namespace}/{name}"


def recent_warning_index(events: Mapping[str, EventRow], now: datetime) -> set[str]:
    """Keys of objects with a Warning seen within WARN_RECENCY of now."""
    cutoff = _ts(now - WARN_RECENCY)
    return {
        warn_key(e.involved_kind, e.involved_ns, e.involved_name)
        for e in events.values()
        if e.type == "Warning" and _ts(e.last_seen) >= cutoff
    }


def scoped_events(
    rows: Mapping[str, EventRow], scope: EventScope | None
) -> dict[str, EventRow]:
    """Rows matching scope; all rows when scope is None.

    Filter before grouping, so group counts only include the scoped object.
    """
    if scope is None:
        return dict(rows)
    return {uid: r for uid, r in rows.items() if scope.matches(r)}


def group_events(rows: Mapping[str, EventRow]) -> list[EventGroup]:
    """Group by (reason, message), newest first, reason breaking ties.

    The representative object of a group is the most recently seen one,
    and Warning wins over Normal as the group type.
    """
    groups: dict[tuple[str, str], dict] = {}
    for r in rows.values():
        key = (r.reason, r.message)
        g = groups.get(key)
        if g is None:
            g = groups[key] = {
                "reason": r.reason,
                "message": r.message,
                "type": r.type,
                "count": 0,
                "last_seen": r.last_seen,
                "involved_kind": r.involved_kind,
                "involved_name": r.involved_name,
                "involved_ns": r.involved_ns,
            }
        g["count"] += r.count
        if _ts(r.last_seen) > _ts(g["last_seen"]):
            g["last_seen"] = r.last_seen
            g["involved_kind"] = r.involved_kind
            g["involved_name"] = r.involved_name
            g["involved_ns"] = r.involved_ns
        if r.type == "Warning":
            g["type"] = "Warning"

    out = sorted((EventGroup(**g) for g in groups.values()), key=lambda g: g.reason)
    out.sort(key=lambda g: _ts(g.last_seen), reverse=True)
    return out


def total_event_count(groups: Iterable[EventGroup]) -> int:
    """Sum of the counts of all groups."""
    return sum(g.count for g in groups)