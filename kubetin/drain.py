"""Progress tracking and summaries for draining a node."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class DrainProgress:
    """Live state of one drain, built up from progress events.

    Pods blocked by a disruption budget are collected as
    ``"ns/name (reason)"`` lines so the user can see what is stuck.
    Evicted pods only move the ``done`` counter.
    """

    node: str
    context: str = ""
    current: str = ""
    done: int = 0
    total: int = 0
    blocked: list[str] = field(default_factory=list)
    phase: str = "starting"
    err: str = ""

    def apply(self, phase: str, pod: str = "", done: int = 0, total: int = 0, err: str = "") -> None:
        """Fold one progress event into the state.

        A zero total does not overwrite a known total, and done never
        goes backwards.
        """
        self.phase = phase
        if total > 0:
            self.total = total
        if done > self.done:
            self.done = done
        if phase == "evicting":
            self.current = pod
        elif phase == "blocked":
            self.blocked.append(f"{pod} ({err})")

    def status_line(self) -> str:
        """One line describing where the drain stands; empty for unknown phases."""
        if self.phase == "starting":
            return " cordoning + listing pods…"
        if self.phase == "evicting":
            return f" {self.done} / {self.total} evicted    evicting {self.current}"
        if self.phase in ("evicted", "blocked"):
            return f" {self.done} / {self.total} evicted"
        return ""

    def blocked_tail(self, limit: int = 5) -> tuple[int, list[str]]:
        """Return (number omitted, the last ``limit`` blocked lines)."""
        if limit < 0:
            raise ValueError("limit must not be negative")
        omitted = max(len(self.blocked) - limit, 0)
        return omitted, list(self.blocked[omitted:])


def drain_summary(
    node: str, done: int, total: int, err: str = "", blocked: Sequence[str] = ()
) -> str:
    """The one-line message shown when a drain finishes."""
    if err:
        return f"✕ Drain {node}: {err}"
    if blocked:
        return f"⚠ Drained {node}: {done}/{total} ({len(blocked)} blocked by PDB)"
    return f"✓ Drained {node}: {done}/{total}"