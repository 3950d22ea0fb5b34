"""Choosing the container to open a shell in."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from kubetin.actions import ResourceRef

DEFAULT_SHELL = ("/bin/sh",)


@dataclass
class ContainerPicker:
    """Cursor over the containers of a pod with more than one."""

    ref: ResourceRef
    containers: list[str]
    cursor: int = 0
    shell: list[str] = field(default_factory=lambda: list(DEFAULT_SHELL))

    def move(self, delta: int) -> None:
        """Move the cursor by delta, staying within the list."""
        last = max(len(self.containers) - 1, 0)
        self.cursor = min(max(self.cursor + delta, 0), last)

    def first(self) -> None:
        """Put the cursor on the first container."""
        self.cursor = 0

    def last(self) -> None:
        """Put the cursor on the last container."""
        self.cursor = max(len(self.containers) - 1, 0)

    def selected(self) -> str:
        """The container under the cursor; IndexError when there is none."""
        if not self.containers:
            raise IndexError("no containers to pick from")
        return self.containers[self.cursor]


def pick_exec_target(containers: Sequence[str]) -> str | None:
    """The container to exec into directly, or None when the user must choose.

    Raises ValueError when the pod has no known containers.
    """
    if not containers:
        raise ValueError("Exec: no containers known for this pod")
    if len(containers) == 1:
        return containers[0]
    return None