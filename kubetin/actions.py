"""Action menu entries, their RBAC gates and per-row classification."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum


@dataclass(frozen=True)
class ResourceRef:
    """Identifies one Kubernetes object by group/version/resource, kind and name."""

    group: str = ""
    version: str = ""
    resource: str = ""
    kind: str = ""
    namespace: str = ""
    name: str = ""


class Action(IntEnum):
    """A single action menu entry."""

    DESCRIBE = 0
    LOGS = 1
    EXEC = 2
    EVENTS = 3
    SCALE = 4
    RESTART = 5
    CORDON = 6
    UNCORDON = 7
    DRAIN = 8
    SET_NAMESPACE = 9
    DELETE = 10

    def label(self) -> str:
        """Text shown for the entry in the menu."""
        return _ACTION_LABELS.get(self, "?")

    def destructive(self) -> bool:
        """Whether the action needs an extra confirmation step."""
        return self in (Action.DELETE, Action.DRAIN)


_ACTION_LABELS = {
    Action.DESCRIBE: "Describe",
    Action.LOGS: "Logs",
    Action.EXEC: "Shell",
    Action.EVENTS: "Events",
    Action.SCALE: "Scale",
    Action.RESTART: "Restart (Rollout)",
    Action.CORDON: "Cordon",
    Action.UNCORDON: "Uncordon",
    Action.DRAIN: "Drain",
    Action.SET_NAMESPACE: "Set as active namespace",
    Action.DELETE: "Delete",
}


class ActionStatus(Enum):
    """RBAC state of one menu row at render time."""

    ALLOWED = "allowed"
    PENDING = "pending"
    DENIED = "denied"


@dataclass(frozen=True)
class ActionItem:
    """An action with its RBAC status; reason is set for denials."""

    action: Action
    status: ActionStatus
    reason: str = ""


@dataclass(frozen=True)
class ActionVerb:
    """The (verb, group, resource) needed to gate an action."""

    verb: str
    group: str
    resource: str


@dataclass(frozen=True)
class RbacProbe:
    """One row of the RBAC overview: a labelled permission check."""

    group: str
    action: str
    verb: str
    api_group: str
    resource: str


@dataclass(frozen=True)
class PermissionState:
    """Cached result of one access review."""

    allowed: bool
    reason: str = ""
    err: str = ""


def permission_key(
    context: str, verb: str, group: str, resource: str, namespace: str
) -> str:
    """Cache key for one access review in one cluster and namespace."""
    return "\x1f".join((context, verb, group, resource, namespace))


_ACTIONS_BY_KIND: dict[str, tuple[Action, ...]] = {
    "Pod": (Action.DESCRIBE, Action.LOGS, Action.EXEC, Action.EVENTS, Action.DELETE),
    "Deployment": (
        Action.DESCRIBE,
        Action.SCALE,
        Action.RESTART,
        Action.LOGS,
        Action.EVENTS,
        Action.DELETE,
    ),
    "Node": (Action.DESCRIBE, Action.EVENTS, Action.CORDON, Action.UNCORDON, Action.DRAIN),
    "Namespace": (Action.SET_NAMESPACE, Action.DESCRIBE, Action.EVENTS, Action.DELETE),
    "Project": (Action.SET_NAMESPACE, Action.DESCRIBE, Action.EVENTS, Action.DELETE),
}


def actions_for(kind: str) -> list[Action]:
    """Menu actions applicable to a kind; Node lists both Cordon and Uncordon."""
    return list(_ACTIONS_BY_KIND.get(kind, (Action.DESCRIBE,)))


_FIXED_VERBS = {
    Action.LOGS: ActionVerb("get", "", "pods/log"),
    Action.SCALE: ActionVerb("update", "apps", "deployments/scale"),
    Action.RESTART: ActionVerb("patch", "apps", "deployments"),
    Action.EVENTS: ActionVerb("list", "", "events"),
    Action.EXEC: ActionVerb("create", "", "pods/exec"),
    Action.CORDON: ActionVerb("patch", "", "nodes"),
    Action.UNCORDON: ActionVerb("patch", "", "nodes"),
    Action.DRAIN: ActionVerb("create", "", "pods/eviction"),
}


def verbs_for_action(action: Action, ref: ResourceRef) -> ActionVerb | None:
    """The permission gating an action on ref, or None when it is ungated."""
    if action is Action.DELETE:
        return ActionVerb("delete", ref.group, ref.resource)
    return _FIXED_VERBS.get(action)


def rbac_probe_set() -> list[RbacProbe]:
    """Every permission the action menu gates on, grouped by kind."""
    return [
        RbacProbe("Pods", "Logs", "get", "", "pods/log"),
        RbacProbe("Pods", "Exec", "create", "", "pods/exec"),
        RbacProbe("Pods", "Delete", "delete", "", "pods"),
        RbacProbe("Pods", "Events (list)", "list", "", "events"),
        RbacProbe("Deployments", "Scale", "update", "apps", "deployments/scale"),
        RbacProbe("Deployments", "Restart (patch)", "patch", "apps", "deployments"),
        RbacProbe("Deployments", "Delete", "delete", "apps", "deployments"),
        RbacProbe("Nodes", "Cordon / Uncordon", "patch", "", "nodes"),
        RbacProbe("Nodes", "Drain (evict pods)", "create", "", "pods/eviction"),
        RbacProbe("Nodes", "Delete", "delete", "", "nodes"),
        RbacProbe("Namespaces", "Delete", "delete", "", "namespaces"),
    ]


def classify_actions(
    ref: ResourceRef,
    context: str,
    permissions: Mapping[str, PermissionState],
    node_schedulable: bool | None = None,
) -> list[ActionItem]:
    """Tag each applicable action with its RBAC status.

    For a node whose schedulable state is known, only the one of
    Cordon/Uncordon that would change something is kept. Gates missing
    from the cache are reported as pending.
    """
    items: list[ActionItem] = []
    for action in actions_for(ref.kind):
        if ref.kind == "Node" and node_schedulable is not None:
            if action is Action.CORDON and not node_schedulable:
                continue
            if action is Action.UNCORDON and node_schedulable:
                continue
        gate = verbs_for_action(action, ref)
        if gate is None:
            items.append(ActionItem(action, ActionStatus.ALLOWED))
            continue
        key = permission_key(context, gate.verb, gate.group, gate.resource, ref.namespace)
        state = permissions.get(key)
        if state is None:
            items.append(ActionItem(action, ActionStatus.PENDING))
        elif state.allowed:
            items.append(ActionItem(action, ActionStatus.ALLOWED))
        else:
            items.append(ActionItem(action, ActionStatus.DENIED, state.reason))
    return items


def first_selectable(items: Iterable[ActionItem] | None) -> int:
    """Index of the first allowed item, or 0 when none is allowed."""
    return next(
        (i for i, it in enumerate(items or ()) if it.status is ActionStatus.ALLOWED),
        0,
    )


def action_menu_title(ref: ResourceRef) -> str:
    """'<Kind> Actions', or 'Actions' when the kind is unknown."""
    return f"{ref.kind} Actions" if ref.kind else "Actions"


def action_menu_resource(ref: ResourceRef) -> str:
    """'namespace/name', just the name for cluster-scoped objects, or ''."""
    if not ref.name:
        return ""
    return f"{ref.namespace}/{ref.name}" if ref.namespace else ref.name


def truncate(s: str, n: int) -> str:
    """Shorten s to at most n characters, ending in '…' when cut."""
    if n <= 0:
        return ""
    if len(s) <= n:
        return s
    if n == 1:
        return s[0]
    return s[: n - 1] + "…"


def _cell_width(s: str) -> int:
    width = 0
    for ch in s:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


def center_line(s: str, width: int) -> str:
    """Centre s in a field of width cells, truncating when too long."""
    if width <= 0:
        return ""
    text = truncate(s, width)
    w = _cell_width(text)
    if w >= width:
        return text
    left = (width - w) // 2
    right = width - w - left
    return " " * left + text + " " * right


def prune_choices(items: Sequence[ActionItem]) -> list[Action]:
    """The actions among items that can be chosen now."""
    return [it.action for it in items if it.status is ActionStatus.ALLOWED]