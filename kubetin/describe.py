"""Describe overlay helpers: titles, row references, scrolling and notices."""

from __future__ import annotations

from kubetin.actions import ResourceRef, truncate

REVEALED_NOTICE = (
    " ⚠ REVEALED — Secret values are in cleartext. Reveal logged to debug.log."
)
REDACTED_NOTICE = (
    " Secret values redacted. Press Shift-Y to reveal (logged to debug.log)."
)
CONFIGMAP_NOTICE = (
    " ConfigMap values are NOT redacted — review before sharing or pasting."
)


def describe_title(ref: ResourceRef) -> str:
    """'Kind/name · namespace', 'Kind/name' when cluster-scoped, '' without a name."""
    if not ref.name:
        return ""
    if ref.namespace:
        return f"{ref.kind}/{ref.name} · {ref.namespace}"
    return f"{ref.kind}/{ref.name}"


def ref_for_row(
    kind: str, namespace: str, name: str, resource_kind: str = ""
) -> ResourceRef | None:
    """The reference to describe for a table row, or None for an unknown kind.

    A namespace row coming from the OpenShift project API refers to a
    Project rather than a core Namespace.
    """
    if kind == "Pod":
        return ResourceRef(
            version="v1", resource="pods", kind="Pod", namespace=namespace, name=name
        )
    if kind == "Deployment":
        return ResourceRef(
            group="apps",
            version="v1",
            resource="deployments",
            kind="Deployment",
            namespace=namespace,
            name=name,
        )
    if kind == "Node":
        return ResourceRef(version="v1", resource="nodes", kind="Node", name=name)
    if kind in ("Namespace", "Project"):
        if resource_kind == "Project" or kind == "Project":
            return ResourceRef(
                group="project.openshift.io",
                version="v1",
                resource="projects",
                kind="Project",
                name=name,
            )
        return ResourceRef(
            version="v1", resource="namespaces", kind="Namespace", name=name
        )
    return None


def describe_window(yaml_text: str, scroll: int, height: int, width: int) -> list[str]:
    """The lines of yaml_text visible at scroll offset, each cut to width.

    At most height lines are returned; scrolling past the end is clamped
    so the last page stays full.
    """
    if height <= 0:
        return []
    lines = yaml_text.split("\n")
    start = max(min(scroll, len(lines) - height), 0)
    return [truncate(line, width) for line in lines[start : start + height]]


def describe_notices(
    kind: str, revealed: bool, redacted: bool, loading: bool, err: str
) -> list[str]:
    """Warnings shown under the describe body.

    A revealed Secret always shows the cleartext banner; otherwise
    redacted values get a hint. ConfigMaps carry a reminder that their
    values are shown as they are.
    """
    notices: list[str] = []
    if revealed and kind == "Secret":
        notices.append(REVEALED_NOTICE)
    elif redacted:
        notices.append(REDACTED_NOTICE)
    if kind == "ConfigMap" and not err and not loading:
        notices.append(CONFIGMAP_NOTICE)
    return notices