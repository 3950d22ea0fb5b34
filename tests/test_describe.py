from kubetin.actions import ResourceRef
from kubetin.describe import (
    CONFIGMAP_NOTICE,
    REDACTED_NOTICE,
    REVEALED_NOTICE,
    describe_notices,
    describe_title,
    describe_window,
    ref_for_row,
)


def test_title_namespaced():
    ref = ResourceRef(kind="Pod", namespace="default", name="p1")
    assert describe_title(ref) == "Pod/p1 · default"


def test_title_cluster_scoped_and_empty():
    assert describe_title(ResourceRef(kind="Node", name="n1")) == "Node/n1"
    assert describe_title(ResourceRef(kind="Node")) == ""


def test_ref_for_pod():
    ref = ref_for_row("Pod", "default", "p1")
    assert ref == ResourceRef(
        version="v1", resource="pods", kind="Pod", namespace="default", name="p1"
    )


def test_ref_for_deployment():
    ref = ref_for_row("Deployment", "web", "api")
    assert (ref.group, ref.resource, ref.namespace, ref.name) == (
        "apps",
        "deployments",
        "web",
        "api",
    )


def test_ref_for_node_drops_namespace():
    ref = ref_for_row("Node", "ignored", "n1")
    assert ref.namespace == ""
    assert ref.resource == "nodes"


def test_ref_for_namespace_and_project():
    ns = ref_for_row("Namespace", "", "team")
    project = ref_for_row("Namespace", "", "team", resource_kind="Project")
    assert ns.kind == "Namespace"
    assert ns.resource == "namespaces"
    assert project.kind == "Project"
    assert project.group == "project.openshift.io"
    assert project.resource == "projects"


def test_ref_for_unknown_kind():
    assert ref_for_row("Secret", "default", "s") is None


def test_window_from_top():
    text = "\n".join(f"line{i}" for i in range(20))
    got = describe_window(text, 0, 5, 80)
    assert got == text.split("\n")[:5]


def test_window_scroll_clamped_to_last_page():
    text = "\n".join(f"line{i}" for i in range(20))
    got = describe_window(text, 1000, 5, 80)
    assert got == text.split("\n")[-5:]


def test_window_short_text_and_truncation():
    got = describe_window("abcdefghij\nxy", 3, 10, 4)
    assert len(got) == 2
    assert got[1] == "xy"
    assert got[0].endswith("…")
    assert len(got[0]) == 4


def test_window_zero_height():
    assert describe_window("a\nb", 0, 0, 10) == []


def test_notices_revealed_secret():
    assert describe_notices("Secret", True, True, False, "") == [REVEALED_NOTICE]


def test_notices_redacted():
    assert describe_notices("Secret", False, True, False, "") == [REDACTED_NOTICE]


def test_notices_configmap():
    assert describe_notices("ConfigMap", False, False, False, "") == [CONFIGMAP_NOTICE]
    assert describe_notices("ConfigMap", False, False, True, "") == []
    assert describe_notices("ConfigMap", False, False, False, "boom") == []


def test_notices_revealed_only_for_secret():
    assert describe_notices("Pod", True, False, False, "") == []