from kubetin.actions import ResourceRef
from kubetin.confirm import DeleteConfirm, expected_confirmation


def _pod(name="web-7d9f8b-xk2lq", namespace="default"):
    return ResourceRef(version="v1", resource="pods", kind="Pod", namespace=namespace, name=name)


def test_short_name_is_confirmed_whole():
    assert expected_confirmation("abc") == "abc"
    assert expected_confirmation("abcde") == "abcde"


def test_long_name_uses_last_five():
    name = "web-7d9f8b-xk2lq"
    got = expected_confirmation(name)
    assert len(got) == 5
    assert name.endswith(got)


def test_target_is_derived_from_ref():
    ref = _pod()
    c = DeleteConfirm(ref)
    assert c.target == expected_confirmation(ref.name)
    assert c.typed == ""
    assert not c.pending


def test_typing_target_matches_and_accepts():
    c = DeleteConfirm(_pod())
    c.type_text(c.target)
    assert c.matched()
    assert c.accept() is True
    assert c.pending


def test_mismatch_is_not_accepted():
    c = DeleteConfirm(_pod())
    c.type_text(c.target[:-1])
    assert not c.matched()
    assert c.accept() is False
    assert not c.pending


def test_backspace_removes_last_character():
    c = DeleteConfirm(_pod())
    c.type_text(c.target + "z")
    assert not c.matched()
    c.backspace()
    assert c.matched()


def test_backspace_on_empty_is_harmless():
    c = DeleteConfirm(_pod())
    c.backspace()
    assert c.typed == ""


def test_pending_ignores_input_and_second_accept():
    c = DeleteConfirm(_pod())
    c.type_text(c.target)
    assert c.accept()
    c.type_text("more")
    c.backspace()
    assert c.typed == c.target
    assert c.accept() is False


def test_subject_mentions_namespace_when_set():
    ref = _pod(name="p1", namespace="team")
    assert DeleteConfirm(ref).subject == " Delete Pod/p1 in team"


def test_subject_cluster_scoped():
    ref = ResourceRef(version="v1", resource="nodes", kind="Node", name="n1")
    assert DeleteConfirm(ref).subject == " Delete Node/n1"