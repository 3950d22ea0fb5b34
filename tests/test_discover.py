import os

import pytest
import yaml

from kubetin.discover import (
    ContextRef,
    Discovered,
    DiscoveryError,
    candidate_files,
    discover,
    discover_trusted,
    load_kubeconfig,
)
from kubetin.trust import TrustList


def _write_config(path, contexts):
    doc = {
        "apiVersion": "v1",
        "kind": "Config",
        "contexts": [
            {"name": name, "context": {"cluster": "c", "user": "default", "namespace": ns}}
            for name, ns in contexts
        ],
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(doc))
    return path


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.delenv("KUBECONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    kube = tmp_path / ".kube"
    kube.mkdir()
    return kube


def test_candidate_files_filters_entries(home):
    for name in ["config", "config-a", "config.swp", "config~", "other"]:
        (home / name).write_text("")
    (home / "configdir").mkdir()
    assert candidate_files() == [str(home / "config"), str(home / "config-a")]


def test_candidate_files_from_env_skips_missing(tmp_path, monkeypatch):
    a = tmp_path / "a"
    a.write_text("")
    missing = tmp_path / "missing"
    monkeypatch.setenv("KUBECONFIG", os.pathsep.join([str(a), "", str(missing)]))
    assert candidate_files() == [str(a)]


def test_candidate_files_missing_kube_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("KUBECONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    with pytest.raises(DiscoveryError):
        candidate_files()


def test_discover_without_files_raises(home):
    with pytest.raises(DiscoveryError, match="no kubeconfig files found"):
        discover()


def test_discover_disambiguates_by_basename(home):
    _write_config(home / "config", [("default", "kube-system")])
    _write_config(home / "config-b", [("default", ""), ("unique", "apps")])
    d = discover()
    assert d.contexts == ["default (config)", "default (config-b)", "unique"]
    ref = d.ref_by_name("default (config)")
    assert ref == ContextRef("default (config)", "default", str(home / "config"), "kube-system")
    assert d.ref_by_name("unique").namespace == "apps"
    assert set(d.configs) == {str(home / "config"), str(home / "config-b")}


def test_discover_promotes_to_parent_suffix(tmp_path, monkeypatch):
    a = _write_config(tmp_path / "a" / "config", [("x", "")])
    b = _write_config(tmp_path / "b" / "config", [("x", "")])
    monkeypatch.setenv("KUBECONFIG", os.pathsep.join([str(a), str(b)]))
    d = discover()
    assert d.contexts == ["x (a/config)", "x (b/config)"]
    assert d.ref_by_name("x (b/config)").file == str(b)
    assert len({r.name for r in d.refs}) == len(d.refs)


def test_discover_skips_unparseable_files(home):
    _write_config(home / "config", [("ok", "")])
    (home / "config-bad").write_text("contexts: [unclosed\n")
    d = discover()
    assert d.contexts == ["ok"]
    assert str(home / "config-bad") not in d.configs
    assert str(home / "config-bad") in d.files


def test_ref_by_name_missing_returns_none():
    assert Discovered().ref_by_name("nope") is None


def test_load_kubeconfig_rejects_invalid(tmp_path):
    p = tmp_path / "config"
    p.write_text("- just\n- a list\n")
    with pytest.raises(DiscoveryError):
        load_kubeconfig(p)


def test_load_kubeconfig_empty_file(tmp_path):
    p = tmp_path / "config"
    p.write_text("")
    assert load_kubeconfig(p) == {}


def test_discover_trusted_none_trusted(home):
    cfg = _write_config(home / "config", [("a", "")])
    d, untrusted = discover_trusted(TrustList())
    assert untrusted == [str(cfg)]
    assert d.refs == []
    assert d.contexts == []
    assert d.files == [str(cfg)]


def test_discover_trusted_filters(home):
    good = _write_config(home / "config", [("shared", ""), ("only-good", "")])
    bad = _write_config(home / "config-x", [("shared", "")])
    tl = TrustList()
    tl.add(good)
    d, untrusted = discover_trusted(tl)
    assert untrusted == [str(bad)]
    assert d.files == [str(good)]
    assert d.contexts == ["only-good", "shared"]
    assert all(r.file == str(good) for r in d.refs)


def test_discover_trusted_without_files_raises(home):
    with pytest.raises(DiscoveryError):
        discover_trusted(TrustList())