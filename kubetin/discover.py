"""Discover kubeconfig files and the contexts they define.

Each file is loaded on its own and never merged with the others:
merging collapses duplicate user and cluster names, so contexts from
different files would end up with the wrong credentials. Context names
that occur in more than one file get a suffix naming their file.
"""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from kubetin.trust import TrustList

_SKIP_NAMES = frozenset({"kubectx", "kubens"})


class DiscoveryError(Exception):
    """Kubeconfig discovery or loading failed."""


@dataclass(frozen=True)
class ContextRef:
    """One resolvable context: its file and the unique name shown for it."""

    name: str
    raw_name: str
    file: str
    namespace: str = ""


@dataclass
class Discovered:
    """The result of scanning for kubeconfig files."""

    files: list[str] = field(default_factory=list)
    refs: list[ContextRef] = field(default_factory=list)
    configs: dict[str, dict[str, Any]] = field(default_factory=dict)
    contexts: list[str] = field(default_factory=list)

    def ref_by_name(self, name: str) -> ContextRef | None:
        """Return the ref with this unique name, or None."""
        return next((r for r in self.refs if r.name == name), None)


def candidate_files() -> list[str]:
    """List kubeconfig files: $KUBECONFIG entries, else ~/.kube/config*."""
    env = os.environ.get("KUBECONFIG", "")
    if env:
        return [p for p in env.split(os.pathsep) if p and os.path.exists(p)]

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise DiscoveryError(f"user home: {exc}") from exc
    directory = os.path.join(home, ".kube")
    try:
        entries = list(os.scandir(directory))
    except OSError as exc:
        raise DiscoveryError(f"read {directory}: {exc}") from exc

    files = [
        os.path.join(directory, e.name)
        for e in entries
        if not e.is_dir()
        and e.name.startswith("config")
        and e.name not in _SKIP_NAMES
        and not e.name.endswith((".swp", "~"))
    ]
    return sorted(files)


def load_kubeconfig(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Parse one kubeconfig file into a mapping."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as exc:
        raise DiscoveryError(f"read {os.fspath(path)}: {exc}") from exc
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise DiscoveryError(f"parse {os.fspath(path)}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DiscoveryError(f"parse {os.fspath(path)}: not a mapping")
    _contexts_of(data, os.fspath(path))
    return data


def _contexts_of(cfg: dict[str, Any], path: str) -> dict[str, str]:
    """Map each context name in cfg to its default namespace."""
    entries = cfg.get("contexts") or []
    if not isinstance(entries, list):
        raise DiscoveryError(f"parse {path}: contexts is not a list")
    out: dict[str, str] = {}
    for entry in entries:
        if not isinstance(entry, dict):
            raise DiscoveryError(f"parse {path}: malformed context entry")
        name = str(entry.get("name") or "")
        body = entry.get("context")
        namespace = ""
        if isinstance(body, dict):
            namespace = str(body.get("namespace") or "")
        out[name] = namespace
    return out


def _suffix_parent(path: str) -> str:
    parent = os.path.basename(os.path.dirname(path)) or "."
    return f"{parent}/{os.path.basename(path)}"


def _build(files: Iterable[str], listed: list[str]) -> Discovered:
    configs: dict[str, dict[str, Any]] = {}
    raw: list[ContextRef] = []
    for f in files:
        try:
            cfg = load_kubeconfig(f)
        except DiscoveryError:
            continue
        configs[f] = cfg
        for ctx_name, namespace in _contexts_of(cfg, f).items():
            raw.append(ContextRef(ctx_name, ctx_name, f, namespace))

    raw.sort(key=lambda r: (r.raw_name, r.file))
    seen = Counter(r.raw_name for r in raw)
    tentative = [
        ContextRef(
            f"{r.raw_name} ({os.path.basename(r.file)})" if seen[r.raw_name] > 1 else r.name,
            r.raw_name,
            r.file,
            r.namespace,
        )
        for r in raw
    ]
    final = Counter(r.name for r in tentative)
    refs = [
        ContextRef(
            f"{r.raw_name} ({_suffix_parent(r.file)})" if final[r.name] > 1 else r.name,
            r.raw_name,
            r.file,
            r.namespace,
        )
        for r in tentative
    ]
    return Discovered(
        files=listed,
        refs=refs,
        configs=configs,
        contexts=sorted(r.name for r in refs),
    )


def discover() -> Discovered:
    """Scan every candidate file, trusted or not. Unreadable files are skipped."""
    files = candidate_files()
    if not files:
        raise DiscoveryError("no kubeconfig files found")
    return _build(files, files)


def discover_trusted(trust_list: TrustList) -> tuple[Discovered, list[str]]:
    """Scan only files on the allow-list; also return the untrusted paths."""
    files = candidate_files()
    if not files:
        raise DiscoveryError("no kubeconfig files found")
    trusted, untrusted = trust_list.partition_files(files)
    if not trusted:
        return Discovered(files=files), untrusted
    return _build(trusted, trusted), untrusted