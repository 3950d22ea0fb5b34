"""Content-hash allow-list for discovered kubeconfig files.

A kubeconfig can name exec plugins that get started whenever a
connection is opened. Only files whose exact content has been accepted
are trusted. A new file, or a file whose content changed, has to be
accepted again.
"""

from __future__ import annotations

import hashlib
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

_HEADER = (
    "# kubetin trusted kubeconfigs — sha256 of file content + last-known path\n"
    "# Use `kubetin -trust` to re-bless after intentional changes.\n"
)
_HASH_LEN = 64


class TrustFileError(Exception):
    """The trust file could not be located, read or written.

    ``trust_list`` carries whatever was loaded before the failure, so a
    caller can still tell a first run from a damaged file.
    """

    def __init__(self, message: str, trust_list: "TrustList | None" = None):
        super().__init__(message)
        self.trust_list = trust_list


def hash_file(path: str | os.PathLike[str]) -> str:
    """Return the hex SHA-256 of the file's content."""
    digest = hashlib.sha256()
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()


def trust_file_path() -> str:
    """Return where the trust file lives: $XDG_CONFIG_HOME or ~/.config."""
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        return os.path.join(xdg, "kubetin", "trusted-kubeconfigs")
    home = Path.home()
    return os.path.join(home, ".config", "kubetin", "trusted-kubeconfigs")


@dataclass
class TrustList:
    """The user's kubeconfig allow-list, keyed by content hash."""

    path: str = ""
    hashes: dict[str, str] = field(default_factory=dict)
    existed: bool = False

    def is_trusted(self, path: str | os.PathLike[str]) -> bool:
        """Whether the file's current content hash has been accepted."""
        try:
            digest = hash_file(path)
        except OSError:
            return False
        return digest in self.hashes

    def has_known_path(self, path: str | os.PathLike[str]) -> bool:
        """Whether any accepted hash was recorded for this path."""
        return os.fspath(path) in self.hashes.values()

    def add(self, path: str | os.PathLike[str]) -> None:
        """Accept the file's current content. Call save() to persist."""
        self.hashes[hash_file(path)] = os.fspath(path)

    def save(self) -> None:
        """Write the list atomically with owner-only permissions."""
        if not self.path:
            raise TrustFileError("no trust file path resolved", self)
        os.makedirs(os.path.dirname(self.path), mode=0o700, exist_ok=True)
        tmp = self.path + ".tmp"
        fd = os.open(tmp, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o600)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(_HEADER)
                for digest in sorted(self.hashes):
                    fh.write(f"{digest}  {self.hashes[digest]}\n")
        except BaseException:
            try:
                os.remove(tmp)
            except OSError:
                pass
            raise
        os.replace(tmp, self.path)

    def partition_files(
        self, files: Iterable[str | os.PathLike[str]]
    ) -> tuple[list[str], list[str]]:
        """Split files into (trusted, untrusted), keeping their order."""
        trusted: list[str] = []
        untrusted: list[str] = []
        for f in files:
            (trusted if self.is_trusted(f) else untrusted).append(os.fspath(f))
        return trusted, untrusted

    def is_empty(self) -> bool:
        """Whether no file has been accepted."""
        return not self.hashes


def _parse_lines(lines: Iterable[str]) -> dict[str, str]:
    hashes: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        digest, _, src = line.partition("  ")
        if len(digest) != _HASH_LEN:
            continue
        hashes[digest] = src
    return hashes


def load_trust_list() -> TrustList:
    """Read the trust file. A missing file gives an empty list.

    Raises TrustFileError when the location cannot be resolved or the
    file exists but cannot be read; the partial list is attached.
    """
    try:
        path = trust_file_path()
    except (RuntimeError, KeyError) as exc:
        raise TrustFileError(f"user home: {exc}", TrustList()) from exc
    tl = TrustList(path=path)
    try:
        fh = open(path, encoding="utf-8")
    except FileNotFoundError:
        return tl
    except OSError as exc:
        tl.existed = True
        raise TrustFileError(f"read {path}: {exc}", tl) from exc
    tl.existed = True
    try:
        with fh:
            tl.hashes = _parse_lines(fh)
    except (OSError, UnicodeDecodeError) as exc:
        raise TrustFileError(f"read {path}: {exc}", tl) from exc
    return tl