"""Filesystem access and scaffold error types.

Generators never touch ``pathlib`` writes directly; they go through a
``FileSystem`` so the orchestrator can run against disk (``LocalFileSystem``)
or purely in memory (``MemoryFileSystem``, used by ``--dry-run`` and tests).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for failures that stop a scaffold run."""


class FilesystemError(ScaffoldError):
    """Raised when a directory or file cannot be created."""

    def __init__(self, message: str, path: str | Path = "") -> None:
        self.path = str(path)
        super().__init__(message)


# ---------------------------------------------------------------------------
# FileSystem protocol and implementations
# ---------------------------------------------------------------------------


class FileSystem(Protocol):
    """The two write operations a scaffold run needs."""

    def make_dirs(self, path: Path) -> None:
        """Create *path* and its parents; an existing directory is not an error."""

    def write_text(self, path: Path, content: str) -> None:
        """Create or overwrite *path* with *content*."""


class LocalFileSystem:
    """Writes to the real disk, wrapping ``OSError`` in ``FilesystemError``."""

    def make_dirs(self, path: Path) -> None:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(
                f"Cannot create directory {path}: {exc.strerror or exc}", path
            ) from exc

    def write_text(self, path: Path, content: str) -> None:
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FilesystemError(
                f"Cannot write {target}: {exc.strerror or exc}", target
            ) from exc


class MemoryFileSystem:
    """Records directories and file contents without touching disk.

    ``files`` preserves write order; rewriting a path replaces its content
    but keeps its first position.
    """

    def __init__(self) -> None:
        self.directories: set[Path] = set()
        self.files: dict[Path, str] = {}

    def make_dirs(self, path: Path) -> None:
        path = Path(path)
        self.directories.add(path)
        self.directories.update(path.parents)

    def write_text(self, path: Path, content: str) -> None:
        path = Path(path)
        self.make_dirs(path.parent)
        self.files[path] = content

    def read_text(self, path: Path) -> str:
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FilesystemError(f"No such file: {path}", path) from None

    def exists(self, path: Path) -> bool:
        path = Path(path)
        return path in self.files or path in self.directories

    def relative_files(self, root: Path) -> list[str]:
        """Written file paths relative to *root*, POSIX-style, in write order."""
        root = Path(root)
        return [p.relative_to(root).as_posix() for p in self.files if root in p.parents]


class TrackingFileSystem:
    """Delegates to another ``FileSystem`` and logs every successful write.

    ``written`` holds paths relative to *root*, POSIX-style, in first-write
    order. A failed write is not logged.
    """

    def __init__(self, inner: FileSystem, root: Path) -> None:
        self.inner = inner
        self.root = Path(root)
        self._written: dict[str, None] = {}

    @property
    def written(self) -> list[str]:
        return list(self._written)

    def make_dirs(self, path: Path) -> None:
        self.inner.make_dirs(path)

    def write_text(self, path: Path, content: str) -> None:
        self.inner.write_text(path, content)
        self._written[Path(path).relative_to(self.root).as_posix()] = None
