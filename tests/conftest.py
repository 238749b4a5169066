"""Shared pytest fixtures for the fhevm-scaffold test suite.

Provides reusable fixtures for:
- In-memory and on-disk project destinations
- A fixed clock for deterministic README timestamps
- A recording fake for the git command runner
- Small hand-built registries for failure scenarios
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from fhevm_scaffold.registry import CategoryDescriptor, ExampleDescriptor, Registry
from fhevm_scaffold.scaffolder import MemoryFileSystem, ScaffoldGenerator


FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Collaborator fakes
# ---------------------------------------------------------------------------


class FakeRunner:
    """Records every command and answers with a canned return code."""

    def __init__(self, returncode: int = 0, stderr: str = "", error: Exception | None = None) -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.error = error
        self.calls: list[tuple[list[str], dict]] = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((list(cmd), kwargs))
        if self.error is not None:
            raise self.error
        return (self.returncode, "", self.stderr)


class RecordingFileSystem(MemoryFileSystem):
    """Memory filesystem that counts every call."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, Path]] = []

    def make_dirs(self, path: Path) -> None:
        self.calls.append(("make_dirs", Path(path)))
        super().make_dirs(path)

    def write_text(self, path: Path, content: str) -> None:
        path = Path(path)
        self.calls.append(("write_text", path))
        # Parent bookkeeping is not a make_dirs call from the generator.
        super().make_dirs(path.parent)
        self.files[path] = content


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fixed_clock():
    """Clock returning 2024-01-02T03:04:05Z."""
    return lambda: FIXED_TIME


@pytest.fixture
def memory_fs() -> RecordingFileSystem:
    return RecordingFileSystem()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def dest() -> Path:
    """Destination used with the in-memory filesystem; never created on disk."""
    return Path("/virtual/out")


@pytest.fixture
def generator(memory_fs, fake_runner, fixed_clock) -> ScaffoldGenerator:
    """Quiet generator over the default registry with every side effect faked."""
    return ScaffoldGenerator(
        fs=memory_fs,
        runner=fake_runner,
        clock=fixed_clock,
        quiet=True,
    )


@pytest.fixture
def tmp_output(tmp_path: Path) -> Path:
    """On-disk destination that does not exist yet."""
    return tmp_path / "generated"


@pytest.fixture
def broken_registry() -> Registry:
    """A registry whose only category lists an unregistered example."""
    return Registry(
        examples=[
            ExampleDescriptor(key="alpha", title="Alpha", description="First"),
            ExampleDescriptor(key="beta", title="Beta", description="Second"),
        ],
        categories=[
            CategoryDescriptor(
                key="partial",
                title="Partial",
                member_keys=("alpha", "ghost", "beta"),
            ),
        ],
    )


@pytest.fixture
def failing_git_runner() -> FakeRunner:
    """Runner whose git exits non-zero."""
    return FakeRunner(returncode=128, stderr="fatal: not a git repository")


@pytest.fixture
def missing_git_runner() -> FakeRunner:
    """Runner for a machine with no git binary."""
    return FakeRunner(error=FileNotFoundError(2, "No such file or directory", "git"))
