"""FHEVM example scaffolder -- generates standalone Hardhat projects.

This module takes an example key or a category key from the registry and
renders a self-contained project directory: ``package.json``, Hardhat and
TypeScript config, environment template, ignore rules, contract and test
stubs, documentation and a deployment script.

Quick usage::

    from fhevm_scaffold.scaffolder import ScaffoldGenerator

    generator = ScaffoldGenerator()
    result = generator.generate_example("fhe-counter", "./my-fhe-counter")
    if not result.success:
        print(result.error)
"""

from fhevm_scaffold.scaffolder.filesystem import (
    FileSystem,
    FilesystemError,
    LocalFileSystem,
    MemoryFileSystem,
    ScaffoldError,
    TrackingFileSystem,
)
from fhevm_scaffold.scaffolder.generator import (
    ScaffoldGenerator,
    ScaffoldResult,
    VersionControlWarning,
)
from fhevm_scaffold.scaffolder.identifiers import derive_identifier
from fhevm_scaffold.scaffolder.plan import (
    ProjectPlan,
    ScaffoldMode,
    UnknownKeyError,
)
from fhevm_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "FileSystem",
    "FilesystemError",
    "LocalFileSystem",
    "MemoryFileSystem",
    "ProjectPlan",
    "ScaffoldError",
    "ScaffoldGenerator",
    "ScaffoldMode",
    "ScaffoldResult",
    "TemplateRenderer",
    "TrackingFileSystem",
    "UnknownKeyError",
    "VersionControlWarning",
    "derive_identifier",
]
