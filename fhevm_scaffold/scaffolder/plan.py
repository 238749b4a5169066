"""Resolved project plans and the deterministic generated-file layout.

A ``ProjectPlan`` is everything a scaffold run needs after the selector key
has been looked up: which descriptors to generate, in which order, and where
each generated file lives. Paths are pure functions of (mode, key).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from fhevm_scaffold.registry import (
    CategoryDescriptor,
    Difficulty,
    ExampleDescriptor,
    Registry,
)

from .filesystem import ScaffoldError
from .identifiers import derive_identifier, find_identifier_collisions


CONFIG_FILES: tuple[str, ...] = (
    "package.json",
    "hardhat.config.ts",
    "tsconfig.json",
    ".env.example",
    ".gitignore",
)

README_FILE = "README.md"
DEPLOY_SCRIPT = "scripts/deploy.ts"


class UnknownKeyError(ScaffoldError):
    """Raised when a selector (or a category member) is not in the registry."""

    def __init__(self, key: str, valid_keys: list[str], message: str = "") -> None:
        self.key = key
        self.valid_keys = list(valid_keys)
        super().__init__(message or f"Unknown key: {key}")


class ScaffoldMode(str, Enum):
    """Whether a run generates one example or a whole category."""
    EXAMPLE = "example"
    CATEGORY = "category"


class ProjectPlan(BaseModel):
    """Resolved input of one scaffold run."""

    mode: ScaffoldMode
    selector: str = Field(..., description="The example or category key requested")
    title: str
    description: str = ""
    difficulty: Optional[Difficulty] = None
    package_name: str = Field(..., description="'name' field of package.json")
    keywords: list[str] = Field(default_factory=list)
    examples: list[ExampleDescriptor] = Field(
        default_factory=list, description="Descriptors to generate, in member order"
    )

    # -- Layout ------------------------------------------------------------

    @property
    def is_category(self) -> bool:
        return self.mode == ScaffoldMode.CATEGORY

    @property
    def contracts_dir(self) -> str:
        return "contracts/examples" if self.is_category else "contracts"

    @property
    def tests_dir(self) -> str:
        return "test/examples" if self.is_category else "test"

    def directories(self) -> list[str]:
        """Directories created before any file is written."""
        dirs = ["contracts", "test", "scripts", "docs"]
        if self.is_category:
            dirs.extend(["contracts/examples", "test/examples"])
        return dirs

    def contract_path(self, example: ExampleDescriptor) -> str:
        return f"{self.contracts_dir}/{derive_identifier(example.key)}.sol"

    def test_path(self, example: ExampleDescriptor) -> str:
        return f"{self.tests_dir}/{derive_identifier(example.key)}.test.ts"

    def doc_path(self, example: ExampleDescriptor) -> str:
        return f"docs/{example.key}.md"

    def example_keys(self) -> list[str]:
        return [example.key for example in self.examples]

    def expected_files(self) -> list[str]:
        """Every file a successful run writes, in write order, without repeats."""
        files: list[str] = list(CONFIG_FILES)
        files.extend(self.contract_path(e) for e in self.examples)
        files.extend(self.test_path(e) for e in self.examples)
        files.append(README_FILE)
        files.extend(self.doc_path(e) for e in self.examples)
        files.append(DEPLOY_SCRIPT)
        return list(dict.fromkeys(files))


# ---------------------------------------------------------------------------
# Plan construction
# ---------------------------------------------------------------------------


def plan_example(registry: Registry, key: str) -> ProjectPlan:
    """Resolve an example key into a single-example plan.

    Raises:
        UnknownKeyError: If *key* is not a registered example.
    """
    example = registry.lookup_example(key)
    if example is None:
        raise UnknownKeyError(
            key, registry.list_example_keys(), f"Example not found: {key}"
        )
    return ProjectPlan(
        mode=ScaffoldMode.EXAMPLE,
        selector=key,
        title=example.title,
        description=example.description,
        difficulty=example.difficulty,
        package_name=example.key,
        keywords=list(example.tags),
        examples=[example],
    )


def plan_category(registry: Registry, key: str) -> ProjectPlan:
    """Resolve a category key into a multi-example plan.

    Every member key is looked up here, before anything is written, so a
    category that names an unregistered example fails fast.

    Raises:
        UnknownKeyError: If *key* is not a registered category, or one of its
            members is not a registered example.
        ValueError: If two distinct members derive the same identifier.
    """
    category = registry.lookup_category(key)
    if category is None:
        raise UnknownKeyError(
            key, registry.list_category_keys(), f"Category not found: {key}"
        )

    missing = registry.missing_members(category)
    if missing:
        raise UnknownKeyError(
            missing[0],
            registry.list_example_keys(),
            f"Category '{key}' references unknown example(s): {', '.join(missing)}",
        )

    _check_identifiers(category)
    examples = [registry.lookup_example(member) for member in category.member_keys]
    return ProjectPlan(
        mode=ScaffoldMode.CATEGORY,
        selector=key,
        title=category.title,
        description=category.description,
        package_name=f"@fhevm/{category.key}-examples",
        keywords=["fhevm", "fhe", category.key, "examples"],
        examples=examples,
    )


def _check_identifiers(category: CategoryDescriptor) -> None:
    collisions = find_identifier_collisions(category.member_keys)
    if collisions:
        details = "; ".join(
            f"{ident} <- {', '.join(keys)}" for ident, keys in collisions.items()
        )
        raise ValueError(
            f"Category '{category.key}' members derive identical contract names: {details}"
        )
