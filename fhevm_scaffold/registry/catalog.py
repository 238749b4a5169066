"""Static descriptor tables and lookup helpers.

The two tables below are the whole catalogue of generatable examples and
categories. They are wrapped in a ``Registry`` whose mappings are read-only
proxies, so the only way to get a different catalogue is to build a new
``Registry`` (which tests do).
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import Mapping, Optional

from .models import CategoryDescriptor, Difficulty, ExampleDescriptor


class Registry:
    """Immutable lookup over example and category descriptors."""

    def __init__(
        self,
        examples: Iterable[ExampleDescriptor],
        categories: Iterable[CategoryDescriptor] = (),
    ) -> None:
        example_map: dict[str, ExampleDescriptor] = {}
        for example in examples:
            if example.key in example_map:
                raise ValueError(f"Duplicate example key in registry: {example.key}")
            example_map[example.key] = example

        category_map: dict[str, CategoryDescriptor] = {}
        for category in categories:
            if category.key in category_map:
                raise ValueError(f"Duplicate category key in registry: {category.key}")
            category_map[category.key] = category

        self._examples: Mapping[str, ExampleDescriptor] = MappingProxyType(example_map)
        self._categories: Mapping[str, CategoryDescriptor] = MappingProxyType(category_map)

    @property
    def examples(self) -> Mapping[str, ExampleDescriptor]:
        return self._examples

    @property
    def categories(self) -> Mapping[str, CategoryDescriptor]:
        return self._categories

    def lookup_example(self, key: str) -> Optional[ExampleDescriptor]:
        """Return the example registered under *key*, or ``None``."""
        return self._examples.get(key)

    def lookup_category(self, key: str) -> Optional[CategoryDescriptor]:
        """Return the category registered under *key*, or ``None``."""
        return self._categories.get(key)

    def list_example_keys(self) -> list[str]:
        """Example keys in declaration order."""
        return list(self._examples)

    def list_category_keys(self) -> list[str]:
        """Category keys in declaration order."""
        return list(self._categories)

    def missing_members(self, category: CategoryDescriptor) -> list[str]:
        """Member keys of *category* that have no example descriptor."""
        return [key for key in category.member_keys if key not in self._examples]


# ---------------------------------------------------------------------------
# Default catalogue
# ---------------------------------------------------------------------------

_EXAMPLES: tuple[ExampleDescriptor, ...] = (
    ExampleDescriptor(
        key="fhe-counter",
        title="FHE Counter",
        description="Basic encrypted counter demonstrating FHE operations",
        difficulty=Difficulty.BEGINNER,
        tags=("fhe", "counter", "basic", "arithmetic"),
    ),
    ExampleDescriptor(
        key="encrypt-single-value",
        title="Encrypt Single Value",
        description="Demonstrates single value encryption and input proofs",
        difficulty=Difficulty.BEGINNER,
        tags=("encryption", "input-proof", "beginner"),
    ),
    ExampleDescriptor(
        key="encrypt-multiple-values",
        title="Encrypt Multiple Values",
        description="Working with multiple encrypted values",
        difficulty=Difficulty.BEGINNER,
        tags=("encryption", "input-proof", "multiple-values"),
    ),
    ExampleDescriptor(
        key="user-decrypt-single-value",
        title="User Decrypt Single Value",
        description="User-initiated decryption of single encrypted value",
        difficulty=Difficulty.BEGINNER,
        tags=("decryption", "user-decrypt", "beginner"),
    ),
    ExampleDescriptor(
        key="user-decrypt-multiple-values",
        title="User Decrypt Multiple Values",
        description="User-initiated decryption of multiple encrypted values",
        difficulty=Difficulty.INTERMEDIATE,
        tags=("decryption", "user-decrypt", "multiple-values"),
    ),
    ExampleDescriptor(
        key="weighted-voting",
        title="Weighted Voting",
        description="Voting with reputation-based weights using FHE",
        difficulty=Difficulty.INTERMEDIATE,
        tags=("voting", "weights", "intermediate", "advanced"),
    ),
    ExampleDescriptor(
        key="access-control",
        title="Access Control",
        description="Role-based access control with FHE permissions",
        difficulty=Difficulty.INTERMEDIATE,
        tags=("access-control", "permissions", "intermediate"),
    ),
    ExampleDescriptor(
        key="blind-auction",
        title="Blind Auction",
        description="Sealed-bid auction with encrypted bids",
        difficulty=Difficulty.ADVANCED,
        tags=("auction", "advanced", "complex"),
    ),
    ExampleDescriptor(
        key="tournament",
        title="Tournament System",
        description="Multi-round tournament with encrypted scoring",
        difficulty=Difficulty.ADVANCED,
        tags=("tournament", "scoring", "advanced"),
    ),
)

_CATEGORIES: tuple[CategoryDescriptor, ...] = (
    CategoryDescriptor(
        key="basic",
        title="Basic FHEVM Examples",
        description="Foundational examples demonstrating core FHE concepts",
        member_keys=(
            "fhe-counter",
            "encrypt-single-value",
            "user-decrypt-single-value",
            "access-control",
        ),
    ),
    CategoryDescriptor(
        key="advanced",
        title="Advanced FHEVM Examples",
        description="Complex patterns and real-world applications",
        member_keys=("weighted-voting", "blind-auction", "tournament"),
    ),
    CategoryDescriptor(
        key="encryption",
        title="Encryption & Decryption Examples",
        description="Deep dive into FHE encryption mechanisms",
        member_keys=(
            "encrypt-single-value",
            "encrypt-multiple-values",
            "user-decrypt-single-value",
            "user-decrypt-multiple-values",
        ),
    ),
    CategoryDescriptor(
        key="voting",
        title="Voting & Governance Examples",
        description="Building voting systems with privacy preservation",
        member_keys=(
            "fhe-counter",
            "weighted-voting",
            "access-control",
            "blind-auction",
        ),
    ),
)

DEFAULT_REGISTRY = Registry(_EXAMPLES, _CATEGORIES)


def lookup_example(key: str) -> Optional[ExampleDescriptor]:
    return DEFAULT_REGISTRY.lookup_example(key)


def lookup_category(key: str) -> Optional[CategoryDescriptor]:
    return DEFAULT_REGISTRY.lookup_category(key)


def list_example_keys() -> list[str]:
    return DEFAULT_REGISTRY.list_example_keys()


def list_category_keys() -> list[str]:
    return DEFAULT_REGISTRY.list_category_keys()
