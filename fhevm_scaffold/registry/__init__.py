"""Descriptor registry -- the static catalogue of examples and categories.

Quick usage::

    from fhevm_scaffold.registry import lookup_example

    descriptor = lookup_example("fhe-counter")
    if descriptor is None:
        ...  # unknown key
"""

from fhevm_scaffold.registry.catalog import (
    DEFAULT_REGISTRY,
    Registry,
    list_category_keys,
    list_example_keys,
    lookup_category,
    lookup_example,
)
from fhevm_scaffold.registry.models import (
    CategoryDescriptor,
    Difficulty,
    ExampleDescriptor,
)

__all__ = [
    "CategoryDescriptor",
    "DEFAULT_REGISTRY",
    "Difficulty",
    "ExampleDescriptor",
    "Registry",
    "list_category_keys",
    "list_example_keys",
    "lookup_category",
    "lookup_example",
]
