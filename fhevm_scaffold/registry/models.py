"""Pydantic v2 models for the example and category descriptors.

Descriptors are frozen: once the registry is built at import time nothing in
the process can change a title, a tag or a member list.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fhevm_scaffold.utils import is_kebab_case


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Difficulty(str, Enum):
    """How much FHEVM background an example assumes."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

class ExampleDescriptor(BaseModel):
    """One generatable example contract."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Unique kebab-case key, e.g. 'fhe-counter'")
    title: str = Field(..., description="Human-readable title")
    description: str = Field(default="", description="One-line summary")
    difficulty: Optional[Difficulty] = Field(default=None)
    tags: tuple[str, ...] = Field(default=(), description="Manifest keywords, in declared order")

    @field_validator("key")
    @classmethod
    def _key_is_kebab_case(cls, value: str) -> str:
        if not is_kebab_case(value):
            raise ValueError(f"example key must be kebab-case, got {value!r}")
        return value


class CategoryDescriptor(BaseModel):
    """A named, ordered group of example keys generated into one project."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Unique category key, e.g. 'basic'")
    title: str = Field(..., description="Human-readable title")
    description: str = Field(default="")
    member_keys: tuple[str, ...] = Field(
        default=(),
        description="Example keys in deployment order; duplicates allowed",
    )
