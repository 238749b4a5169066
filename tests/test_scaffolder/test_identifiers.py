"""Tests for identifier derivation."""

from __future__ import annotations

import pytest

from fhevm_scaffold.scaffolder.identifiers import (
    derive_identifier,
    derive_variable_name,
    find_identifier_collisions,
)

pytestmark = pytest.mark.unit


class TestDeriveIdentifier:
    @pytest.mark.parametrize(
        "key, expected",
        [
            ("fhe-counter", "FheCounter"),
            ("encrypt-single-value", "EncryptSingleValue"),
            ("user-decrypt-multiple-values", "UserDecryptMultipleValues"),
            ("tournament", "Tournament"),
            ("snake_case_key", "SnakeCaseKey"),
        ],
    )
    def test_pascal_case(self, key, expected):
        assert derive_identifier(key) == expected

    def test_only_first_letter_of_segment_changes(self):
        assert derive_identifier("fhe-eUint") == "FheEUint"

    def test_repeated_separators_ignored(self):
        assert derive_identifier("a--b") == "AB"

    def test_empty_key(self):
        assert derive_identifier("") == ""


class TestDeriveVariableName:
    def test_lower_camel_case(self):
        assert derive_variable_name("fhe-counter") == "fheCounter"

    def test_empty_key(self):
        assert derive_variable_name("") == ""


class TestCollisions:
    def test_distinct_keys_no_collision(self):
        assert find_identifier_collisions(["fhe-counter", "blind-auction"]) == {}

    def test_repeated_key_is_not_a_collision(self):
        assert find_identifier_collisions(["fhe-counter", "fhe-counter"]) == {}

    def test_separator_variants_collide(self):
        collisions = find_identifier_collisions(["fhe-counter", "fhe_counter"])
        assert collisions == {"FheCounter": ["fhe-counter", "fhe_counter"]}
