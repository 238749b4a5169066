"""Derivation of contract/class identifiers from descriptor keys.

The derived identifier is used unmodified as the Solidity contract name, as
the factory name looked up by generated tests and deploy scripts, and as the
stem of the generated ``.sol`` / ``.test.ts`` files.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_SEPARATORS = re.compile(r"[-_\s]+")


def derive_identifier(key: str) -> str:
    """Convert ``fhe-counter`` to ``FheCounter``.

    Only the first character of each segment is upper-cased; the remainder is
    kept as written, so a key segment like ``eUint`` stays ``EUint``.
    """
    parts = _SEPARATORS.split(key.strip())
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def derive_variable_name(key: str) -> str:
    """Convert ``fhe-counter`` to ``fheCounter`` (deploy-script locals)."""
    identifier = derive_identifier(key)
    if identifier:
        return identifier[0].lower() + identifier[1:]
    return ""


def find_identifier_collisions(keys: Iterable[str]) -> dict[str, list[str]]:
    """Return identifiers that more than one distinct key derives to.

    Repeated occurrences of the same key are not collisions.

    Returns:
        Mapping of identifier -> the distinct keys sharing it, empty when
        derivation is injective over *keys*.
    """
    seen: dict[str, list[str]] = {}
    for key in dict.fromkeys(keys):
        seen.setdefault(derive_identifier(key), []).append(key)
    return {ident: owners for ident, owners in seen.items() if len(owners) > 1}
