"""Alias resolution for Bible book names."""

import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from scripture_ref.data.canon import CANON, CanonRegistry
from scripture_ref.data.types import BookEntry

_ROMAN_PREFIX = re.compile(r"^(iii|ii|i)\s+(?=[a-z])")
_ROMAN_VALUES = {"i": "1", "ii": "2", "iii": "3"}
_NUMBERED = re.compile(r"^([1-3])\s*([a-z].*)$")


def normalize_alias(text: str) -> str:
    """Lowercase, collapse whitespace, drop a trailing period.

    Leading Roman numerals become digits: "II Cor." -> "2 cor".
    """
    token = " ".join(text.lower().split())
    token = token.rstrip(".").strip()
    match = _ROMAN_PREFIX.match(token)
    if match:
        token = _ROMAN_VALUES[match.group(1)] + " " + token[match.end():]
    return token


def _variants(token: str) -> List[str]:
    """The token plus its spaced/compact numbered-book forms."""
    variants = [token]
    match = _NUMBERED.match(token)
    if match:
        digit, rest = match.groups()
        for candidate in (f"{digit}{rest}", f"{digit} {rest}"):
            if candidate not in variants:
                variants.append(candidate)
    return variants


def build_alias_table(registry: CanonRegistry) -> Mapping[str, str]:
    """Build the read-only alias -> book id table for a registry.

    Raises ValueError if two books claim the same alias.
    """
    table: Dict[str, str] = {}
    for entry in registry:
        for alias in entry.aliases:
            key = normalize_alias(alias)
            owner = table.get(key)
            if owner is not None and owner != entry.id:
                raise ValueError(f"Alias {alias!r} claimed by {owner} and {entry.id}")
            table[key] = entry.id
    for key, book_id in table.items():
        if book_id not in registry:
            raise ValueError(f"Alias {key!r} maps to unknown book {book_id}")
    return MappingProxyType(table)


ALIASES: Mapping[str, str] = build_alias_table(CANON)


def _alias_table(registry: CanonRegistry) -> Mapping[str, str]:
    if registry is CANON:
        return ALIASES
    return build_alias_table(registry)


def lookup_alias(text: str, registry: CanonRegistry = CANON) -> Optional[str]:
    """Resolve via the alias table only (no name or prefix matching)."""
    if not text:
        return None
    table = _alias_table(registry)
    for candidate in _variants(normalize_alias(text)):
        if candidate in table:
            return table[candidate]
    return None


def match_exact_name(token: str, registry: CanonRegistry = CANON) -> Optional[str]:
    """Match a normalized token against canonical names and ids."""
    for entry in registry:
        if token in (entry.name.lower(), entry.id.lower()):
            return entry.id
    return None


def match_prefix(token: str, registry: CanonRegistry = CANON) -> Optional[str]:
    """Prefix match in either direction against canonical names.

    The first hit in canonical order wins, so a short token that prefixes
    several names resolves to the earliest book ("jo" -> Joshua).
    """
    variants = _variants(token)
    for entry in registry:
        name = entry.name.lower()
        compact = name.replace(" ", "")
        for candidate in variants:
            for form in (name, compact):
                if form.startswith(candidate) or candidate.startswith(form):
                    return entry.id
    return None


def resolve_book_id(text: str, registry: CanonRegistry = CANON) -> Optional[str]:
    """Resolve a book name or abbreviation to its canonical id.

    Args:
        text: Book name or alias (e.g., "rom", "Romans", "1 Cor", "1jn")
        registry: Canon to resolve against

    Returns:
        Book id or None if not found
    """
    if not text or not isinstance(text, str):
        return None
    token = normalize_alias(text)
    if not token:
        return None

    return (
        lookup_alias(token, registry)
        or match_exact_name(token, registry)
        or match_prefix(token, registry)
    )


def suggest_books(prefix: str, limit: int = 12, registry: CanonRegistry = CANON) -> List[BookEntry]:
    """Suggest books matching a prefix.

    Args:
        prefix: Search prefix
        limit: Maximum number of suggestions

    Returns:
        List of matching BookEntry objects
    """
    return registry.search(prefix, limit)
