"""Scripture reference parsing."""

import logging
import re
from typing import Optional

from scripture_ref.data.aliases import resolve_book_id
from scripture_ref.data.canon import CANON, CanonRegistry
from scripture_ref.data.types import Reference, VerseRange, is_valid_span

logger = logging.getLogger(__name__)

# Book: optional leading numeral, one or more words, optional trailing period
_BOOK = r"(?P<book>(?:[1-3]\s*)?[a-z]+(?:\s+[a-z]+)*\.?)"
_DASH = r"\s*[-–]\s*"
# Chapter or verse number
_NUM = r"\d{1,4}"

# Tried in order, first match wins
_CROSS_CHAPTER = re.compile(
    rf"^{_BOOK}\s*(?P<c1>{_NUM})\s*:\s*(?P<v1>{_NUM}){_DASH}(?P<c2>{_NUM})\s*:\s*(?P<v2>{_NUM})$"
)
_VERSE_RANGE = re.compile(rf"^{_BOOK}\s*(?P<c1>{_NUM})\s*:\s*(?P<v1>{_NUM}){_DASH}(?P<v2>{_NUM})$")
_SINGLE_VERSE = re.compile(rf"^{_BOOK}\s*(?P<c1>{_NUM})\s*:\s*(?P<v1>{_NUM})$")
_CHAPTER_ONLY = re.compile(rf"^{_BOOK}\s+(?P<c1>{_NUM})$")

# Storage code form: "ROM 1:1-7", "GEN 1:1-2:3"
_RANGE_CODE = re.compile(
    r"^(?P<book>[1-3]?[A-Z]{2,3})\s+(?P<c1>\d{1,4}):(?P<v1>\d{1,4})"
    r"(?:-(?:(?P<c2>\d{1,4}):(?P<v2>\d{1,4})|(?P<ve>\d{1,4})))?$"
)

# data-scripture anchors: "JHN.1.1", "JHN.1.1-5", "GEN.1.20-3.10"
_ANCHOR = re.compile(
    r"^(?P<book>[A-Z0-9]+)\.(?P<c1>\d{1,4})\.(?P<v1>\d{1,4})"
    r"(?:-(?:(?P<c2>\d{1,4})\.(?P<v2>\d{1,4})|(?P<ve>\d{1,4})))?$"
)


def _match_reference(text: str) -> Optional[tuple[str, int, Optional[int], int, Optional[int]]]:
    """Split text into (book, c1, v1, c2, v2) by the first matching pattern."""
    match = _CROSS_CHAPTER.match(text)
    if match:
        return (
            match.group("book"),
            int(match.group("c1")),
            int(match.group("v1")),
            int(match.group("c2")),
            int(match.group("v2")),
        )

    match = _VERSE_RANGE.match(text)
    if match:
        chapter = int(match.group("c1"))
        return (match.group("book"), chapter, int(match.group("v1")), chapter, int(match.group("v2")))

    match = _SINGLE_VERSE.match(text)
    if match:
        chapter = int(match.group("c1"))
        verse = int(match.group("v1"))
        return (match.group("book"), chapter, verse, chapter, verse)

    match = _CHAPTER_ONLY.match(text)
    if match:
        chapter = int(match.group("c1"))
        return (match.group("book"), chapter, None, chapter, None)

    return None


def parse_reference(text: str, registry: CanonRegistry = CANON) -> Optional[Reference]:
    """Parse a free-text scripture reference.

    Supports:
    - "Genesis 1:1-2:3" -> cross-chapter range
    - "Romans 1:1-7"    -> same-chapter range
    - "Romans 1:1"      -> single verse
    - "Romans 1"        -> whole chapter (verses are None)

    Book names resolve through the alias table, then exact names, then
    prefix matching. Matching is case-insensitive.

    Args:
        text: Reference string
        registry: Canon to validate against

    Returns:
        Reference, or None if the text is unrecognized or out of range
    """
    if not text or not isinstance(text, str):
        return None

    normalized = " ".join(text.lower().split())
    if not normalized:
        return None

    parts = _match_reference(normalized)
    if parts is None:
        logger.debug("Unrecognized reference format: %r", text)
        return None

    book_str, start_chapter, start_verse, end_chapter, end_verse = parts
    book_id = resolve_book_id(book_str, registry)
    if book_id is None:
        logger.debug("Unknown book %r in reference %r", book_str, text)
        return None

    if not is_valid_span(registry, book_id, start_chapter, start_verse, end_chapter, end_verse):
        logger.debug("Reference out of range: %r", text)
        return None

    entry = registry.get(book_id)
    return Reference(
        book_id=book_id,
        start_chapter=start_chapter,
        start_verse=start_verse,
        end_chapter=end_chapter,
        end_verse=end_verse,
        book_name=entry.name if entry else "",
    )


def _range_from_match(match: "re.Match[str]", registry: CanonRegistry) -> Optional[VerseRange]:
    book = match.group("book")
    start_chapter = int(match.group("c1"))
    start_verse = int(match.group("v1"))
    if match.group("c2"):
        end_chapter = int(match.group("c2"))
        end_verse = int(match.group("v2"))
    elif match.group("ve"):
        end_chapter = start_chapter
        end_verse = int(match.group("ve"))
    else:
        end_chapter = start_chapter
        end_verse = start_verse
    return VerseRange.create(
        book, start_chapter, start_verse, end_chapter, end_verse, registry=registry
    )


def parse_verse_range(code: str, registry: CanonRegistry = CANON) -> Optional[VerseRange]:
    """Parse a stored range code like "ROM 1:1-7" or "GEN 1:1-2:3".

    The book must be a canonical id; no alias resolution is done.
    """
    if not code or not isinstance(code, str):
        return None
    match = _RANGE_CODE.match(code.strip())
    if not match:
        return None
    return _range_from_match(match, registry)


def parse_anchor(value: str, registry: CanonRegistry = CANON) -> Optional[VerseRange]:
    """Parse a data-scripture anchor value like "JHN.1.1-5"."""
    if not value or not isinstance(value, str):
        return None
    match = _ANCHOR.match(value.strip())
    if not match:
        return None
    return _range_from_match(match, registry)
