"""Formatting references and ranges back to display text."""

from typing import Optional, Union

from scripture_ref.data.canon import CANON, CanonRegistry
from scripture_ref.data.types import Reference, VerseRange

RangeLike = Union[Reference, VerseRange]


def format_reference(ref: Optional[RangeLike], registry: CanonRegistry = CANON) -> str:
    """Return the shortest unambiguous text for a reference or range.

    - whole chapter:     "Romans 1"
    - single verse:      "Romans 1:1"
    - same chapter:      "Romans 1:1-7"
    - across chapters:   "Genesis 1:1-2:3"

    An unknown book id yields "" so that display paths can skip the record.
    """
    if ref is None:
        return ""
    entry = registry.get(ref.book_id)
    if entry is None:
        return ""

    name = entry.name
    if ref.start_verse is None:
        return f"{name} {ref.start_chapter}"

    if ref.start_chapter == ref.end_chapter:
        if ref.start_verse == ref.end_verse:
            return f"{name} {ref.start_chapter}:{ref.start_verse}"
        return f"{name} {ref.start_chapter}:{ref.start_verse}-{ref.end_verse}"

    return f"{name} {ref.start_chapter}:{ref.start_verse}-{ref.end_chapter}:{ref.end_verse}"


format_range = format_reference


def format_location(
    book_id: str,
    chapter: int,
    verse: Optional[int] = None,
    registry: CanonRegistry = CANON,
) -> str:
    """Format a single book/chapter(/verse) position, "" for unknown books."""
    entry = registry.get(book_id)
    if entry is None:
        return ""
    if verse:
        return f"{entry.name} {chapter}:{verse}"
    return f"{entry.name} {chapter}"


def format_anchor(rng: RangeLike) -> str:
    """Return the data-scripture value for a range ("ROM.1.1-7").

    Whole-chapter references have no anchor form and yield "".
    """
    if rng.start_verse is None or rng.end_verse is None:
        return ""
    base = f"{rng.book_id}.{rng.start_chapter}.{rng.start_verse}"
    if rng.start_chapter != rng.end_chapter:
        return f"{base}-{rng.end_chapter}.{rng.end_verse}"
    if rng.start_verse != rng.end_verse:
        return f"{base}-{rng.end_verse}"
    return base


def format_code(rng: VerseRange) -> str:
    """Return the storage code form ("ROM 1:1-7") of a range."""
    base = f"{rng.book} {rng.start_chapter}:{rng.start_verse}"
    if rng.start_chapter != rng.end_chapter:
        return f"{base}-{rng.end_chapter}:{rng.end_verse}"
    if rng.start_verse != rng.end_verse:
        return f"{base}-{rng.end_verse}"
    return base
