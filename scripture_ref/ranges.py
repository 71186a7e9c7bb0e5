"""Verse containment and canonical ordering for references and ranges."""

from typing import Iterable, List, Tuple, TypeVar, Union

from scripture_ref.data.canon import CANON, CanonRegistry
from scripture_ref.data.types import Highlight, Reference, VerseRange

RangeLike = Union[Reference, VerseRange]
R = TypeVar("R", Reference, VerseRange)


def contains(chapter: int, verse: int, rng: RangeLike) -> bool:
    """Return True if chapter:verse falls inside the range.

    Interior chapters of a multi-chapter range accept any verse, since
    per-chapter verse counts are not modeled. A whole-chapter reference
    matches on chapter alone.
    """
    if rng.start_verse is None or rng.end_verse is None:
        return rng.start_chapter <= chapter <= rng.end_chapter

    # Single chapter range
    if rng.start_chapter == rng.end_chapter:
        return chapter == rng.start_chapter and rng.start_verse <= verse <= rng.end_verse

    # Multi-chapter range
    if chapter < rng.start_chapter or chapter > rng.end_chapter:
        return False
    if chapter == rng.start_chapter:
        return verse >= rng.start_verse
    if chapter == rng.end_chapter:
        return verse <= rng.end_verse
    return True


def ranges_in_chapter(book_id: str, chapter: int, ranges: Iterable[R]) -> List[R]:
    """Return the ranges of a book that touch a chapter, by start verse."""
    selected = [
        rng
        for rng in ranges
        if rng.book_id == book_id and rng.start_chapter <= chapter <= rng.end_chapter
    ]
    selected.sort(key=lambda rng: rng.start_verse or 0)
    return selected


def highlight_for_verse(chapter: int, verse: int, ranges: Iterable[RangeLike]) -> Highlight:
    """Return the highlight state of chapter:verse.

    The first containing range wins; ``is_first``/``is_last`` mark the
    verses where that range begins and ends.
    """
    for rng in ranges:
        if contains(chapter, verse, rng):
            return Highlight(
                is_highlighted=True,
                is_first=rng.start_chapter == chapter and rng.start_verse == verse,
                is_last=rng.end_chapter == chapter and rng.end_verse == verse,
                range=rng,
            )
    return Highlight()


def sort_key(rng: RangeLike, registry: CanonRegistry = CANON) -> Tuple[int, int, int]:
    """Key for canonical (Genesis-to-Revelation) ordering.

    Unknown books get index -1 and sort ahead of Genesis.
    """
    return (registry.index_of(rng.book_id), rng.start_chapter, rng.start_verse or 0)


def compare(a: RangeLike, b: RangeLike, registry: CanonRegistry = CANON) -> int:
    """Three-way comparison by book order, start chapter, start verse."""
    key_a = sort_key(a, registry)
    key_b = sort_key(b, registry)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_ranges(ranges: Iterable[R], registry: CanonRegistry = CANON) -> List[R]:
    """Return ranges in canonical order (stable for equal keys)."""
    return sorted(ranges, key=lambda rng: sort_key(rng, registry))
