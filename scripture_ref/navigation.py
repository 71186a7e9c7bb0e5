"""Chapter-by-chapter stepping through the canon."""

from typing import Optional

from scripture_ref.data.canon import CANON, CanonRegistry
from scripture_ref.data.types import NavigationStep


def next_chapter(book_id: str, chapter: int, registry: CanonRegistry = CANON) -> Optional[NavigationStep]:
    """Return the chapter after book_id:chapter.

    Crosses into chapter 1 of the following book at the end of a book.
    Returns None after the last chapter of Revelation or for an unknown book.
    """
    book = registry.get(book_id)
    if book is None:
        return None

    if chapter < book.chapter_count:
        return NavigationStep(book_id, chapter + 1)

    following = registry.at(registry.index_of(book_id) + 1)
    if following is not None:
        return NavigationStep(following.id, 1)
    return None


def prev_chapter(book_id: str, chapter: int, registry: CanonRegistry = CANON) -> Optional[NavigationStep]:
    """Return the chapter before book_id:chapter.

    Crosses into the last chapter of the preceding book at chapter 1.
    Returns None before Genesis 1 or for an unknown book.
    """
    idx = registry.index_of(book_id)
    if idx < 0:
        return None

    if chapter > 1:
        return NavigationStep(book_id, chapter - 1)

    preceding = registry.at(idx - 1)
    if preceding is not None:
        return NavigationStep(preceding.id, preceding.chapter_count)
    return None
