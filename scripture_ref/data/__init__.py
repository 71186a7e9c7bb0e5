"""Data types and Bible metadata."""

from scripture_ref.data.types import (
    BookEntry,
    Highlight,
    NavigationStep,
    Reference,
    ScriptureMatch,
    VerseRange,
)
from scripture_ref.data.canon import (
    CANON,
    BOOK_ORDER,
    CanonRegistry,
    book_at,
    book_chapters,
    book_index,
    get_book,
    get_book_by_name,
    search_books,
)
from scripture_ref.data.aliases import ALIASES, resolve_book_id, suggest_books

__all__ = [
    "BookEntry",
    "Highlight",
    "NavigationStep",
    "Reference",
    "ScriptureMatch",
    "VerseRange",
    "CANON",
    "BOOK_ORDER",
    "CanonRegistry",
    "book_at",
    "book_chapters",
    "book_index",
    "get_book",
    "get_book_by_name",
    "search_books",
    "ALIASES",
    "resolve_book_id",
    "suggest_books",
]
