"""Scripture reference parsing, formatting and range handling."""

from scripture_ref.data import (
    BOOK_ORDER,
    CANON,
    BookEntry,
    CanonRegistry,
    Highlight,
    NavigationStep,
    Reference,
    ScriptureMatch,
    VerseRange,
    resolve_book_id,
)
from scripture_ref.formatter import format_anchor, format_location, format_range, format_reference
from scripture_ref.linker import find_references, link_references
from scripture_ref.navigation import next_chapter, prev_chapter
from scripture_ref.parser import parse_anchor, parse_reference, parse_verse_range
from scripture_ref.ranges import compare, contains, highlight_for_verse, ranges_in_chapter, sort_key, sort_ranges

__version__ = "0.1.0"

__all__ = [
    "BOOK_ORDER",
    "CANON",
    "BookEntry",
    "CanonRegistry",
    "Highlight",
    "NavigationStep",
    "Reference",
    "ScriptureMatch",
    "VerseRange",
    "resolve_book_id",
    "format_anchor",
    "format_location",
    "format_range",
    "format_reference",
    "find_references",
    "link_references",
    "next_chapter",
    "prev_chapter",
    "parse_anchor",
    "parse_reference",
    "parse_verse_range",
    "compare",
    "contains",
    "highlight_for_verse",
    "ranges_in_chapter",
    "sort_key",
    "sort_ranges",
]
