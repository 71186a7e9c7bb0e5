"""Data types for scripture-ref."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from scripture_ref.data.canon import CanonRegistry


@dataclass(frozen=True)
class BookEntry:
    """Metadata for a Bible book."""

    id: str
    name: str
    chapter_count: int
    aliases: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Reference:
    """A parsed book+chapter(+verse) locator, possibly a range.

    ``start_verse``/``end_verse`` are None for a whole-chapter reference.
    ``book_name`` is carried for display only and does not take part in
    equality.
    """

    book_id: str
    start_chapter: int
    start_verse: Optional[int]
    end_chapter: int
    end_verse: Optional[int]
    book_name: str = field(default="", compare=False)

    @property
    def book(self) -> str:
        """Alias of book_id, matching the stored record field name."""
        return self.book_id

    @property
    def is_whole_chapter(self) -> bool:
        """True when the reference names an entire chapter."""
        return self.start_verse is None

    def to_dict(self) -> dict:
        """Convert to the stored record shape."""
        return {
            "book": self.book_id,
            "startChapter": self.start_chapter,
            "startVerse": self.start_verse,
            "endChapter": self.end_chapter,
            "endVerse": self.end_verse,
        }

    def to_range(self) -> Optional["VerseRange"]:
        """Return the equivalent VerseRange, None for whole chapters."""
        if self.start_verse is None or self.end_verse is None:
            return None
        return VerseRange(
            book=self.book_id,
            start_chapter=self.start_chapter,
            start_verse=self.start_verse,
            end_chapter=self.end_chapter,
            end_verse=self.end_verse,
        )


@dataclass(frozen=True)
class VerseRange:
    """A verse range as stored with a note or annotation."""

    book: str
    start_chapter: int
    start_verse: int
    end_chapter: int
    end_verse: int

    @property
    def book_id(self) -> str:
        """Alias of book, matching the parsed Reference field name."""
        return self.book

    @property
    def is_whole_chapter(self) -> bool:
        return False

    @classmethod
    def create(
        cls,
        book: str,
        start_chapter: int,
        start_verse: int,
        end_chapter: Optional[int] = None,
        end_verse: Optional[int] = None,
        *,
        registry: Optional["CanonRegistry"] = None,
    ) -> Optional["VerseRange"]:
        """Build a validated range, or None if it breaks an invariant.

        ``end_chapter`` defaults to ``start_chapter`` and ``end_verse`` to
        ``start_verse``. Used when a note is saved or edited.
        """
        from scripture_ref.data.canon import CANON

        registry = registry or CANON
        if end_chapter is None:
            end_chapter = start_chapter
        if end_verse is None:
            end_verse = start_verse

        if not is_valid_span(registry, book, start_chapter, start_verse, end_chapter, end_verse):
            return None
        return cls(book, start_chapter, start_verse, end_chapter, end_verse)

    def to_dict(self) -> dict:
        """Convert to the stored record shape (camelCase)."""
        return {
            "book": self.book,
            "startChapter": self.start_chapter,
            "startVerse": self.start_verse,
            "endChapter": self.end_chapter,
            "endVerse": self.end_verse,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "VerseRange":
        """Create from a stored record (camelCase)."""
        return cls(
            book=data["book"],
            start_chapter=int(data["startChapter"]),
            start_verse=int(data["startVerse"]),
            end_chapter=int(data["endChapter"]),
            end_verse=int(data["endVerse"]),
        )

    def to_row(self) -> dict:
        """Convert to the database row shape (snake_case)."""
        return {
            "book": self.book,
            "start_chapter": self.start_chapter,
            "start_verse": self.start_verse,
            "end_chapter": self.end_chapter,
            "end_verse": self.end_verse,
        }

    @classmethod
    def from_row(cls, row: dict) -> "VerseRange":
        """Create from a database row (snake_case)."""
        return cls(
            book=row["book"],
            start_chapter=int(row["start_chapter"]),
            start_verse=int(row["start_verse"]),
            end_chapter=int(row["end_chapter"]),
            end_verse=int(row["end_verse"]),
        )


@dataclass(frozen=True)
class NavigationStep:
    """A book/chapter position returned by chapter stepping."""

    book_id: str
    chapter: int


@dataclass(frozen=True)
class Highlight:
    """Highlight state of a single verse against a set of ranges."""

    is_highlighted: bool = False
    is_first: bool = False
    is_last: bool = False
    range: Optional[object] = None


@dataclass(frozen=True)
class ScriptureMatch:
    """A scripture reference found in running text."""

    text: str
    start: int
    end: int
    range: VerseRange


def is_valid_span(
    registry: "CanonRegistry",
    book_id: str,
    start_chapter: int,
    start_verse: Optional[int],
    end_chapter: int,
    end_verse: Optional[int],
) -> bool:
    """Check the chapter/verse invariants shared by references and ranges."""
    count = registry.chapter_count(book_id)
    if count == 0:
        return False
    if not 1 <= start_chapter <= end_chapter <= count:
        return False
    if (start_verse is None) != (end_verse is None):
        return False
    # Whole-chapter references name a single chapter
    if start_verse is None and start_chapter != end_chapter:
        return False
    if start_verse is not None and end_verse is not None:
        if start_verse < 1 or end_verse < 1:
            return False
        if start_chapter == end_chapter and start_verse > end_verse:
            return False
    return True
