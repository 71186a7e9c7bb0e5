"""Tests for canon module."""

import pytest

from scripture_ref.data.canon import (
    BOOK_ORDER,
    CANON,
    CanonRegistry,
    book_at,
    book_chapters,
    book_index,
    get_book,
    get_book_by_name,
    search_books,
    next_book,
    prev_book,
)
from scripture_ref.data.types import BookEntry


class TestBookOrder:
    """Test book order and indexing."""

    def test_book_order_length(self):
        """Should have 66 books."""
        assert len(BOOK_ORDER) == 66
        assert len(CANON) == 66

    def test_first_book(self):
        """First book should be Genesis."""
        assert BOOK_ORDER[0] == "GEN"
        assert CANON.at(0).name == "Genesis"

    def test_last_book(self):
        """Last book should be Revelation."""
        assert BOOK_ORDER[-1] == "REV"
        assert CANON.at(65).name == "Revelation"

    def test_book_index(self):
        """Test book index lookup."""
        assert book_index("GEN") == 0
        assert book_index("PSA") == 18
        assert book_index("MAT") == 39
        assert book_index("REV") == 65
        assert book_index("NonExistent") == -1

    def test_book_at(self):
        """Index lookup should be bounded."""
        assert book_at(44).id == "ROM"
        assert book_at(-1) is None
        assert book_at(66) is None

    def test_ids_unique(self):
        """Book ids should be unique 3-character codes."""
        assert len(set(BOOK_ORDER)) == 66
        assert all(len(book_id) == 3 for book_id in BOOK_ORDER)

    def test_testament_boundary(self):
        """Malachi should be followed by Matthew."""
        assert BOOK_ORDER[book_index("MAL") + 1] == "MAT"


class TestBookChapters:
    """Test chapter count lookup."""

    def test_genesis_chapters(self):
        """Genesis should have 50 chapters."""
        assert book_chapters("GEN") == 50

    def test_psalms_chapters(self):
        """Psalms should have 150 chapters."""
        assert book_chapters("PSA") == 150

    def test_major_books(self):
        """Spot-check chapter counts."""
        assert book_chapters("MAT") == 28
        assert book_chapters("ROM") == 16
        assert book_chapters("REV") == 22
        assert book_chapters("OBA") == 1

    def test_all_books_have_chapters(self):
        """Every book should have at least one chapter."""
        assert all(entry.chapter_count >= 1 for entry in CANON)

    def test_total_chapters(self):
        """The canon should have 1189 chapters."""
        assert sum(entry.chapter_count for entry in CANON) == 1189

    def test_unknown_book(self):
        """Unknown book should return 0."""
        assert book_chapters("NonExistent") == 0


class TestGetBook:
    """Test book lookup by id and name."""

    def test_get_by_id(self):
        """Known ids should return the entry."""
        genesis = get_book("GEN")
        assert genesis.id == "GEN"
        assert genesis.name == "Genesis"
        assert genesis.chapter_count == 50

    def test_get_unknown_id(self):
        """Unknown ids should return None."""
        assert get_book("INVALID") is None
        assert get_book("") is None

    def test_get_by_name(self):
        """Names should match case-insensitively."""
        assert get_book_by_name("Genesis").id == "GEN"
        assert get_book_by_name("GeNeSiS").id == "GEN"
        assert get_book_by_name("song of solomon").id == "SNG"

    def test_get_by_unknown_name(self):
        """Unknown names should return None."""
        assert get_book_by_name("Unknown") is None
        assert get_book_by_name("") is None


class TestRegistry:
    """Test registry construction."""

    def test_duplicate_id_rejected(self):
        """Duplicate ids should fail at construction."""
        entries = [BookEntry("AAA", "Alpha", 1), BookEntry("AAA", "Beta", 2)]
        with pytest.raises(ValueError):
            CanonRegistry(entries)

    def test_zero_chapters_rejected(self):
        """Books without chapters should fail at construction."""
        with pytest.raises(ValueError):
            CanonRegistry([BookEntry("AAA", "Alpha", 0)])

    def test_custom_registry(self):
        """A custom registry answers its own lookups."""
        registry = CanonRegistry([BookEntry("AAA", "Alpha", 2), BookEntry("BBB", "Beta", 3)])
        assert registry.index_of("BBB") == 1
        assert registry.chapter_count("AAA") == 2
        assert "GEN" not in registry

    def test_entries_immutable(self):
        """Entries are frozen."""
        with pytest.raises(AttributeError):
            get_book("GEN").chapter_count = 1


class TestSearchBooks:
    """Test book search functionality."""

    def test_empty_search(self):
        """Empty search should return first books."""
        results = search_books("")
        assert len(results) > 0
        assert results[0].id == "GEN"

    def test_prefix_search(self):
        """Prefix search should find books."""
        results = search_books("gen")
        assert results[0].id == "GEN"

    def test_psalm_search(self):
        """Psalm search should find Psalms."""
        results = search_books("ps")
        assert results[0].id == "PSA"

    def test_substring_ranks_lower(self):
        """Substring hits come after prefix hits."""
        results = search_books("john", limit=10)
        ids = [entry.id for entry in results]
        assert ids[:4] == ["JHN", "1JN", "2JN", "3JN"]

    def test_limit(self):
        """Limit should be respected."""
        results = search_books("", limit=5)
        assert len(results) == 5


class TestNavigation:
    """Test book navigation."""

    def test_next_book(self):
        """Next book should work."""
        assert next_book("GEN") == "EXO"
        assert next_book("MAL") == "MAT"

    def test_next_book_last(self):
        """Next book from last should return None."""
        assert next_book("REV") is None

    def test_prev_book(self):
        """Previous book should work."""
        assert prev_book("EXO") == "GEN"
        assert prev_book("MAT") == "MAL"

    def test_prev_book_first(self):
        """Previous book from first should return None."""
        assert prev_book("GEN") is None

    def test_unknown_book(self):
        """Unknown books have no neighbours."""
        assert next_book("XYZ") is None
        assert prev_book("XYZ") is None
