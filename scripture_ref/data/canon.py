"""Bible canon metadata - book ids, names, chapter counts."""

from typing import Dict, List, Optional, Sequence

from scripture_ref.data.types import BookEntry


# Protestant canon, English display names, USFM-style ids
_CANON_TABLE: Sequence[BookEntry] = (
    # Old Testament
    BookEntry("GEN", "Genesis", 50, ("gen", "ge", "gn", "genesis")),
    BookEntry("EXO", "Exodus", 40, ("exo", "ex", "exod", "exodus")),
    BookEntry("LEV", "Leviticus", 27, ("lev", "le", "leviticus")),
    BookEntry("NUM", "Numbers", 36, ("num", "nu", "numb", "numbers")),
    BookEntry("DEU", "Deuteronomy", 34, ("deu", "deut", "dt", "deuteronomy")),
    BookEntry("JOS", "Joshua", 24, ("jos", "josh", "joshua")),
    BookEntry("JDG", "Judges", 21, ("jdg", "judg", "jgs", "judges")),
    BookEntry("RUT", "Ruth", 4, ("rut", "ru", "ruth")),
    BookEntry("1SA", "1 Samuel", 31, ("1sa", "1sam", "1 samuel", "1samuel")),
    BookEntry("2SA", "2 Samuel", 24, ("2sa", "2sam", "2 samuel", "2samuel")),
    BookEntry("1KI", "1 Kings", 22, ("1ki", "1kgs", "1 kings", "1kings")),
    BookEntry("2KI", "2 Kings", 25, ("2ki", "2kgs", "2 kings", "2kings")),
    BookEntry("1CH", "1 Chronicles", 29, ("1ch", "1chr", "1chron", "1 chronicles", "1chronicles")),
    BookEntry("2CH", "2 Chronicles", 36, ("2ch", "2chr", "2chron", "2 chronicles", "2chronicles")),
    BookEntry("EZR", "Ezra", 10, ("ezr", "ezra")),
    BookEntry("NEH", "Nehemiah", 13, ("neh", "ne", "nehemiah")),
    BookEntry("EST", "Esther", 10, ("est", "esth", "esther")),
    BookEntry("JOB", "Job", 42, ("job",)),
    BookEntry("PSA", "Psalms", 150, ("psa", "ps", "pss", "psalm", "psalms")),
    BookEntry("PRO", "Proverbs", 31, ("pro", "prov", "pr", "proverbs")),
    BookEntry("ECC", "Ecclesiastes", 12, ("ecc", "eccl", "eccles", "ecclesiastes")),
    BookEntry(
        "SNG",
        "Song of Solomon",
        8,
        ("sng", "song", "sos", "song of solomon", "song of songs", "canticles", "cant"),
    ),
    BookEntry("ISA", "Isaiah", 66, ("isa", "isaiah")),
    BookEntry("JER", "Jeremiah", 52, ("jer", "jeremiah")),
    BookEntry("LAM", "Lamentations", 5, ("lam", "lamentations")),
    BookEntry("EZK", "Ezekiel", 48, ("ezk", "ezek", "eze", "ezekiel")),
    BookEntry("DAN", "Daniel", 12, ("dan", "da", "daniel")),
    BookEntry("HOS", "Hosea", 14, ("hos", "ho", "hosea")),
    BookEntry("JOL", "Joel", 3, ("jol", "joel")),
    BookEntry("AMO", "Amos", 9, ("amo", "am", "amos")),
    BookEntry("OBA", "Obadiah", 1, ("oba", "obad", "ob", "obadiah")),
    BookEntry("JON", "Jonah", 4, ("jon", "jonah")),
    BookEntry("MIC", "Micah", 7, ("mic", "micah")),
    BookEntry("NAM", "Nahum", 3, ("nam", "nah", "nahum")),
    BookEntry("HAB", "Habakkuk", 3, ("hab", "habakkuk")),
    BookEntry("ZEP", "Zephaniah", 3, ("zep", "zeph", "zephaniah")),
    BookEntry("HAG", "Haggai", 2, ("hag", "haggai")),
    BookEntry("ZEC", "Zechariah", 14, ("zec", "zech", "zechariah")),
    BookEntry("MAL", "Malachi", 4, ("mal", "malachi")),
    # New Testament
    BookEntry("MAT", "Matthew", 28, ("mat", "matt", "mt", "matthew")),
    BookEntry("MRK", "Mark", 16, ("mrk", "mk", "mar", "mark")),
    BookEntry("LUK", "Luke", 24, ("luk", "lk", "luke")),
    BookEntry("JHN", "John", 21, ("jhn", "jn", "john")),
    BookEntry("ACT", "Acts", 28, ("act", "ac", "acts")),
    BookEntry("ROM", "Romans", 16, ("rom", "ro", "romans")),
    BookEntry("1CO", "1 Corinthians", 16, ("1co", "1cor", "1 corinthians", "1corinthians")),
    BookEntry("2CO", "2 Corinthians", 13, ("2co", "2cor", "2 corinthians", "2corinthians")),
    BookEntry("GAL", "Galatians", 6, ("gal", "ga", "galatians")),
    BookEntry("EPH", "Ephesians", 6, ("eph", "ephesians")),
    BookEntry("PHP", "Philippians", 4, ("php", "phil", "philippians")),
    BookEntry("COL", "Colossians", 4, ("col", "colossians")),
    BookEntry("1TH", "1 Thessalonians", 5, ("1th", "1thess", "1thes", "1 thessalonians", "1thessalonians")),
    BookEntry("2TH", "2 Thessalonians", 3, ("2th", "2thess", "2thes", "2 thessalonians", "2thessalonians")),
    BookEntry("1TI", "1 Timothy", 6, ("1ti", "1tim", "1 timothy", "1timothy")),
    BookEntry("2TI", "2 Timothy", 4, ("2ti", "2tim", "2 timothy", "2timothy")),
    BookEntry("TIT", "Titus", 3, ("tit", "titus")),
    BookEntry("PHM", "Philemon", 1, ("phm", "phlm", "philem", "philemon")),
    BookEntry("HEB", "Hebrews", 13, ("heb", "hebrews")),
    BookEntry("JAS", "James", 5, ("jas", "jm", "james")),
    BookEntry("1PE", "1 Peter", 5, ("1pe", "1pet", "1pt", "1 peter", "1peter")),
    BookEntry("2PE", "2 Peter", 3, ("2pe", "2pet", "2pt", "2 peter", "2peter")),
    BookEntry("1JN", "1 John", 5, ("1jn", "1jo", "1john", "1 john")),
    BookEntry("2JN", "2 John", 1, ("2jn", "2jo", "2john", "2 john")),
    BookEntry("3JN", "3 John", 1, ("3jn", "3jo", "3john", "3 john")),
    BookEntry("JUD", "Jude", 1, ("jud", "jude")),
    BookEntry("REV", "Revelation", 22, ("rev", "re", "revelation", "revelations", "apocalypse")),
)


class CanonRegistry:
    """Immutable, ordered catalog of canonical books.

    Lookups never raise: absent books come back as ``None``, ``-1`` or ``0``
    so callers can probe speculatively (navigation, prefetching).
    """

    def __init__(self, entries: Sequence[BookEntry]) -> None:
        ids = [entry.id for entry in entries]
        if len(set(ids)) != len(ids):
            raise ValueError("Duplicate book id in canon table")
        for entry in entries:
            if entry.chapter_count < 1:
                raise ValueError(f"Book {entry.id} must have at least one chapter")

        self._entries: tuple[BookEntry, ...] = tuple(entries)
        self._by_id: Dict[str, BookEntry] = {entry.id: entry for entry in self._entries}
        self._index: Dict[str, int] = {entry.id: i for i, entry in enumerate(self._entries)}
        self._by_name: Dict[str, BookEntry] = {entry.name.lower(): entry for entry in self._entries}

    @classmethod
    def default(cls) -> "CanonRegistry":
        """Build the registry for the 66-book canon."""
        return cls(_CANON_TABLE)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._by_id

    @property
    def entries(self) -> tuple[BookEntry, ...]:
        """All entries in canonical order."""
        return self._entries

    @property
    def ids(self) -> List[str]:
        """All book ids in canonical order."""
        return [entry.id for entry in self._entries]

    def get(self, book_id: str) -> Optional[BookEntry]:
        """Return the entry for a book id, or None."""
        return self._by_id.get(book_id)

    def at(self, index: int) -> Optional[BookEntry]:
        """Return the book at a 0-based canonical index, or None."""
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def index_of(self, book_id: str) -> int:
        """Return the 0-based canonical index of a book, -1 if unknown."""
        return self._index.get(book_id, -1)

    def by_name(self, name: str) -> Optional[BookEntry]:
        """Return the entry whose display name matches (case-insensitive)."""
        if not name:
            return None
        return self._by_name.get(name.strip().lower())

    def chapter_count(self, book_id: str) -> int:
        """Return the number of chapters in a book, 0 if unknown."""
        entry = self._by_id.get(book_id)
        return entry.chapter_count if entry else 0

    def next_book(self, book_id: str) -> Optional[str]:
        """Return the id of the following book in the canon."""
        idx = self.index_of(book_id)
        if 0 <= idx < len(self._entries) - 1:
            return self._entries[idx + 1].id
        return None

    def prev_book(self, book_id: str) -> Optional[str]:
        """Return the id of the preceding book in the canon."""
        idx = self.index_of(book_id)
        if idx > 0:
            return self._entries[idx - 1].id
        return None

    def search(self, query: str, limit: int = 10) -> List[BookEntry]:
        """Search books by name, id or alias.

        Prefix hits rank above substring hits; ties keep canonical order.
        """
        needle = " ".join(query.lower().split())
        if not needle:
            return list(self._entries[:limit])

        matches: List[tuple[int, int, BookEntry]] = []
        for idx, entry in enumerate(self._entries):
            haystack = {entry.name.lower(), entry.id.lower()}
            haystack.update(alias.lower() for alias in entry.aliases)

            if any(h.startswith(needle) for h in haystack):
                matches.append((0, idx, entry))
            elif any(needle in h for h in haystack):
                matches.append((1, idx, entry))

        matches.sort(key=lambda item: (item[0], item[1]))
        return [entry for _, _, entry in matches][:limit]


# Built once per process, never mutated
CANON = CanonRegistry.default()

BOOK_ORDER: List[str] = CANON.ids


def get_book(book_id: str) -> Optional[BookEntry]:
    """Get a BookEntry by id."""
    return CANON.get(book_id)


def get_book_by_name(name: str) -> Optional[BookEntry]:
    """Get a BookEntry by display name."""
    return CANON.by_name(name)


def book_chapters(book_id: str) -> int:
    """Return the number of chapters in a book."""
    return CANON.chapter_count(book_id)


def book_index(book_id: str) -> int:
    """Return the index of a book in the canon (0-based)."""
    return CANON.index_of(book_id)


def book_at(index: int) -> Optional[BookEntry]:
    """Return the book at a canonical index."""
    return CANON.at(index)


def search_books(query: str, limit: int = 10) -> List[BookEntry]:
    """Search books by name/alias with scoring."""
    return CANON.search(query, limit)


def next_book(book_id: str) -> Optional[str]:
    """Return the next book in the canon."""
    return CANON.next_book(book_id)


def prev_book(book_id: str) -> Optional[str]:
    """Return the previous book in the canon."""
    return CANON.prev_book(book_id)
