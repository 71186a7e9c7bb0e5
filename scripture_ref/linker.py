"""Finding scripture references in prose and linking them.

Scans text such as systematic-theology entries for references like
"Matt. 28:19", "1 Cor 12:11" or "Romans 8:28-30" and wraps the ones that
are not already linked in ``<a data-scripture="..." class="scripture-link">``.
"""

import logging
import re
from typing import List, Optional, Tuple

from scripture_ref.data.aliases import ALIASES, lookup_alias, match_exact_name, normalize_alias
from scripture_ref.data.canon import CANON, CanonRegistry
from scripture_ref.data.types import ScriptureMatch, VerseRange
from scripture_ref.formatter import format_anchor

logger = logging.getLogger(__name__)

_LINK_TEMPLATE = '<a data-scripture="{anchor}" class="scripture-link">{text}</a>'
_OPEN_TAG = re.compile(r"<a[\s>]", re.IGNORECASE)
_CLOSE_TAG = re.compile(r"</a\s*>", re.IGNORECASE)


def _book_pattern(name: str) -> str:
    """Regex for one book spelling, tolerant of spacing and abbreviation dots."""
    match = re.match(r"^([1-3])\s*(.+)$", name)
    if match:
        digit, rest = match.groups()
        pattern = digit + r"\s*" + re.escape(rest).replace(r"\ ", r"\s+")
    else:
        pattern = re.escape(name).replace(r"\ ", r"\s+")
    if len(name) <= 6:
        pattern += r"\.?"
    return pattern


def _build_pattern(registry: CanonRegistry) -> "re.Pattern[str]":
    names = set(ALIASES) if registry is CANON else set()
    for entry in registry:
        names.add(entry.name.lower())
        names.update(normalize_alias(alias) for alias in entry.aliases)
    # Longest spelling first so "1 john" wins over "john"
    books = sorted(names, key=len, reverse=True)
    return re.compile(
        r"(?<![A-Za-z0-9])"
        r"(?P<book>" + "|".join(_book_pattern(name) for name in books) + r")"
        r"\s+(?P<c1>\d{1,4}):(?P<v1>\d{1,4})"
        r"(?:\s*[–-]\s*(?:(?P<c2>\d{1,4}):(?P<v2>\d{1,4})|(?P<ve>\d{1,4})))?"
        r"(?:ff\.?)?"
        r"(?![0-9])",
        re.IGNORECASE,
    )


_REFERENCE_PATTERN = _build_pattern(CANON)


def _resolve(book_text: str, registry: CanonRegistry) -> Optional[str]:
    # Exact spellings only; prefix guessing is too loose for running text
    token = normalize_alias(book_text)
    return lookup_alias(token, registry) or match_exact_name(token, registry)


def find_references(text: str, registry: CanonRegistry = CANON) -> List[ScriptureMatch]:
    """Find scripture references in running text.

    Args:
        text: Plain text or HTML
        registry: Canon to resolve against

    Returns:
        Matches in order of appearance; unknown books and out-of-range
        chapters are skipped
    """
    if not text or not isinstance(text, str):
        return []

    pattern = _REFERENCE_PATTERN if registry is CANON else _build_pattern(registry)
    matches: List[ScriptureMatch] = []

    for match in pattern.finditer(text):
        book_id = _resolve(match.group("book"), registry)
        if book_id is None:
            logger.debug("Skipping unknown book %r", match.group("book"))
            continue

        start_chapter = int(match.group("c1"))
        start_verse = int(match.group("v1"))
        if match.group("c2"):
            end_chapter, end_verse = int(match.group("c2")), int(match.group("v2"))
        elif match.group("ve"):
            end_chapter, end_verse = start_chapter, int(match.group("ve"))
        else:
            end_chapter, end_verse = start_chapter, start_verse

        rng = VerseRange.create(
            book_id, start_chapter, start_verse, end_chapter, end_verse, registry=registry
        )
        if rng is None:
            logger.debug("Skipping invalid reference %r", match.group(0))
            continue

        matches.append(
            ScriptureMatch(text=match.group(0), start=match.start(), end=match.end(), range=rng)
        )

    return matches


def is_inside_link(content: str, index: int) -> bool:
    """Return True if position index lies inside an open <a> element."""
    before = content[:index]
    opens = [m.start() for m in _OPEN_TAG.finditer(before)]
    if not opens:
        return False
    closes = [m.start() for m in _CLOSE_TAG.finditer(before)]
    return not closes or opens[-1] > closes[-1]


def link_references(content: str, registry: CanonRegistry = CANON) -> Tuple[str, List[ScriptureMatch]]:
    """Wrap unlinked scripture references in data-scripture anchors.

    Returns:
        (new content, matches that were linked) with matches in order of
        appearance
    """
    if not content or not isinstance(content, str):
        return content, []

    linked: List[ScriptureMatch] = []
    new_content = content

    # Replace back to front so earlier offsets stay valid
    for found in reversed(find_references(content, registry)):
        if is_inside_link(content, found.start):
            continue
        anchor = _LINK_TEMPLATE.format(anchor=format_anchor(found.range), text=found.text)
        new_content = new_content[: found.start] + anchor + new_content[found.end :]
        linked.append(found)

    linked.reverse()
    logger.debug("Linked %d scripture references", len(linked))
    return new_content, linked
