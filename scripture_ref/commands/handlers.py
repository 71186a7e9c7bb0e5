"""Command handlers for scripture-ref."""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Union

from scripture_ref.commands.parser import ParsedCommand
from scripture_ref.data.canon import CANON, CanonRegistry
from scripture_ref.data.types import Reference, VerseRange
from scripture_ref.formatter import format_anchor, format_location, format_reference
from scripture_ref.linker import link_references
from scripture_ref.navigation import next_chapter, prev_chapter
from scripture_ref.parser import parse_anchor, parse_reference, parse_verse_range
from scripture_ref.ranges import contains, sort_ranges

logger = logging.getLogger(__name__)

_POSITION = re.compile(r"^(?P<chapter>\d{1,4}):(?P<verse>\d{1,4})$")

HELP_TEXT = """
Commands:
  parse <reference>             - Parse a reference ("Rom 1:1-7")
  format <code>                 - Format a stored code ("ROM 1:1-7", "ROM.1.1-7")
  next <reference>              - Chapter after the reference
  prev <reference>              - Chapter before the reference
  contains <range> <ch:vs>      - Is a verse inside a range
  sort <ref>; <ref>; ...        - Sort references in Bible order
  link <text>                   - Link scripture references in text
  books [query]                 - List or search books
  explore [reference]           - Open the interactive explorer

Flags:
  --json                        - Print the result as JSON
"""


@dataclass
class CommandResult:
    """Result of command execution."""

    success: bool
    message: str = ""
    action: str = ""  # Special action to take: "quit", "explore", "goto"
    data: Optional[Union[dict, list]] = None


def _reference_data(ref: Union[Reference, VerseRange], registry: CanonRegistry) -> dict:
    data = ref.to_dict()
    data["bookName"] = registry.get(ref.book_id).name if ref.book_id in registry else ""
    data["text"] = format_reference(ref, registry)
    return data


class CommandHandler:
    """Handles command execution against a canon registry."""

    def __init__(self, registry: CanonRegistry = CANON) -> None:
        self.registry = registry

    def execute(self, cmd: ParsedCommand) -> CommandResult:
        """Execute a parsed command.

        Args:
            cmd: Parsed command

        Returns:
            CommandResult with status and message
        """
        if not cmd.name:
            return CommandResult(success=False, message="No command")

        # Dispatch to handler
        handler_name = f"_cmd_{cmd.name.replace('-', '_')}"
        handler = getattr(self, handler_name, None)

        if handler:
            logger.debug("Running command %s %r", cmd.name, cmd.args)
            return handler(cmd)
        return CommandResult(success=False, message=f"Unknown command: {cmd.name}")

    def _parse(self, text: str) -> Optional[Reference]:
        return parse_reference(text, self.registry)

    def _cmd_help(self, cmd: ParsedCommand) -> CommandResult:
        """Handle help command."""
        return CommandResult(success=True, message=HELP_TEXT)

    def _cmd_quit(self, cmd: ParsedCommand) -> CommandResult:
        """Handle quit command."""
        return CommandResult(success=True, action="quit")

    def _cmd_explore(self, cmd: ParsedCommand) -> CommandResult:
        """Handle explore command."""
        return CommandResult(
            success=True,
            action="explore",
            data={"reference": cmd.rest_args} if cmd.args else None,
        )

    def _cmd_parse(self, cmd: ParsedCommand) -> CommandResult:
        """Handle parse command."""
        if not cmd.args:
            return CommandResult(success=False, message="Usage: parse <reference>")

        ref = self._parse(cmd.rest_args)
        if ref is None:
            return CommandResult(
                success=False,
                message=f"Couldn't understand reference: {cmd.rest_args}",
            )

        return CommandResult(
            success=True,
            message=format_reference(ref, self.registry),
            action="goto",
            data=_reference_data(ref, self.registry),
        )

    def _cmd_format(self, cmd: ParsedCommand) -> CommandResult:
        """Handle format command."""
        if not cmd.args:
            return CommandResult(success=False, message="Usage: format <code>")

        code = cmd.rest_args
        rng = parse_verse_range(code, self.registry) or parse_anchor(code, self.registry)
        if rng is None:
            return CommandResult(success=False, message=f"Invalid range code: {code}")

        data = _reference_data(rng, self.registry)
        data["anchor"] = format_anchor(rng)
        return CommandResult(success=True, message=data["text"], data=data)

    def _step(self, cmd: ParsedCommand, forward: bool) -> CommandResult:
        direction = "next" if forward else "prev"
        if not cmd.args:
            return CommandResult(success=False, message=f"Usage: {direction} <reference>")

        ref = self._parse(cmd.rest_args)
        if ref is None:
            return CommandResult(
                success=False,
                message=f"Couldn't understand reference: {cmd.rest_args}",
            )

        if forward:
            step = next_chapter(ref.book_id, ref.end_chapter, self.registry)
        else:
            step = prev_chapter(ref.book_id, ref.start_chapter, self.registry)

        if step is None:
            edge = "end" if forward else "start"
            return CommandResult(success=True, message=f"Already at the {edge} of the Bible")

        return CommandResult(
            success=True,
            message=format_location(step.book_id, step.chapter, registry=self.registry),
            action="goto",
            data={"bookId": step.book_id, "chapter": step.chapter},
        )

    def _cmd_next(self, cmd: ParsedCommand) -> CommandResult:
        """Handle next command."""
        return self._step(cmd, forward=True)

    def _cmd_prev(self, cmd: ParsedCommand) -> CommandResult:
        """Handle prev command."""
        return self._step(cmd, forward=False)

    def _cmd_contains(self, cmd: ParsedCommand) -> CommandResult:
        """Handle contains command."""
        if len(cmd.args) < 2:
            return CommandResult(success=False, message="Usage: contains <range> <chapter:verse>")

        position = _POSITION.match(cmd.args[-1])
        if not position:
            return CommandResult(success=False, message=f"Invalid position: {cmd.args[-1]}")

        range_text = " ".join(cmd.args[:-1])
        rng = self._parse(range_text) or parse_verse_range(range_text, self.registry)
        if rng is None:
            return CommandResult(success=False, message=f"Couldn't understand reference: {range_text}")

        chapter = int(position.group("chapter"))
        verse = int(position.group("verse"))
        inside = contains(chapter, verse, rng)
        label = format_reference(rng, self.registry)
        return CommandResult(
            success=True,
            message=f"{chapter}:{verse} is {'inside' if inside else 'outside'} {label}",
            data={"contains": inside, "range": _reference_data(rng, self.registry)},
        )

    def _cmd_sort(self, cmd: ParsedCommand) -> CommandResult:
        """Handle sort command."""
        if not cmd.args:
            return CommandResult(success=False, message="Usage: sort <ref>; <ref>; ...")

        if ";" in cmd.rest_args:
            items = [item.strip() for item in cmd.rest_args.split(";") if item.strip()]
        else:
            items = list(cmd.args)

        refs: List[Reference] = []
        for item in items:
            ref = self._parse(item)
            if ref is None:
                return CommandResult(success=False, message=f"Couldn't understand reference: {item}")
            refs.append(ref)

        ordered = sort_ranges(refs, self.registry)
        rows = [_reference_data(ref, self.registry) for ref in ordered]
        return CommandResult(
            success=True,
            message="\n".join(row["text"] for row in rows),
            data=rows,
        )

    def _cmd_link(self, cmd: ParsedCommand) -> CommandResult:
        """Handle link command."""
        if not cmd.args:
            return CommandResult(success=False, message="Usage: link <text>")

        content, matches = link_references(cmd.rest_args, self.registry)
        return CommandResult(
            success=True,
            message=content,
            data={
                "content": content,
                "references": [
                    dict(match.range.to_dict(), text=match.text) for match in matches
                ],
            },
        )

    def _cmd_books(self, cmd: ParsedCommand) -> CommandResult:
        """Handle books command."""
        if cmd.args:
            entries = self.registry.search(cmd.rest_args, limit=len(self.registry))
        else:
            entries = list(self.registry)

        rows = [
            {
                "index": self.registry.index_of(entry.id),
                "id": entry.id,
                "name": entry.name,
                "chapters": entry.chapter_count,
            }
            for entry in entries
        ]
        return CommandResult(
            success=True,
            message="\n".join(f"{row['id']:<4} {row['name']}" for row in rows),
            data=rows,
        )
