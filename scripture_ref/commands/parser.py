"""Command parser for reference commands."""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Sequence


@dataclass
class ParsedCommand:
    """A parsed command with name and arguments."""

    name: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, str] = field(default_factory=dict)
    raw: str = ""

    @property
    def first_arg(self) -> str:
        """Get the first argument or empty string."""
        return self.args[0] if self.args else ""

    @property
    def rest_args(self) -> str:
        """Get all arguments as a single string."""
        return " ".join(self.args)


# Command aliases
COMMAND_ALIASES: Dict[str, str] = {
    "p": "parse",
    "ref": "parse",
    "f": "format",
    "fmt": "format",
    "n": "next",
    "b": "prev",
    "previous": "prev",
    "in": "contains",
    "s": "sort",
    "l": "link",
    "ls": "books",
    "x": "explore",
    "h": "help",
    "q": "quit",
}


def parse_tokens(tokens: Sequence[str], raw: str = "") -> ParsedCommand:
    """Build a ParsedCommand from already split tokens (e.g. sys.argv)."""
    if not tokens:
        return ParsedCommand(name="", raw=raw)

    # First token is the command name
    name = tokens[0].lower()
    name = COMMAND_ALIASES.get(name, name)

    args: List[str] = []
    flags: Dict[str, str] = {}

    for token in tokens[1:]:
        if token.startswith("--"):
            # Long flag: --indent=4 or --json
            if "=" in token:
                key, value = token[2:].split("=", 1)
                flags[key] = value
            else:
                flags[token[2:]] = "true"
        elif token.startswith("-") and len(token) > 1 and not token[1].isdigit():
            # Short boolean flag: -v
            flags[token[1:]] = "true"
        else:
            args.append(token)

    return ParsedCommand(name=name, args=args, flags=flags, raw=raw or " ".join(tokens))


def parse_command(command_str: str) -> ParsedCommand:
    """Parse a command string into a ParsedCommand.

    Supports:
    - Simple commands: help, books
    - Commands with args: parse Rom 1:1-7
    - Flags: parse --json Gen 1:1-2:3
    - Quoted args: contains "Gen 1:20-3:10" 2:5

    A leading ":" (as typed in the explorer) is ignored.

    Args:
        command_str: Raw command string

    Returns:
        ParsedCommand instance
    """
    command_str = command_str.strip().lstrip(":").strip()
    if not command_str:
        return ParsedCommand(name="", raw=command_str)

    try:
        # Use shlex for proper quote handling
        tokens = shlex.split(command_str)
    except ValueError:
        # Fallback for unbalanced quotes
        tokens = command_str.split()

    return parse_tokens(tokens, raw=command_str)


def get_command_names() -> List[str]:
    """Get list of available command names.

    Returns:
        List of command names for completion
    """
    return [
        "parse",
        "format",
        "next",
        "prev",
        "contains",
        "sort",
        "link",
        "books",
        "explore",
        "help",
    ]
