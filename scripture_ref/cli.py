"""Command-line front end for scripture-ref."""

import json
import logging
import sys
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from scripture_ref.commands import CommandHandler, CommandResult, ParsedCommand, parse_tokens
from scripture_ref.config import Config, get_config

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _rows_table(rows: List[dict], title: str) -> Table:
    table = Table(title=title, show_lines=False)
    columns = list(rows[0].keys()) if rows else []
    for column in columns:
        table.add_column(column, style="bold" if column in ("text", "name") else "")
    for row in rows:
        table.add_row(*["" if row[c] is None else str(row[c]) for c in columns])
    return table


def render(result: CommandResult, cmd: ParsedCommand, console: Console, config: Config) -> None:
    """Print a command result."""
    if "json" in cmd.flags and result.data is not None:
        console.print_json(json.dumps(result.data), indent=config.json_indent)
        return

    if cmd.name in ("books", "sort") and isinstance(result.data, list):
        console.print(_rows_table(result.data, title=cmd.name.capitalize()))
        return

    text = Text(result.message)
    if cmd.name == "contains" and isinstance(result.data, dict):
        text.stylize("green" if result.data["contains"] else "red")
    elif cmd.name in ("parse", "format", "next", "prev"):
        text.stylize("bold")
    console.print(text)


def run(argv: Sequence[str], console: Optional[Console] = None, config: Optional[Config] = None) -> int:
    """Run one command and return the process exit status."""
    console = console or Console()
    config = config or get_config()

    cmd = parse_tokens(list(argv))
    if not cmd.name:
        cmd = parse_tokens(["help"])

    level = "DEBUG" if "v" in cmd.flags or "verbose" in cmd.flags else config.log_level
    setup_logging(level)

    result = CommandHandler().execute(cmd)
    if not result.success:
        Console(stderr=True).print(Text(result.message, style="red"))
        return 1

    if result.action == "explore":
        from scripture_ref.app import ReferenceExplorer

        start = (result.data or {}).get("reference") or config.default_reference
        ReferenceExplorer(start_reference=start).run()
        return 0

    render(result, cmd, console, config)
    return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(run(sys.argv[1:]))
