"""Command parsing and handling for scripture-ref."""

from scripture_ref.commands.parser import parse_command, parse_tokens, ParsedCommand
from scripture_ref.commands.handlers import CommandHandler, CommandResult

__all__ = ["parse_command", "parse_tokens", "ParsedCommand", "CommandHandler", "CommandResult"]
