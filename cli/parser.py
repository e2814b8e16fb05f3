"""Command parser for CLI input."""

import math
import shlex

from cli.models import (
    CommandRequest,
    ExtsCommand,
    JoinCommand,
    MimeCommand,
    SplitCommand,
    TypesCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of Mime/Split/Join/Exts/Types)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0].lower()

    if command_name == "mime":
        return _parse_mime(tokens[1:])
    elif command_name == "split":
        return _parse_split(tokens[1:])
    elif command_name == "join":
        return _parse_join(tokens[1:])
    elif command_name == "exts":
        return _parse_exts(tokens[1:])
    elif command_name == "types":
        return _parse_types(tokens[1:])
    else:
        raise ParseError(f"Unknown command: {tokens[0]}")


def _parse_mime(args: list[str]) -> MimeCommand:
    """Parse 'mime <path> [original_name]' command."""
    if not 1 <= len(args) <= 2:
        raise ParseError("mime requires 1 or 2 arguments: <path> [original_name]")

    original_name = args[1] if len(args) > 1 else None
    return MimeCommand(path=args[0], original_name=original_name)


def _parse_split(args: list[str]) -> SplitCommand:
    """Parse 'split <path> [piece_size_mb]' command."""
    if not 1 <= len(args) <= 2:
        raise ParseError("split requires 1 or 2 arguments: <path> [piece_size_mb]")

    piece_size_mb = None
    if len(args) > 1:
        try:
            piece_size_mb = float(args[1])
        except ValueError:
            raise ParseError(f"Invalid piece size: {args[1]}")
        if not math.isfinite(piece_size_mb) or piece_size_mb <= 0:
            raise ParseError(f"Piece size must be a positive number of MB: {args[1]}")

    return SplitCommand(path=args[0], piece_size_mb=piece_size_mb)


def _parse_join(args: list[str]) -> JoinCommand:
    """Parse 'join <base_path> [output_path]' command."""
    if not 1 <= len(args) <= 2:
        raise ParseError("join requires 1 or 2 arguments: <base_path> [output_path]")

    output_path = args[1] if len(args) > 1 else None
    return JoinCommand(base_path=args[0], output_path=output_path)


def _parse_exts(args: list[str]) -> ExtsCommand:
    """Parse 'exts <mime_type>' command."""
    if len(args) != 1:
        raise ParseError("exts requires exactly 1 argument: <mime_type>")

    return ExtsCommand(mime_type=args[0])


def _parse_types(args: list[str]) -> TypesCommand:
    """Parse 'types <extension>' command."""
    if len(args) != 1:
        raise ParseError("types requires exactly 1 argument: <extension>")

    return TypesCommand(extension=args[0])
