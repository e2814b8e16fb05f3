"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class MimeCommand:
    """Resolve the MIME type of a file."""

    path: str
    original_name: str | None = None
    command: Literal["mime"] = "mime"


@dataclass(frozen=True)
class SplitCommand:
    """Split a file into numbered pieces."""

    path: str
    piece_size_mb: float | None = None
    command: Literal["split"] = "split"


@dataclass(frozen=True)
class JoinCommand:
    """Join numbered pieces back into a file."""

    base_path: str
    output_path: str | None = None
    command: Literal["join"] = "join"


@dataclass(frozen=True)
class ExtsCommand:
    """List extensions registered for a MIME type."""

    mime_type: str
    command: Literal["exts"] = "exts"


@dataclass(frozen=True)
class TypesCommand:
    """List MIME types registered for an extension."""

    extension: str
    command: Literal["types"] = "types"


CommandRequest = (
    MimeCommand
    | SplitCommand
    | JoinCommand
    | ExtsCommand
    | TypesCommand
)
