"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Optional

from chunks.joiner import join, list_pieces
from chunks.splitter import split
from cli.config import Config, default_config_path
from cli.models import (
    ExtsCommand,
    JoinCommand,
    MimeCommand,
    SplitCommand,
    TypesCommand,
)
from cli.utils import format_file_size
from common.logging_config import get_logger
from mime.resolver import MimeResolver
from mime.table import ExtensionTable, build_table

logger = get_logger(__name__)


_config: Optional[Config] = None
_resolver: Optional[MimeResolver] = None


def get_config() -> Config:
    """
    Get or create global Config instance.

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        logger.debug("Loading CLI configuration")
        _config = Config(default_config_path())
    return _config


def get_resolver() -> MimeResolver:
    """
    Get or create global MimeResolver instance.

    The extension table includes the extra mappings named in the config.

    Returns:
        MimeResolver instance
    """
    global _resolver
    if _resolver is None:
        logger.debug("Creating new MimeResolver instance")
        table = build_table(get_config().get_mime_table_path())
        _resolver = MimeResolver(table=table)
    return _resolver


def handle_mime(cmd: MimeCommand, resolver: Optional[MimeResolver] = None) -> str:
    """
    Handle 'mime' command.

    Args:
        cmd: MimeCommand with path and optional original name
        resolver: Optional MimeResolver for dependency injection (testing)

    Returns:
        Detected MIME type or a not-found message
    """
    if resolver is None:
        resolver = get_resolver()
    original_name = cmd.original_name or Path(cmd.path).name
    mime_type = resolver.resolve(cmd.path, original_name)
    if mime_type is None:
        return f"No MIME type found for {cmd.path}"
    return f"{cmd.path}: {mime_type}"


def handle_split(cmd: SplitCommand, config: Optional[Config] = None) -> str:
    """
    Handle 'split' command.

    Args:
        cmd: SplitCommand with path and optional piece size
        config: Optional Config for dependency injection (testing)

    Returns:
        Summary of the pieces written
    """
    piece_size_mb = cmd.piece_size_mb
    if piece_size_mb is None:
        if config is None:
            config = get_config()
        piece_size_mb = config.get_piece_size_mb()

    logger.info(f"Executing split command: path={cmd.path} piece_size_mb={piece_size_mb}")
    size = Path(cmd.path).stat().st_size
    count = split(cmd.path, piece_size_mb)
    logger.debug("Split command completed")
    return f"Split {cmd.path} ({format_file_size(size)}) into {count} piece(s) of up to {piece_size_mb:g} MB"


def handle_join(cmd: JoinCommand) -> str:
    """
    Handle 'join' command.

    Args:
        cmd: JoinCommand with base path and optional output path

    Returns:
        Summary of the pieces joined
    """
    logger.info(f"Executing join command: base_path={cmd.base_path} output_path={cmd.output_path}")
    if not list_pieces(cmd.base_path):
        return f"No pieces found for {cmd.base_path} (expected {cmd.base_path}.001)"

    count = join(cmd.base_path, cmd.output_path)
    output = cmd.output_path or cmd.base_path
    size = Path(output).stat().st_size
    logger.debug("Join command completed")
    return f"Joined {count} piece(s) into {output} ({format_file_size(size)})"


def handle_exts(cmd: ExtsCommand, table: Optional[ExtensionTable] = None) -> str:
    """
    Handle 'exts' command.

    Args:
        cmd: ExtsCommand with MIME type
        table: Optional ExtensionTable for dependency injection (testing)

    Returns:
        Extensions registered for the MIME type
    """
    if table is None:
        table = get_resolver().table
    exts = table.exts_by_mime(cmd.mime_type)
    if not exts:
        return f"No extensions registered for {cmd.mime_type}"
    return f"{cmd.mime_type}: " + ", ".join(exts)


def handle_types(cmd: TypesCommand, table: Optional[ExtensionTable] = None) -> str:
    """
    Handle 'types' command.

    Args:
        cmd: TypesCommand with extension
        table: Optional ExtensionTable for dependency injection (testing)

    Returns:
        MIME types registered for the extension, canonical first
    """
    if table is None:
        table = get_resolver().table
    mimes = table.mimes_by_ext(cmd.extension)
    if not mimes:
        return f"No MIME types registered for {cmd.extension}"
    return f"{cmd.extension}: " + ", ".join(mimes)
