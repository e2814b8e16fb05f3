"""Best-effort MIME type resolution through an ordered cascade of detectors."""

from pathlib import Path, PurePath
from typing import Optional, Sequence, Union

from common.logging_config import get_logger
from mime.detectors import DEFAULT_DETECTORS, Detector
from mime.table import ExtensionTable, get_default_table

logger = get_logger(__name__)

PathLike = Union[str, Path]


def extension_of(original_name: str) -> str:
    """
    Extract the lowercase extension of a file name.

    Args:
        original_name: File name, with or without directories

    Returns:
        Extension without the dot, or '' if there is none
    """
    return PurePath(original_name).suffix.lstrip('.').lower()


def _name(detector: Detector) -> str:
    return getattr(detector, '__name__', repr(detector))


class MimeResolver:
    """
    Resolves a file's MIME type, stopping at the first detector that answers.

    Detectors run in order; any failure inside one is logged and skipped.
    When none answers, the extension of the original name is looked up in
    the extension table.
    """

    def __init__(
        self,
        detectors: Sequence[Detector] = DEFAULT_DETECTORS,
        table: Optional[ExtensionTable] = None,
    ):
        """
        Initialize the resolver.

        Args:
            detectors: Ordered detection strategies
            table: Extension table for the final lookup (default table if None)
        """
        self.detectors = tuple(detectors)
        self._table = table

    @property
    def table(self) -> ExtensionTable:
        if self._table is None:
            self._table = get_default_table()
        return self._table

    def resolve(self, path: PathLike, original_name: str) -> Optional[str]:
        """
        Attempt to get the MIME type of a file.

        Args:
            path: Location of the file on disk
            original_name: Real name of the file, used for its extension

        Returns:
            MIME type string, or None when the file is missing or nothing matched
        """
        try:
            resolved = Path(path).resolve(strict=True)
        except (OSError, RuntimeError, ValueError) as e:
            logger.debug(f"Cannot resolve {path}: {e}")
            return None

        if not resolved.is_file():
            logger.debug(f"Not a regular file: {resolved}")
            return None

        extension = extension_of(original_name)

        for detector in self.detectors:
            try:
                mime_type = detector(resolved, extension)
            except Exception as e:
                logger.debug(f"Detector {_name(detector)} failed on {resolved}: {e}")
                continue
            if mime_type:
                logger.debug(f"Detector {_name(detector)} matched {resolved}: {mime_type}")
                return mime_type

        if extension:
            mime_type = self.table.mime_by_ext(extension)
            if mime_type:
                logger.debug(f"Extension table matched .{extension}: {mime_type}")
                return mime_type

        logger.debug(f"No MIME type found for {resolved} ({original_name})")
        return None


_default_resolver: Optional[MimeResolver] = None


def get_resolver() -> MimeResolver:
    """
    Get or create the global MimeResolver instance.

    Returns:
        MimeResolver using the default detectors and table
    """
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = MimeResolver()
    return _default_resolver


def resolve(path: PathLike, original_name: str) -> Optional[str]:
    """Resolve a file's MIME type with the default resolver."""
    return get_resolver().resolve(path, original_name)
