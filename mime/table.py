"""Read-only extension <-> MIME lookup table with a lazily built inverse index."""

import json
import os
from functools import cached_property, lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from common.constants import GENERIC_BINARY_MIME
from common.exceptions import ExtensionTableError
from common.logging_config import get_logger
from mime.table_data import EXTENSION_MIMES

logger = get_logger(__name__)


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and strip any leading dot."""
    return extension.strip().lstrip('.').lower()


def normalize_mime(mime_type: str) -> str:
    """Lower-case a MIME type and drop any ';' parameters."""
    return mime_type.split(';', 1)[0].strip().lower()


class ExtensionTable:
    """
    Maps lowercase extensions to ordered candidate MIME types.

    The first MIME of each entry is canonical. The table is never mutated
    after construction; the MIME -> extensions index is built on first use
    and reused afterwards.
    """

    def __init__(self, mapping: Mapping[str, Sequence[str]]):
        """
        Initialize the table.

        Args:
            mapping: Extension (without dot) to ordered MIME candidates
        """
        entries = {}
        for ext, mimes in mapping.items():
            entries[normalize_extension(ext)] = tuple(mimes)
        self._entries = MappingProxyType(entries)

    @property
    def extensions(self) -> list[str]:
        """All registered extensions in registration order."""
        return list(self._entries)

    def mime_by_ext(self, extension: str) -> Optional[str]:
        """
        Return the canonical MIME type of an extension.

        Args:
            extension: Extension such as 'png' or '.PNG'

        Returns:
            Canonical MIME string, or None if the extension is unknown
        """
        mimes = self._entries.get(normalize_extension(extension))
        if not mimes:
            return None
        return mimes[0]

    def mimes_by_ext(self, extension: str) -> list[str]:
        """
        Return every MIME type registered for an extension.

        Args:
            extension: Extension to look up

        Returns:
            Ordered list of MIME types, empty if the extension is unknown
        """
        return list(self._entries.get(normalize_extension(extension), ()))

    @cached_property
    def _types(self) -> Mapping[str, tuple[str, ...]]:
        types: dict[str, list[str]] = {}
        for ext, mimes in self._entries.items():
            for mime in mimes:
                if mime == GENERIC_BINARY_MIME:
                    continue
                exts = types.setdefault(mime, [])
                if ext not in exts:
                    exts.append(ext)
        logger.debug(f"Built MIME index with {len(types)} types")
        return MappingProxyType({mime: tuple(exts) for mime, exts in types.items()})

    def exts_by_mime(self, mime_type: str) -> Optional[list[str]]:
        """
        Look up file extensions by MIME type.

        application/octet-stream is never indexed since it says nothing
        about the content.

        Args:
            mime_type: MIME type to look up

        Returns:
            Extensions in first-registration order, or None if the type is unknown
        """
        exts = self._types.get(normalize_mime(mime_type))
        if exts is None:
            return None
        return list(exts)

    def ext_by_mime(self, mime_type: str) -> Optional[str]:
        """
        Look up a single file extension by MIME type.

        Returns:
            First matching extension, or None
        """
        exts = self.exts_by_mime(mime_type)
        if not exts:
            return None
        return exts[0]

    def __contains__(self, extension: object) -> bool:
        return isinstance(extension, str) and normalize_extension(extension) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def load_extra_mappings(table_path: Path) -> dict[str, list[str]]:
    """
    Load user extension mappings from a JSON file.

    The file holds an object of extension -> MIME (string or list of strings).

    Args:
        table_path: Path to the JSON file

    Returns:
        Extension to MIME list mapping

    Raises:
        ExtensionTableError: If the file is unreadable or malformed
    """
    try:
        with open(table_path, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ExtensionTableError(f"Cannot load extension table {table_path}: {e}") from e

    if not isinstance(data, dict):
        raise ExtensionTableError(f"Extension table {table_path} must be a JSON object")

    mappings = {}
    for ext, mimes in data.items():
        if isinstance(mimes, str):
            mimes = [mimes]
        if not isinstance(mimes, list) or not all(isinstance(m, str) for m in mimes):
            raise ExtensionTableError(f"Invalid MIME list for extension '{ext}' in {table_path}")
        mappings[ext] = mimes
    return mappings


def build_table(extra_path: Optional[Path] = None) -> ExtensionTable:
    """
    Build an extension table from the built-in data and an optional user file.

    User MIME types for an existing extension take precedence over the
    built-in ones.

    Args:
        extra_path: Optional JSON file with extra mappings

    Returns:
        ExtensionTable instance
    """
    merged: dict[str, list[str]] = {ext: list(mimes) for ext, mimes in EXTENSION_MIMES.items()}

    if extra_path is not None:
        extra = load_extra_mappings(extra_path)
        for ext, mimes in extra.items():
            key = normalize_extension(ext)
            existing = merged.get(key, [])
            merged[key] = list(dict.fromkeys([normalize_mime(m) for m in mimes] + existing))
        logger.info(f"Loaded {len(extra)} extra extension mapping(s) from {extra_path}")

    return ExtensionTable(merged)


@lru_cache(1)
def get_default_table() -> ExtensionTable:
    """
    Get the process-wide extension table, built on first call.

    FILEKIT_MIME_TABLE names an optional JSON file of extra mappings. An unusable
    file is reported and the built-in table is used on its own.
    """
    extra = os.environ.get('FILEKIT_MIME_TABLE')
    if not extra:
        return build_table()
    try:
        return build_table(Path(extra))
    except ExtensionTableError as e:
        logger.warning(f"{e}; using built-in extension table only")
        return build_table()


def mime_by_ext(extension: str) -> Optional[str]:
    """Canonical MIME type for an extension, from the default table."""
    return get_default_table().mime_by_ext(extension)


def mimes_by_ext(extension: str) -> list[str]:
    """All MIME types for an extension, from the default table."""
    return get_default_table().mimes_by_ext(extension)


def exts_by_mime(mime_type: str) -> Optional[list[str]]:
    """Extensions registered for a MIME type, from the default table."""
    return get_default_table().exts_by_mime(mime_type)


def ext_by_mime(mime_type: str) -> Optional[str]:
    """First extension registered for a MIME type, from the default table."""
    return get_default_table().ext_by_mime(mime_type)
