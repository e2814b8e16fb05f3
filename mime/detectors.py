"""MIME detection strategies.

Each detector takes the resolved file path and the lowercase extension of the
caller-supplied original name, and returns a MIME type or None.
"""

import mimetypes
import re
from pathlib import Path
from typing import Callable, Optional

import filetype
from PIL import Image

from common.constants import IMAGE_EXTENSIONS_PATTERN

Detector = Callable[[Path, str], Optional[str]]

_IMAGE_EXTENSION_RE = re.compile(IMAGE_EXTENSIONS_PATTERN)


def is_image_extension(extension: str) -> bool:
    """Check whether an extension names an image format worth header inspection."""
    return bool(_IMAGE_EXTENSION_RE.match(extension))


def detect_image_header(path: Path, extension: str) -> Optional[str]:
    """
    Read the image header with Pillow and report its MIME type.

    Only attempted for image-like extensions; Pillow opens lazily, so
    only the header is read.

    Raises:
        PIL.UnidentifiedImageError: If the content is not a known image format
    """
    if not is_image_extension(extension):
        return None
    with Image.open(path) as img:
        return img.get_format_mimetype()


def detect_signature(path: Path, extension: str) -> Optional[str]:
    """
    Detect MIME type from the file's magic bytes.

    Uses the filetype library, which reads only the leading signature
    bytes and needs no libmagic.
    """
    kind = filetype.guess(str(path))
    if kind is None:
        return None
    return kind.mime


def detect_platform_type(path: Path, extension: str) -> Optional[str]:
    """Ask the platform MIME database (system mime.types files) about the stored file."""
    mime_type, _ = mimetypes.guess_type(str(path), strict=False)
    return mime_type or None


DEFAULT_DETECTORS: tuple[Detector, ...] = (
    detect_image_header,
    detect_signature,
    detect_platform_type,
)
