"""Splits a file into numbered pieces of a fixed size."""

import math
from pathlib import Path
from typing import Union

from chunks.naming import get_piece_path
from common.constants import BLOCK_SIZE_BYTES, BYTES_PER_MB, DEFAULT_PIECE_SIZE_MB
from common.exceptions import InvalidPieceSizeError
from common.logging_config import get_logger

logger = get_logger(__name__)


def piece_size_bytes(piece_size_mb: float) -> int:
    """
    Convert a piece size in MB to bytes, rounding down.

    Args:
        piece_size_mb: Piece size in megabytes (may be fractional)

    Returns:
        Piece size in bytes

    Raises:
        InvalidPieceSizeError: If the size is not finite or rounds down to zero bytes or less
    """
    if not math.isfinite(piece_size_mb):
        raise InvalidPieceSizeError(f"Piece size must be a finite number, got {piece_size_mb} MB")
    size = math.floor(piece_size_mb * BYTES_PER_MB)
    if size <= 0:
        raise InvalidPieceSizeError(f"Piece size must be positive, got {piece_size_mb} MB")
    return size


def split(path: Union[str, Path], piece_size_mb: float = DEFAULT_PIECE_SIZE_MB) -> int:
    """
    Split a file into pieces matching a specific size.

    Pieces are written next to the source as <path>.001, <path>.002, ...
    Data moves in 8 KiB blocks and a piece is closed once it holds at least
    piece_size bytes, so a piece may exceed the size by less than one block
    when the size is not a multiple of the block size. A piece file is only
    created once there is data for it: an empty source yields no pieces and
    a source that ends on a piece boundary yields no empty trailing piece.

    Args:
        path: File to be split
        piece_size_mb: Size of each piece in MB

    Returns:
        Number of pieces that were created

    Raises:
        InvalidPieceSizeError: If the piece size is not positive
        OSError: If the source cannot be read or a piece cannot be written
    """
    piece_size = piece_size_bytes(piece_size_mb)
    source = Path(path)
    pieces = 0
    total = 0

    logger.info(f"Splitting {source} into pieces of {piece_size} bytes")
    with open(source, 'rb') as src:
        block = src.read(BLOCK_SIZE_BYTES)
        while block:
            pieces += 1
            piece_path = get_piece_path(source, pieces)
            written = 0
            with open(piece_path, 'wb') as piece:
                while block and written < piece_size:
                    piece.write(block)
                    written += len(block)
                    block = src.read(BLOCK_SIZE_BYTES)
            total += written
            logger.debug(f"Wrote piece {piece_path.name} ({written} bytes)")

    logger.info(f"Split {source} into {pieces} piece(s), {total} bytes")
    return pieces
