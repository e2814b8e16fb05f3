"""Joins numbered pieces back into a whole file."""

from pathlib import Path
from typing import Iterator, Optional, Union

from chunks.naming import get_piece_path
from common.constants import BLOCK_SIZE_BYTES, FIRST_PIECE_NUMBER
from common.logging_config import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def list_pieces(base_path: PathLike) -> list[Path]:
    """
    List the contiguous pieces of a split file.

    The scan starts at .001 and stops at the first missing number, so
    pieces after a gap are never included.

    Args:
        base_path: Split file name, without the .001 suffix

    Returns:
        Piece paths in order
    """
    pieces = []
    number = FIRST_PIECE_NUMBER
    while True:
        piece_path = get_piece_path(base_path, number)
        if not piece_path.is_file():
            break
        pieces.append(piece_path)
        number += 1
    return pieces


def read_blocks(path: PathLike, block_size: int = BLOCK_SIZE_BYTES) -> Iterator[bytes]:
    """
    Stream file data in blocks.

    Args:
        path: File to read
        block_size: Size of each block in bytes (default 8KB)

    Yields:
        File data blocks

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If read operation fails
    """
    with open(path, 'rb') as f:
        while True:
            block = f.read(block_size)
            if not block:
                break
            yield block


def join(base_path: PathLike, output_path: Optional[PathLike] = None) -> int:
    """
    Join a split file into a whole file. Does the reverse of split().

    The output is truncated first, then each piece from .001 upwards is
    appended until a piece number is missing.

    Args:
        base_path: Split file name, without the .001 suffix
        output_path: Where to write the joined file (defaults to base_path)

    Returns:
        Number of pieces that were joined

    Raises:
        OSError: If the output cannot be written or a piece cannot be read
    """
    base = Path(base_path)
    output = Path(output_path) if output_path is not None else base
    pieces = 0
    total = 0

    with open(output, 'wb') as out:
        while True:
            piece_path = get_piece_path(base, pieces + 1)
            if not piece_path.is_file():
                break
            pieces += 1
            for block in read_blocks(piece_path):
                out.write(block)
                total += len(block)
            logger.debug(f"Appended piece {piece_path.name}")

    logger.info(f"Joined {pieces} piece(s) of {base} into {output}, {total} bytes")
    return pieces
