"""Naming of numbered piece files: <base>.001, <base>.002, ..."""

from pathlib import Path
from typing import Union

from common.constants import PIECE_NUMBER_WIDTH

PathLike = Union[str, Path]


def piece_suffix(number: int) -> str:
    """
    Format a piece number as a file suffix.

    Args:
        number: 1-based piece number

    Returns:
        Suffix such as '.001'; numbers past 999 keep all their digits
    """
    return f".{number:0{PIECE_NUMBER_WIDTH}d}"


def get_piece_path(base_path: PathLike, number: int) -> Path:
    """
    Get file path for a piece of a split file.

    Args:
        base_path: Path of the original (or rejoined) file
        number: 1-based piece number

    Returns:
        Path object for the piece file
    """
    base = Path(base_path)
    return base.with_name(base.name + piece_suffix(number))
