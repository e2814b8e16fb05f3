"""Tests for splitting files into numbered pieces."""

import pytest

from chunks.naming import get_piece_path, piece_suffix
from chunks.splitter import piece_size_bytes, split
from common.constants import BLOCK_SIZE_BYTES, BYTES_PER_MB
from common.exceptions import InvalidPieceSizeError

# 16 KiB expressed in MB, exact in binary floating point
PIECE_MB = 16 * 1024 / BYTES_PER_MB
PIECE_BYTES = 16 * 1024


def piece_sizes(path, count):
    return [get_piece_path(path, n).stat().st_size for n in range(1, count + 1)]


def test_piece_suffix():
    """Piece numbers are zero-padded to three digits."""
    assert piece_suffix(1) == '.001'
    assert piece_suffix(42) == '.042'
    assert piece_suffix(999) == '.999'
    assert piece_suffix(1000) == '.1000'


def test_get_piece_path(tmp_path):
    """Pieces sit next to the base file."""
    assert get_piece_path(tmp_path / 'backup.tar', 3) == tmp_path / 'backup.tar.003'
    assert str(get_piece_path('data.bin', 1)) == 'data.bin.001'


def test_piece_size_bytes():
    """Sizes in MB convert to bytes, rounding down."""
    assert piece_size_bytes(10) == 10 * BYTES_PER_MB
    assert piece_size_bytes(0.5) == BYTES_PER_MB // 2
    assert piece_size_bytes(1e-6) == 1


@pytest.mark.parametrize('size_mb', [0, -1, 1e-7, float('inf'), float('-inf'), float('nan')])
def test_piece_size_bytes_rejects_non_positive(size_mb):
    """Sizes under one byte are rejected."""
    with pytest.raises(InvalidPieceSizeError):
        piece_size_bytes(size_mb)


def test_invalid_piece_size_is_value_error(make_binary_file):
    """InvalidPieceSizeError is a ValueError and nothing is written."""
    source = make_binary_file('data.bin', 100)
    with pytest.raises(ValueError):
        split(source, 0)
    assert not get_piece_path(source, 1).exists()


def test_split_25mb_into_three_pieces(make_binary_file):
    """A 25 MB file split at 10 MB gives 10 + 10 + 5 MB."""
    source = make_binary_file('big.bin', 25 * BYTES_PER_MB)

    count = split(source, 10)

    assert count == 3
    sizes = piece_sizes(source, 3)
    assert sizes == [10 * BYTES_PER_MB, 10 * BYTES_PER_MB, 5 * BYTES_PER_MB]
    assert sum(sizes) == 25 * BYTES_PER_MB
    assert not get_piece_path(source, 4).exists()


def test_split_default_piece_size(make_binary_file):
    """The default piece size is 10 MB."""
    source = make_binary_file('small.bin', 1000)
    assert split(source) == 1
    assert get_piece_path(source, 1).read_bytes() == source.read_bytes()


def test_split_empty_file(make_binary_file):
    """An empty file produces no pieces."""
    source = make_binary_file('empty.bin', 0)
    assert split(source, PIECE_MB) == 0
    assert not get_piece_path(source, 1).exists()


def test_split_smaller_than_block(make_binary_file):
    """A file under one block fits in a single piece."""
    source = make_binary_file('tiny.bin', 100)
    assert split(source, PIECE_MB) == 1
    assert get_piece_path(source, 1).read_bytes() == source.read_bytes()


def test_split_exact_multiple_has_no_empty_trailing_piece(make_binary_file):
    """A file ending on a piece boundary gets no extra piece."""
    source = make_binary_file('exact.bin', 3 * PIECE_BYTES)

    assert split(source, PIECE_MB) == 3
    assert piece_sizes(source, 3) == [PIECE_BYTES] * 3
    assert not get_piece_path(source, 4).exists()


def test_split_piece_plus_one_byte(make_binary_file):
    """One byte past a piece boundary starts a one-byte piece."""
    source = make_binary_file('plus.bin', PIECE_BYTES + 1)

    assert split(source, PIECE_MB) == 2
    assert piece_sizes(source, 2) == [PIECE_BYTES, 1]


def test_split_overshoots_by_less_than_a_block(make_binary_file):
    """Piece sizes that are not block multiples round up to whole blocks."""
    source = make_binary_file('odd.bin', 5 * BLOCK_SIZE_BYTES)
    piece_mb = (BLOCK_SIZE_BYTES + 1) / BYTES_PER_MB

    assert split(source, piece_mb) == 3
    assert piece_sizes(source, 3) == [2 * BLOCK_SIZE_BYTES, 2 * BLOCK_SIZE_BYTES, BLOCK_SIZE_BYTES]


def test_split_pieces_concatenate_to_source(make_binary_file):
    """Pieces hold contiguous byte ranges in order."""
    source = make_binary_file('data.bin', 2 * PIECE_BYTES + 123)

    count = split(source, PIECE_MB)

    joined = b''.join(get_piece_path(source, n).read_bytes() for n in range(1, count + 1))
    assert joined == source.read_bytes()


def test_split_overwrites_existing_pieces(make_binary_file):
    """Stale piece files are replaced."""
    source = make_binary_file('data.bin', 10)
    get_piece_path(source, 1).write_bytes(b'x' * 5000)

    assert split(source, PIECE_MB) == 1
    assert get_piece_path(source, 1).read_bytes() == source.read_bytes()


def test_split_missing_source(tmp_path):
    """A missing source raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        split(tmp_path / 'missing.bin', PIECE_MB)


def test_split_accepts_string_path(make_binary_file):
    """Paths may be given as strings."""
    source = make_binary_file('data.bin', 10)
    assert split(str(source), PIECE_MB) == 1


@pytest.mark.parametrize('size_mb', [float('inf'), float('nan')])
def test_split_rejects_non_finite_size(make_binary_file, size_mb):
    """Infinite and NaN sizes are rejected before any piece is written."""
    source = make_binary_file('data.bin', 100)
    with pytest.raises(InvalidPieceSizeError):
        split(source, size_mb)
    assert not get_piece_path(source, 1).exists()
