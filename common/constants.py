"""Project-wide constants (block size, piece naming, default piece size)."""

BLOCK_SIZE_BYTES: int = 8 * 1024  # 8 KiB transfer block for split/join
DEFAULT_PIECE_SIZE_MB: float = 10
BYTES_PER_MB: int = 1024 * 1024
PIECE_NUMBER_WIDTH: int = 3
FIRST_PIECE_NUMBER: int = 1

GENERIC_BINARY_MIME: str = "application/octet-stream"
IMAGE_EXTENSIONS_PATTERN: str = r"^(?:jpe?g|png|[gt]if|bmp|swf)$"

DEFAULT_CONFIG_DIR_NAME: str = ".filekit"
