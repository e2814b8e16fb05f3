"""Utility functions for CLI operations."""

SIZE_UNITS = ('B', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB')


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count with the largest binary unit that keeps it >= 1.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string such as "512 B" or "1.50 MiB"
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    size = float(size_bytes)
    unit_index = 0
    while size >= 1024.0 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024.0
        unit_index += 1
    return f"{size:.2f} {SIZE_UNITS[unit_index]}"
