"""Custom exception classes for filekit."""


class FileKitError(Exception):
    """
    Base exception class for all filekit errors.
    """
    pass


class InvalidPieceSizeError(FileKitError, ValueError):
    """
    Raised when a requested piece size rounds down to zero bytes or less.
    """
    pass


class ExtensionTableError(FileKitError):
    """
    Raised when a user-supplied extension table file cannot be loaded.
    """
    pass


class ConfigError(FileKitError):
    """
    Raised when a configuration value is present but unusable.
    """
    pass
