"""
Comment Scanner Exceptions

Configuration problems are fatal and surface before any file is scanned.
Per-file read failures are reported and skipped by the caller.
"""


class CommentScannerError(Exception):
    """
    Base exception for comment scanner errors.
    """


class PatternConfigError(CommentScannerError):
    """
    Raised when a language pattern definition is missing or malformed.
    """


class ConfigFileError(CommentScannerError):
    """
    Raised when a configuration file cannot be read or holds invalid settings.
    """


class DiscoveryError(CommentScannerError):
    """
    Raised when the scan root is not a usable directory.
    """


class FileReadError(DiscoveryError):
    """
    Raised when a source file cannot be opened or read.
    """
