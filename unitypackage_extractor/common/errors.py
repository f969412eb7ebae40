"""
Custom exception classes for the UnityPackage extractor.
"""


class ExtractorError(Exception):
    """Base exception class for extraction errors."""
    pass


class ArchiveOpenError(ExtractorError):
    """Raised when the archive file cannot be opened for reading."""
    pass


class DecompressError(ExtractorError):
    """Raised when the archive is not valid gzip data."""
    pass


class UnpackError(ExtractorError):
    """Raised when the tar stream is truncated, malformed or cannot be unpacked."""
    pass


class DirectoryCreateError(ExtractorError):
    """Raised when a destination directory cannot be created."""
    pass


class WriteError(ExtractorError):
    """Raised when an asset cannot be moved to its output location."""
    pass
