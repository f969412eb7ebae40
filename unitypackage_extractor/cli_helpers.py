"""Shared CLI helpers for the unitypackage-extractor command."""

import sys

from unitypackage_extractor.common.errors import ExtractorError


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def describe_exception(exc: Exception) -> str:
    """Human-readable message for a failed extraction."""
    if isinstance(exc, ExtractorError):
        return str(exc)
    return f"Filesystem error: {exc}"
