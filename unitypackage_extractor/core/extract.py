"""End-to-end extraction of a .unitypackage into a destination directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from unitypackage_extractor.common.errors import DirectoryCreateError
from unitypackage_extractor.common.logging_config import get_logger
from unitypackage_extractor.core.reconstructor import ExtractionReport, reconstruct
from unitypackage_extractor.core.unpacker import unpack

PathLike = Union[str, "os.PathLike[str]"]

_log = get_logger(__name__)


def resolve_destination(output_path: Optional[PathLike] = None) -> Path:
    """
    Create the destination directory if needed and return its canonical path.

    The containment check relies on a canonical root, so a destination that
    cannot be created or resolved is an error rather than a silent fallback.
    """
    destination = Path(output_path) if output_path is not None else Path.cwd()
    try:
        destination.mkdir(parents=True, exist_ok=True)
        resolved = destination.resolve(strict=True)
    except OSError as exc:
        raise DirectoryCreateError(f"Could not prepare destination '{destination}': {exc}") from exc
    if not resolved.is_dir():
        raise DirectoryCreateError(f"Destination '{destination}' is not a directory")
    return resolved


def extract_package(
    package_path: PathLike,
    output_path: Optional[PathLike] = None,
    *,
    sanitize_for: Optional[str] = None,
    temp_root: Optional[PathLike] = None,
) -> ExtractionReport:
    """
    Extract every asset of ``package_path`` below ``output_path``.

    Args:
        package_path: The .unitypackage file
        output_path: Destination directory (current directory if None)
        sanitize_for: ``posix`` or ``windows`` filename sanitization
        temp_root: Parent directory for the temporary unpack tree

    Returns:
        ExtractionReport for the run
    """
    _log.info("Unpacking file temporarily...")
    with unpack(package_path, temp_root=temp_root) as tmp_path:
        # Only touch the destination once the archive is known to be readable
        destination = resolve_destination(output_path)
        report = reconstruct(tmp_path, destination, sanitize_for=sanitize_for)

    _log.debug(
        "Extracted %d assets into %s (%d unsafe, %d ignored)",
        len(report.extracted),
        destination,
        len(report.skipped_unsafe),
        len(report.skipped_malformed),
    )
    return report


__all__ = ["extract_package", "resolve_destination"]
