"""Decompress a .unitypackage into a scoped temporary directory."""

from __future__ import annotations

import gzip
import os
import tarfile
import tempfile
import zlib
from pathlib import Path
from typing import Optional, Union

from unitypackage_extractor.common.constants import TEMP_DIR_PREFIX
from unitypackage_extractor.common.errors import (
    ArchiveOpenError,
    DecompressError,
    UnpackError,
)
from unitypackage_extractor.common.logging_config import get_logger
from unitypackage_extractor.core.paths import is_within, normalized_output_path

PathLike = Union[str, "os.PathLike[str]"]

_log = get_logger(__name__)


def safe_extract_tar(tar: tarfile.TarFile, destination: Path) -> int:
    """Extract a streamed tar archive, refusing links and members that escape ``destination``.

    Returns the number of members extracted.
    """
    dest_root = destination.resolve()
    count = 0
    for member in tar:
        target = normalized_output_path(dest_root, member.name)
        if not is_within(dest_root, target):
            raise UnpackError(f"Unsafe tar member path detected: {member.name!r}")
        if member.issym() or member.islnk():
            raise UnpackError(f"Link members are not supported: {member.name!r}")
        tar.extract(member, dest_root, filter="data")
        count += 1
    return count


def unpack(
    archive_path: PathLike, temp_root: Optional[PathLike] = None
) -> tempfile.TemporaryDirectory:
    """
    Unpack a gzip-compressed tar archive into a fresh temporary directory.

    Args:
        archive_path: Path to the .unitypackage file
        temp_root: Parent directory for the temporary tree (system default if None)

    Returns:
        The temporary directory handle; use it as a context manager so the
        tree is removed when the caller is done.

    Raises:
        ArchiveOpenError: The archive cannot be opened for reading
        DecompressError: The archive is not gzip data
        UnpackError: The tar stream is truncated or malformed
    """
    try:
        tmp_dir = tempfile.TemporaryDirectory(prefix=TEMP_DIR_PREFIX, dir=temp_root)
    except OSError as exc:
        raise UnpackError(f"Could not create temporary directory: {exc}") from exc

    try:
        try:
            archive = open(archive_path, "rb")
        except OSError as exc:
            raise ArchiveOpenError(f"Could not open .unitypackage file '{archive_path}': {exc}") from exc

        with archive, gzip.GzipFile(fileobj=archive, mode="rb") as stream:
            try:
                head = stream.peek(1)
            except (gzip.BadGzipFile, zlib.error, EOFError) as exc:
                raise DecompressError(f"'{archive_path}' is not valid gzip data: {exc}") from exc
            if not head:
                raise DecompressError(f"'{archive_path}' is not valid gzip data: empty stream")

            try:
                with tarfile.open(fileobj=stream, mode="r|") as tar:
                    count = safe_extract_tar(tar, Path(tmp_dir.name))
            except gzip.BadGzipFile as exc:
                raise DecompressError(f"'{archive_path}' is not valid gzip data: {exc}") from exc
            except (tarfile.TarError, EOFError, zlib.error, OSError) as exc:
                raise UnpackError(f"Error unpacking to temporary directory: {exc}") from exc
    except Exception:
        # Remove the partial tree before propagating
        tmp_dir.cleanup()
        raise

    _log.debug("Unpacked %d members from %s into %s", count, archive_path, tmp_dir.name)
    return tmp_dir


__all__ = ["unpack", "safe_extract_tar"]
