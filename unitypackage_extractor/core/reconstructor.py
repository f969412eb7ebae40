"""
Rebuild the original asset tree from an unpacked .unitypackage.

Every top-level directory of the unpacked tree is one entry holding a
``pathname`` file (the asset's location relative to the destination) and an
``asset`` file (its bytes). Entries are handled one at a time:
* directories lacking either file are skipped silently
* pathnames resolving outside the destination are skipped with a warning
* everything else is moved into place
"""

from __future__ import annotations

import enum
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from unitypackage_extractor.common.constants import (
    ASSET_FILE,
    PATHNAME_FILE,
    default_sanitize_target,
)
from unitypackage_extractor.common.errors import (
    DirectoryCreateError,
    UnpackError,
    WriteError,
)
from unitypackage_extractor.common.logging_config import get_logger
from unitypackage_extractor.core.paths import (
    is_safe_pathname,
    join_output_path,
    sanitize_pathname,
)

PathLike = Union[str, "os.PathLike[str]"]

_log = get_logger(__name__)


class EntryStatus(str, enum.Enum):
    """Outcome of processing a single archive entry."""

    EXTRACTED = "extracted"
    SKIPPED_MALFORMED = "skipped-malformed"
    SKIPPED_UNSAFE = "skipped-unsafe"


@dataclass
class EntryResult:
    """Represents what happened to one archive entry."""

    entry_id: str
    status: EntryStatus
    declared_pathname: Optional[str] = None
    output_path: Optional[str] = None


@dataclass
class ExtractionReport:
    """Per-entry results of an extraction run, in processing order."""

    destination: str
    entries: List[EntryResult] = field(default_factory=list)

    def add(self, result: EntryResult) -> None:
        self.entries.append(result)

    def _with_status(self, status: EntryStatus) -> List[EntryResult]:
        return [entry for entry in self.entries if entry.status is status]

    @property
    def extracted(self) -> List[EntryResult]:
        return self._with_status(EntryStatus.EXTRACTED)

    @property
    def skipped_unsafe(self) -> List[EntryResult]:
        return self._with_status(EntryStatus.SKIPPED_UNSAFE)

    @property
    def skipped_malformed(self) -> List[EntryResult]:
        return self._with_status(EntryStatus.SKIPPED_MALFORMED)


def read_declared_pathname(pathname_file: Path) -> str:
    """Return the first line of a ``pathname`` file without its line ending."""
    try:
        with pathname_file.open("rb") as handle:
            line = handle.readline().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UnpackError(f"Could not decode pathname file '{pathname_file}': {exc}") from exc
    return line.rstrip("\r\n")


def move_file(src: PathLike, dst: PathLike) -> None:
    """
    Move ``src`` to ``dst``, overwriting any existing file.

    A rename is attempted first; when it fails (typically across devices)
    the content is copied and the source removed.

    Raises:
        WriteError: If neither the rename nor the copy succeeds
    """
    try:
        os.replace(src, dst)
        return
    except OSError as exc:
        _log.debug("Rename %s -> %s failed (%s); copying instead", src, dst, exc)

    try:
        shutil.copyfile(src, dst)
        shutil.copymode(src, dst)
        os.remove(src)
    except OSError as exc:
        raise WriteError(f"Could not write '{dst}': {exc}") from exc


def _ensure_parent_dir(output_path: str) -> None:
    parent = os.path.dirname(output_path)
    if not parent:
        return
    try:
        os.makedirs(parent, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(f"Could not create directory '{parent}': {exc}") from exc


def reconstruct(
    temp_dir: PathLike,
    destination_root: PathLike,
    *,
    sanitize_for: Optional[str] = None,
) -> ExtractionReport:
    """
    Move every valid asset of an unpacked archive into ``destination_root``.

    Args:
        temp_dir: Directory produced by :func:`unpack`
        destination_root: Absolute, canonical destination directory
        sanitize_for: ``posix`` or ``windows``; defaults to the host family

    Returns:
        ExtractionReport recording the outcome of each entry

    Raises:
        DirectoryCreateError: An output directory could not be created
        WriteError: An asset could not be moved into place
    """
    target = sanitize_for or default_sanitize_target()
    root = os.fspath(destination_root)
    report = ExtractionReport(destination=root)

    for entry_path in sorted(Path(temp_dir).iterdir()):
        entry_id = entry_path.name
        pathname_file = entry_path / PATHNAME_FILE
        asset_file = entry_path / ASSET_FILE

        if (
            not entry_path.is_dir()
            or not pathname_file.is_file()
            or not asset_file.is_file()
            or pathname_file.is_symlink()
            or asset_file.is_symlink()
        ):
            _log.debug("Ignoring '%s': not an asset entry", entry_id)
            report.add(EntryResult(entry_id, EntryStatus.SKIPPED_MALFORMED))
            continue

        declared = read_declared_pathname(pathname_file)
        if not declared:
            _log.debug("Ignoring '%s': empty pathname", entry_id)
            report.add(EntryResult(entry_id, EntryStatus.SKIPPED_MALFORMED, declared))
            continue

        pathname = sanitize_pathname(declared, target)
        output_path = join_output_path(root, pathname)

        if not is_safe_pathname(root, pathname):
            _log.warning(
                "WARNING: Skipping '%s' as '%s' is outside the destination path '%s'.",
                entry_id, output_path, root,
            )
            report.add(EntryResult(entry_id, EntryStatus.SKIPPED_UNSAFE, declared, output_path))
            continue

        _log.info("Extracting '%s' as '%s'", entry_id, pathname)
        _ensure_parent_dir(output_path)
        move_file(asset_file, output_path)
        report.add(EntryResult(entry_id, EntryStatus.EXTRACTED, declared, output_path))

    return report


__all__ = [
    "EntryStatus",
    "EntryResult",
    "ExtractionReport",
    "read_declared_pathname",
    "move_file",
    "reconstruct",
]
