"""Pure path helpers used for entry sanitization and containment checks.

Nothing in here touches the filesystem: the checks are purely lexical so
they behave identically whether or not the target already exists.
"""

from __future__ import annotations

import os
import re

from unitypackage_extractor.common.constants import (
    SANITIZE_WINDOWS,
    WINDOWS_FORBIDDEN_CHARS,
    WINDOWS_REPLACEMENT_CHAR,
)

_WINDOWS_BAD_CHARS = re.compile("[" + re.escape(WINDOWS_FORBIDDEN_CHARS) + "]")


def sanitize_pathname(pathname: str, target: str) -> str:
    """Replace characters the target filesystem cannot store."""
    if target == SANITIZE_WINDOWS:
        return _WINDOWS_BAD_CHARS.sub(WINDOWS_REPLACEMENT_CHAR, pathname)
    return pathname


def join_output_path(root: str | os.PathLike, pathname: str) -> str:
    """Literal output location: ``root`` joined with ``pathname``, not normalized."""
    return os.path.join(os.fspath(root), pathname)


def normalized_output_path(root: str | os.PathLike, pathname: str) -> str:
    """Lexically normalized form of :func:`join_output_path`."""
    return os.path.normpath(join_output_path(root, pathname))


def is_within(root: str | os.PathLike, candidate: str | os.PathLike) -> bool:
    """Return True if ``candidate`` is ``root`` or lies below it.

    Both paths are compared after lexical normalization only.
    """
    root_norm = os.path.normcase(os.path.normpath(os.fspath(root)))
    cand_norm = os.path.normcase(os.path.normpath(os.fspath(candidate)))
    if cand_norm == root_norm:
        return True
    prefix = root_norm if root_norm.endswith(os.sep) else root_norm + os.sep
    return cand_norm.startswith(prefix)


def is_safe_pathname(root: str | os.PathLike, pathname: str) -> bool:
    """Check that ``pathname`` resolved against ``root`` cannot escape it."""
    return is_within(root, normalized_output_path(root, pathname))


__all__ = [
    "sanitize_pathname",
    "join_output_path",
    "normalized_output_path",
    "is_within",
    "is_safe_pathname",
]
