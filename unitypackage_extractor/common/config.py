"""Configuration resolution for the UnityPackage extractor.

Settings come from the environment so tests and wrappers can override them:
    - `UPE_LOG_LEVEL`
    - `UPE_SANITIZE_FOR` (`posix` or `windows`)
    - `UPE_TMPDIR`
"""

import os
from typing import Mapping, Optional

from .constants import SANITIZE_TARGETS, default_sanitize_target


def normalize_sanitize_target(value: Optional[str]) -> str:
    """
    Validate a sanitization target name.

    Args:
        value: Target name, case-insensitive. Empty or None selects the host default.

    Returns:
        One of the names in ``SANITIZE_TARGETS``

    Raises:
        ValueError: If the name is not a known target
    """
    if not value:
        return default_sanitize_target()
    target = value.strip().lower()
    if target not in SANITIZE_TARGETS:
        raise ValueError(
            f"Unknown sanitize target {value!r}; expected one of: {', '.join(SANITIZE_TARGETS)}"
        )
    return target


class ExtractorSettings:
    """Resolve environment-backed configuration for the extractor."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._environ.get(key, default)

    def log_level(self) -> Optional[str]:
        return self.get("UPE_LOG_LEVEL")

    def sanitize_for(self) -> str:
        return normalize_sanitize_target(self.get("UPE_SANITIZE_FOR"))

    def temp_root(self) -> Optional[str]:
        return self.get("UPE_TMPDIR") or None
