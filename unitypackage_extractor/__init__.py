"""UnityPackage Extractor - unpack .unitypackage archives into a folder tree.

Provides:
* `extract_package` - full pipeline from archive to destination tree
* `unpack` / `reconstruct` - the two stages, usable on their own
* Thin CLI wrapper (`unitypackage-extractor`)

Every asset path is checked against the destination before anything is
written, so entries trying to escape it are skipped with a warning.
"""

from ._version import __version__
from .common.logging_config import configure_logging  # noqa: F401
from .core.extract import extract_package, resolve_destination  # noqa: F401
from .core.reconstructor import (  # noqa: F401
    EntryResult,
    EntryStatus,
    ExtractionReport,
    reconstruct,
)
from .core.unpacker import unpack  # noqa: F401

__all__ = [
    "__version__",
    "configure_logging",
    "extract_package",
    "resolve_destination",
    "unpack",
    "reconstruct",
    "EntryResult",
    "EntryStatus",
    "ExtractionReport",
]
