"""
Constants and exit codes for the UnityPackage extractor.
"""

import os


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    ERROR = 1


# Names of the files inside each archive entry directory
PATHNAME_FILE = 'pathname'
ASSET_FILE = 'asset'

# Sanitization targets
SANITIZE_POSIX = 'posix'
SANITIZE_WINDOWS = 'windows'
SANITIZE_TARGETS = (SANITIZE_POSIX, SANITIZE_WINDOWS)

# > : " | ? * are forbidden characters in Windows filenames
WINDOWS_FORBIDDEN_CHARS = '>:"|?*'
WINDOWS_REPLACEMENT_CHAR = '_'

TEMP_DIR_PREFIX = 'unitypackage-'


def default_sanitize_target() -> str:
    """Return the sanitization target matching the host platform family."""
    return SANITIZE_WINDOWS if os.name == 'nt' else SANITIZE_POSIX
