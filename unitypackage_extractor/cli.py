"""
Command Line Interface for the UnityPackage extractor.

Usage: unitypackage-extractor <file.unitypackage> [output_path]
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from ._version import __version__
from .cli_helpers import describe_exception, exit_with_error
from .common.config import ExtractorSettings
from .common.constants import SANITIZE_TARGETS, ExitCodes
from .common.errors import ExtractorError
from .common.logging_config import configure_logging, get_logger
from .core.extract import extract_package

_DESCRIPTION = "UnityPackage Extractor\n---------------------------------------"

_EPILOG = (
    "The output path defaults to the current directory. Set UPE_SANITIZE_FOR\n"
    "to 'windows' or 'posix' to choose the filename sanitization, and\n"
    "UPE_LOG_LEVEL to adjust verbosity."
)


class ExtractorArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting usage errors with the tool's own exit code."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        exit_with_error(message, ExitCodes.ERROR)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = ExtractorArgumentParser(
        prog='unitypackage-extractor',
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('package', nargs='?', metavar='file.unitypackage',
                        help='Path to the file you want to extract.')
    parser.add_argument('output_path', nargs='?',
                        help='(Optional) Folder where to extract files. Defaults to the current directory.')
    parser.add_argument('--sanitize-for', choices=SANITIZE_TARGETS, default=None,
                        help='Replace characters that are illegal on this platform family '
                             '(defaults to the host platform).')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    settings = ExtractorSettings()
    configure_logging(settings.log_level(), stream=sys.stdout)
    logger = get_logger(__name__)
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    parsed_args = parser.parse_args(args)

    if not parsed_args.package:
        parser.print_help()
        print()
        exit_with_error("You must specify at least the .unitypackage file.", ExitCodes.ERROR)

    package_path = Path(parsed_args.package)
    if not package_path.exists():
        exit_with_error(f"The file '{package_path}' does not exist.", ExitCodes.ERROR)

    try:
        sanitize_for = parsed_args.sanitize_for or settings.sanitize_for()
    except ValueError as exc:
        exit_with_error(str(exc), ExitCodes.ERROR)
    logger.debug("Sanitizing pathnames for %s", sanitize_for)

    start_time = time.perf_counter()
    try:
        extract_package(
            package_path,
            parsed_args.output_path,
            sanitize_for=sanitize_for,
            temp_root=settings.temp_root(),
        )
    except (ExtractorError, OSError) as exc:
        exit_with_error(describe_exception(exc), ExitCodes.ERROR)
    duration = time.perf_counter() - start_time

    print(f"--- Finished in {duration:.4f} seconds ---")


if __name__ == '__main__':
    main()
