"""Command line interface for whichbroke."""

import argparse
import sys

from . import __version__
from .bisect import BisectRunner
from .colors import Colors


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="whichbroke",
        description="Find the last commit/revision that still builds (git, hg or bzr)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find the last commit where 'make' succeeds
  whichbroke make

  # Build arguments are passed through unchanged
  whichbroke go test -v ./...

  # Search the repository containing another directory
  whichbroke -C ~/src/project python -m pytest -x

Exit Codes:
  0 - Last passing commit found
  1 - Unexpected error
  2 - Invalid arguments
  3 - No repository found
  4 - Commit log could not be read
  5 - Checkout (or running the build) failed
  6 - No failing commit in the history
  7 - No passing commit before the first failing one
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--directory", "-C",
        metavar="DIR",
        help="Start the repository search here (default: current directory)"
    )
    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Show the repository and history size without building anything"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    parser.add_argument(
        "build_cmd",
        metavar="buildCommand",
        help="Command that builds/tests the working tree; exit 0 means pass"
    )
    parser.add_argument(
        "build_args",
        metavar="buildArg",
        nargs=argparse.REMAINDER,
        help="Arguments for the build command"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (default: sys.argv[1:]).

    Returns:
        Exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    Colors.init(enabled=not args.no_color)

    runner = BisectRunner(
        build_cmd=args.build_cmd,
        build_args=args.build_args,
        start_dir=args.directory,
        dry_run=args.dry_run,
        verbose=args.verbose,
    )

    return runner.run()


if __name__ == "__main__":
    sys.exit(main())
