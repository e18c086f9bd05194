"""
go-mockgen-tool CLI entry point.

Usage:
    go-mockgen-tool --type Vehicle [-o vehicle_mock.go] [--dir PATH]
    go-mockgen-tool --help
    go-mockgen-tool --version
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from mockgen_cli.generate import generate_command
from mockgen_core import __version__
from mockgen_core.utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="go-mockgen-tool",
        description="Generate a function-field mock for a Go interface",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-t", "--type", dest="interface_name", required=True, help="name of the interface type"
    )
    parser.add_argument(
        "-o",
        "--out",
        dest="output_path",
        type=Path,
        default=None,
        help="file to write the generated type to (default: <typename>_mock.go)",
    )
    parser.add_argument(
        "--dir",
        dest="directory",
        type=Path,
        default=Path.cwd(),
        help="directory containing the Go sources (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="log level (default: MOCKGEN_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    configure_logging(level=args.log_level)

    success = generate_command(
        interface_name=args.interface_name,
        directory=args.directory,
        output_path=args.output_path,
    )
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
