#!/usr/bin/env python3
"""
Bindump CLI

Command-line interface for converting objdump listings to binary dumps.

Usage:
    objdump-to-bindump [-b] objdump_output_file
    python -m bindump listing.txt
    python -m bindump -b listing.txt            # binary column only

Options:
    -b                  Produce only the binary output
    -v, --verbose       Report progress on stderr
    -h, --help          Show the usage message and exit
"""

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from .core import BinDumper, ListingFileError
from .transcoder import MalformedHexError


BINARY_FLAG = "-b"


class UsageError(Exception):
    """Raised when the command line is malformed or incomplete."""
    pass


@dataclass
class Options:
    """Parsed command line."""
    input_file: Optional[str] = None
    full_output: bool = True
    verbose: bool = False
    show_help: bool = False


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports problems as UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="objdump-to-bindump",
        usage="%(prog)s [-b] objdump_output_file",
        description=(
            "Reads a file as produced by objdump and converts the hex\n"
            "representations of machine-language instructions into\n"
            "pure binary representations."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog=(
            "Note:\n"
            "  Use with the `-b` flag to strip everything except the binary\n"
            "  output. All other data from the original objdump_output_file\n"
            "  is ignored.\n"
        ),
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        metavar="objdump_output_file",
        help="Output of `objdump -d` (or similar) to convert",
    )
    parser.add_argument(
        BINARY_FLAG,
        dest="binary_only",
        action="store_true",
        help=(
            "Produce only the binary output (remove other\n"
            "information from the objdump output)"
        ),
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report progress and a summary on stderr",
    )
    parser.add_argument(
        "-h", "--help",
        dest="show_help",
        action="store_true",
        help="Show this message and exit",
    )
    return parser


def parse_args(argv: Sequence[str]) -> Options:
    """
    Turn the command line into Options.

    Args:
        argv: Arguments without the program name.

    Returns:
        Parsed options. A bare invocation asks for the usage message.

    Raises:
        UsageError: For unknown options, extra arguments, a missing file
            name, or ``-b`` anywhere but first.
    """
    argv = list(argv)
    if not argv:
        return Options(show_help=True)

    args = build_parser().parse_args(argv)
    if args.show_help:
        return Options(show_help=True)

    if args.input_file is None:
        raise UsageError("Missing objdump_output_file.")
    if args.binary_only and not argv[0].startswith(BINARY_FLAG):
        raise UsageError(f"Unknown option: {argv[0]}")

    return Options(
        input_file=args.input_file,
        full_output=not args.binary_only,
        verbose=args.verbose,
    )


def print_usage(message: str = "", out: Optional[TextIO] = None) -> None:
    """Print an optional message, then the usage text, to stdout."""
    if out is None:
        out = sys.stdout
    if message:
        out.write(message + "\n\n")
    out.write(build_parser().format_help() + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the converter and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_args(argv)
    except UsageError as e:
        print_usage(str(e))
        return 1

    if options.show_help:
        print_usage()
        return 0

    dumper = BinDumper(full_output=options.full_output, verbose=options.verbose)
    try:
        dumper.convert_file(options.input_file)
    except ListingFileError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"[ERROR] {options.input_file}: {e}", file=sys.stderr)
        return 1
    except MalformedHexError as e:
        print(f"[ERROR] {options.input_file}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
