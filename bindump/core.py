"""
Bindump Core Engine

Streams an objdump listing through the line transcoder and writes the
result to an output stream, one line in, at most one line out.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO

from .transcoder import MalformedHexError, render_line, split_instruction_line


class ListingFileError(OSError):
    """Raised when a listing file cannot be opened for input."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Failed to open {path} for input"
        if reason:
            message += f": {reason}"
        super().__init__(message)


@dataclass
class DumpStats:
    """Counters collected while converting one listing."""
    lines_read: int = 0
    instruction_lines: int = 0
    lines_written: int = 0

    def summary(self) -> str:
        return (
            f"Done: {self.lines_read} lines read, "
            f"{self.instruction_lines} instruction lines, "
            f"{self.lines_written} lines written"
        )


class BinDumper:
    """
    Main conversion engine.

    Holds the output mode and feeds listing lines to the transcoder. No
    state is carried from one line to the next apart from the counters in
    ``stats``.
    """

    def __init__(self, full_output: bool = True, verbose: bool = False):
        """
        Initialize the dumper.

        Args:
            full_output: Keep headers, mnemonics and plain lines. When False
                only the binary field of each instruction line is written.
            verbose: Report progress and a summary on stderr.
        """
        self.full_output = full_output
        self.verbose = verbose
        self.stats = DumpStats()

    @property
    def mode(self) -> str:
        return "full" if self.full_output else "binary-only"

    def convert_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Transcode listing lines lazily.

        Args:
            lines: Listing lines, with or without a trailing newline.

        Yields:
            Each line to emit, without its newline.

        Raises:
            MalformedHexError: Tagged with the 1-based line number.
        """
        for line_number, line in enumerate(lines, start=1):
            if line.endswith("\n"):
                line = line[:-1]
            self.stats.lines_read += 1

            parts = split_instruction_line(line)
            try:
                emitted = render_line(line, parts, full_output=self.full_output)
            except MalformedHexError as e:
                raise e.at_line(line_number) from None

            if parts is not None:
                self.stats.instruction_lines += 1
            if emitted is not None:
                self.stats.lines_written += 1
                yield emitted

    def convert_file(self, path: Path | str, out: Optional[TextIO] = None) -> DumpStats:
        """
        Convert a listing file and write the result.

        Args:
            path: Path to the ``objdump -d`` output.
            out: Stream to write to (default: stdout).

        Returns:
            The counters for this run.

        Raises:
            ListingFileError: If the file cannot be opened.
            MalformedHexError: If a hex byte position is not a hex digit.
        """
        if out is None:
            out = sys.stdout
        self.stats = DumpStats()

        try:
            listing = open(path, "r", encoding="utf-8", errors="replace")
        except OSError as e:
            raise ListingFileError(str(path), e.strerror or str(e)) from e

        if self.verbose:
            print(f"[LISTING] Converting: {path} ({self.mode})", file=sys.stderr)

        with listing:
            for emitted in self.convert_lines(listing):
                out.write(emitted + "\n")

        if self.verbose:
            print(self.stats.summary(), file=sys.stderr)

        return self.stats
