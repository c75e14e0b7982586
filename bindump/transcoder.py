"""
Line transcoder for objdump listings.

Rewrites the hex byte column of an ``objdump -d`` instruction line into
8-bit binary groups. Everything here is pure string work; reading files and
writing output is left to the driver in ``core``.
"""

import string
from dataclasses import dataclass
from typing import Optional


# Listing geometry: up to 7 two-digit tokens, each followed by one space,
# in a 21-character column.
TOKEN_SLOTS = 7
DIGITS_PER_TOKEN = 2
SLOT_WIDTH = DIGITS_PER_TOKEN + 1
BITS_PER_DIGIT = 4
BINARY_FIELD_WIDTH = TOKEN_SLOTS * (DIGITS_PER_TOKEN * BITS_PER_DIGIT + 1)

BLANK_NIBBLE = " " * BITS_PER_DIGIT

HEX_DIGITS = frozenset(string.hexdigits)


class MalformedHexError(ValueError):
    """Raised when a hex byte position holds something other than a hex digit or blank."""

    def __init__(self, character: str, column: int, line_number: Optional[int] = None):
        self.character = character
        self.column = column
        self.line_number = line_number
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f"line {self.line_number}, " if self.line_number is not None else ""
        return f"Invalid hex digit {self.character!r} at {where}column {self.column} of the hex field"

    def at_line(self, line_number: int) -> "MalformedHexError":
        """Return a copy of this error tagged with the listing line it came from."""
        return MalformedHexError(self.character, self.column, line_number)


@dataclass(frozen=True)
class ListingParts:
    """An instruction line split around its hex byte field."""
    header: str  # address/label, colon and tab
    hex_field: str  # up to and including the terminating tab (or last char)
    trailer: str  # from the terminating tab (or last char) to end of line


def nibble_to_binary(digit: str, column: int = 0) -> str:
    """
    Convert one hex digit into its 4-bit binary string, MSB first.

    Args:
        digit: A single character in ``0-9``, ``a-f`` or ``A-F``.
        column: Position of the digit in its hex field, for error reports.

    Returns:
        Four characters of ``0``/``1``.

    Raises:
        MalformedHexError: If ``digit`` is not a hex digit.
    """
    if digit not in HEX_DIGITS:
        raise MalformedHexError(digit, column)
    return format(int(digit, 16), f"0{BITS_PER_DIGIT}b")


def hex_field_to_binary(field: str) -> str:
    """
    Transcode a hex byte field into seven space-terminated binary groups.

    The field is read as 7 slots of two digit positions plus one separator.
    A digit position past the end of the field, or holding whitespace,
    becomes four blanks so that missing bytes stay distinguishable from
    ``0000``.

    Args:
        field: The hex field of an instruction line.

    Returns:
        A string of exactly ``BINARY_FIELD_WIDTH`` characters.

    Raises:
        MalformedHexError: If a digit position holds a non-hex character.
    """
    groups = []
    for slot in range(TOKEN_SLOTS):
        start = slot * SLOT_WIDTH
        nibbles = []
        for column in range(start, start + DIGITS_PER_TOKEN):
            char = field[column] if column < len(field) else " "
            if char.isspace():
                nibbles.append(BLANK_NIBBLE)
                continue
            nibbles.append(nibble_to_binary(char, column))
        groups.append("".join(nibbles) + " ")
    return "".join(groups)


def split_instruction_line(line: str) -> Optional[ListingParts]:
    """
    Split an instruction line into header, hex field and trailer.

    Returns None for plain lines: those whose first tab is missing or is not
    directly preceded by a colon.
    """
    tab = line.find("\t")
    if tab < 1 or line[tab - 1] != ":":
        return None

    header_end = tab + 1
    field_end = line.find("\t", header_end)
    if field_end == -1:
        # Continuation line: the rest of the line is hex bytes.
        field_end = len(line) - 1

    return ListingParts(
        header=line[:header_end],
        hex_field=line[header_end:field_end + 1],
        trailer=line[field_end:],
    )


def is_instruction_line(line: str) -> bool:
    return split_instruction_line(line) is not None


def transcode_line(line: str, full_output: bool = True) -> Optional[str]:
    """
    Produce the output text for one listing line.

    Args:
        line: One line of the listing, without its line terminator.
        full_output: Keep the address header and mnemonic when True; emit the
            binary field alone when False.

    Returns:
        The text to emit (without a newline), or None if the line is dropped.
    """
    return render_line(line, split_instruction_line(line), full_output)


def render_line(line: str, parts: Optional[ListingParts], full_output: bool = True) -> Optional[str]:
    """Build the output text for a line already split by split_instruction_line."""
    if parts is None:
        return line if full_output else None

    binary = hex_field_to_binary(parts.hex_field)
    if not full_output:
        return binary
    return parts.header + binary + parts.trailer
