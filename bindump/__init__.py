"""
Bindump - objdump listing to binary dump converter

Rewrites the hex machine-code column of ``objdump -d`` output as 8-bit
binary groups, either inline with the original listing or on its own.
"""

from .transcoder import MalformedHexError, hex_field_to_binary, transcode_line
from .core import BinDumper, DumpStats, ListingFileError

__version__ = "1.0.0"

__all__ = [
    "BinDumper",
    "DumpStats",
    "ListingFileError",
    "MalformedHexError",
    "hex_field_to_binary",
    "transcode_line",
]
