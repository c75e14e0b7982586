# Test fixtures
from .sample_listings import (
    BLANK_GROUP,
    MOV_EAX_LINE,
    MOV_EAX_BINARY,
    SAMPLE_LISTING,
    SAMPLE_LISTING_LINES,
    SAMPLE_INSTRUCTION_COUNT,
    SAMPLE_BINARY_ONLY,
    SAMPLE_FULL_OUTPUT,
    MALFORMED_LISTING,
    binary_field,
)

__all__ = [
    "BLANK_GROUP",
    "MOV_EAX_LINE",
    "MOV_EAX_BINARY",
    "SAMPLE_LISTING",
    "SAMPLE_LISTING_LINES",
    "SAMPLE_INSTRUCTION_COUNT",
    "SAMPLE_BINARY_ONLY",
    "SAMPLE_FULL_OUTPUT",
    "MALFORMED_LISTING",
    "binary_field",
]
