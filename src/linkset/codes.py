"""Error code constants for linkset parse/validate/serialize failures.

These constants prevent stringly-typed error codes and ensure
client code matches on the correct failure kind.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes carried by every LinksetError."""

    # Caller contract
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # Parse errors
    MALFORMED_INPUT = "MALFORMED_INPUT"
    NULL_RESULT = "NULL_RESULT"
    INVALID_STRUCTURE = "INVALID_STRUCTURE"

    # Validation errors (data-model rules)
    MISSING_LINKS = "MISSING_LINKS"
    MISSING_TARGET = "MISSING_TARGET"
    INVALID_TARGET = "INVALID_TARGET"
    MALFORMED_TARGET = "MALFORMED_TARGET"
