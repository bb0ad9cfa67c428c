"""linkset: parse, validate, serialize and query application/linkset+json documents."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("linkset")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from linkset.api import parse, parse_stream, serialize, serialize_to_stream, load, dump, validate
from linkset.codes import ErrorCode
from linkset.contracts import ValidationIssue, ValidationResult
from linkset.errors import (
    LinksetError,
    InvalidArgumentError,
    LinksetValidationError,
    MissingLinksError,
    MissingTargetError,
    InvalidTargetError,
    MalformedTargetError,
    LinksetParseError,
    MalformedInputError,
    NullResultError,
)
from linkset.kernel.model import Link, LinksetDocument
from linkset.options import LinksetOptions
from linkset.parser import LinksetParser, MEDIA_TYPE

__all__ = [
    "__version__",
    "MEDIA_TYPE",
    "parse",
    "parse_stream",
    "serialize",
    "serialize_to_stream",
    "load",
    "dump",
    "validate",
    "Link",
    "LinksetDocument",
    "LinksetOptions",
    "LinksetParser",
    "ErrorCode",
    "ValidationIssue",
    "ValidationResult",
    "LinksetError",
    "InvalidArgumentError",
    "LinksetValidationError",
    "MissingLinksError",
    "MissingTargetError",
    "InvalidTargetError",
    "MalformedTargetError",
    "LinksetParseError",
    "MalformedInputError",
    "NullResultError",
]
