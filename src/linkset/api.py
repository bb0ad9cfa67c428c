"""Public API for the linkset package.

Module-level functions delegate to a default LinksetParser; construct a
LinksetParser with custom LinksetOptions for other leniency/formatting.
"""

import os
import tempfile
from pathlib import Path
from typing import IO, Union

from linkset.contracts import ValidationIssue, ValidationResult
from linkset.errors import InvalidArgumentError, LinksetValidationError
from linkset.kernel.model import LinksetDocument
from linkset.kernel.validate import validate_document
from linkset.parser import LinksetParser

_default_parser = LinksetParser()


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def parse(text: Union[str, bytes]) -> LinksetDocument:
    """Parse linkset JSON text or bytes (see LinksetParser.parse)."""
    return _default_parser.parse(text)


def parse_stream(stream: IO) -> LinksetDocument:
    """Parse a linkset document from a file-like object."""
    return _default_parser.parse_stream(stream)


def serialize(document: LinksetDocument) -> str:
    """Serialize a validated document to linkset JSON text."""
    return _default_parser.serialize(document)


def serialize_to_stream(document: LinksetDocument, stream: IO) -> None:
    """Serialize a validated document into a file-like object."""
    _default_parser.serialize_to_stream(document, stream)


def load(path: Union[str, os.PathLike, Path], parser: LinksetParser = None) -> LinksetDocument:
    """Load and parse a linkset JSON file."""
    if path is None:
        raise InvalidArgumentError("path")
    parser = parser or _default_parser
    with open(_normalize_path(path), "rb") as f:
        return parser.parse_stream(f)


def dump(document: LinksetDocument, path: Union[str, os.PathLike, Path], parser: LinksetParser = None) -> Path:
    """
    Serialize a document to a file, replacing it atomically.

    The JSON is written to a temporary sibling file which then replaces
    ``path``, so a failure never leaves a truncated document behind.

    Returns:
        The written path
    """
    if path is None:
        raise InvalidArgumentError("path")
    parser = parser or _default_parser
    target = _normalize_path(path)

    # Render (and validate) before touching the filesystem
    text = parser.serialize(document)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=parser.options.encoding, newline="\n") as f:
            f.write(text)
            f.write("\n")
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return target


def validate(document: LinksetDocument) -> ValidationResult:
    """
    Check a document against the data-model rules without raising.

    Returns:
        ValidationResult with ok=True, or ok=False and the first violation
    """
    if document is None:
        raise InvalidArgumentError("document")
    try:
        validate_document(document)
    except LinksetValidationError as e:
        issue = ValidationIssue(code=e.code.value, message=e.message, index=e.index, value=e.value)
        return ValidationResult(ok=False, errors=[issue])
    return ValidationResult(ok=True, errors=[])
