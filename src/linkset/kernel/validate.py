"""Data-model rules for linkset documents.

Rules are checked in order and the first failure wins:

1. The document has a ``linkset`` container (an empty one is fine).
2. For each link, in index order:
   a. ``href`` is present and not blank -> MissingTargetError
   b. ``href`` splits as a URI reference -> InvalidTargetError
   c. an absolute ``href`` is well-formed -> MalformedTargetError
   d. a relative ``href`` does not contain ``://`` -> InvalidTargetError

Rules 2b to 2d classify the ``href`` with surrounding whitespace trimmed,
but 2c checks the untrimmed value, so ``" https://example.com"`` is an
absolute URI that fails as malformed. A relative reference may carry
surrounding whitespace.

Rule 2d is a heuristic: a garbled absolute-looking string is not silently
accepted as a relative reference. It can over-reject a legal relative
reference that carries ``://`` inside a path segment.
"""

from linkset.errors import (
    InvalidArgumentError,
    InvalidTargetError,
    MalformedTargetError,
    MissingLinksError,
    MissingTargetError,
)
from linkset.kernel.model import Link, LinksetDocument
from linkset.kernel.uri import (
    is_absolute_uri,
    is_parseable_reference,
    is_well_formed_absolute,
    looks_like_absolute,
)


def validate_link(link: Link, index: int) -> None:
    """Validate a single link at position ``index``.

    Raises:
        MissingTargetError, InvalidTargetError, MalformedTargetError
    """
    target = link.target if link is not None else None
    stripped = target.strip() if target is not None else ""
    if not stripped:
        raise MissingTargetError(index)

    if not is_parseable_reference(stripped):
        raise InvalidTargetError(index, target)

    if is_absolute_uri(stripped):
        if not is_well_formed_absolute(target):
            raise MalformedTargetError(index, target)
    elif looks_like_absolute(stripped):
        raise InvalidTargetError(index, target)


def validate_document(document: LinksetDocument) -> None:
    """Validate a populated document, raising on the first rule violation.

    Pure: the document is never modified, so repeated calls on an
    unmutated document give the same outcome.

    Raises:
        InvalidArgumentError: If document is None
        LinksetValidationError: On the first violated rule
    """
    if document is None:
        raise InvalidArgumentError("document")

    if document.links is None:
        raise MissingLinksError()

    for index, link in enumerate(document.links):
        validate_link(link, index)
