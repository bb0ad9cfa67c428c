"""Parser and serializer for application/linkset+json documents."""

import io
import logging
from typing import IO, Optional, Union

from linkset._internal.canonical_json import canonical_dumps
from linkset._internal.json_reader import load_json_text
from linkset.errors import InvalidArgumentError, LinksetParseError, LinksetValidationError
from linkset.kernel.model import LinksetDocument
from linkset.kernel.validate import validate_document
from linkset.kernel.wire import document_from_json, document_to_json
from linkset.options import DEFAULT_OPTIONS, LinksetOptions

logger = logging.getLogger(__name__)

MEDIA_TYPE = "application/linkset+json"


def _is_blank(text: Union[str, bytes]) -> bool:
    if isinstance(text, (bytes, bytearray)):
        return not bytes(text).strip()
    return not text.strip()


def _is_binary(stream: IO) -> bool:
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


class LinksetParser:
    """Parses and serializes linkset documents.

    Holds only an immutable LinksetOptions; every call builds its own
    document graph, so one instance can serve concurrent callers.
    """

    def __init__(self, options: Optional[LinksetOptions] = None):
        self._options = options if options is not None else DEFAULT_OPTIONS

    @property
    def options(self) -> LinksetOptions:
        return self._options

    def parse(self, text: Union[str, bytes]) -> LinksetDocument:
        """
        Parse linkset JSON text into a validated LinksetDocument.

        Args:
            text: JSON text or UTF-8 bytes

        Returns:
            The parsed document

        Raises:
            InvalidArgumentError: If text is None, empty or whitespace-only
            MalformedInputError: If text is not syntactically valid JSON
            NullResultError: If text is the JSON literal null
            LinksetParseError: If the structure or a data-model rule is violated
        """
        if text is None or not isinstance(text, (str, bytes, bytearray)) or _is_blank(text):
            raise InvalidArgumentError("json", "JSON string cannot be null or empty.")

        tree = load_json_text(text, lenient=self._options.lenient, encoding=self._options.encoding)
        document = document_from_json(tree)

        try:
            validate_document(document)
        except LinksetValidationError as e:
            raise LinksetParseError(e.message, validation_error=e) from e

        logger.debug(f"Parsed linkset document with {len(document.links)} link(s)")
        return document

    def parse_stream(self, stream: IO) -> LinksetDocument:
        """Parse a linkset document from a binary or text file-like object.

        The stream is read to the end, then parsed exactly like parse().
        """
        if stream is None:
            raise InvalidArgumentError("stream")
        return self.parse(stream.read())

    def serialize(self, document: LinksetDocument) -> str:
        """
        Serialize a document to linkset JSON text.

        Raises:
            InvalidArgumentError: If document is None
            LinksetValidationError: If the document violates a data-model rule
        """
        if document is None:
            raise InvalidArgumentError("document")

        validate_document(document)
        text = canonical_dumps(
            document_to_json(document),
            indent=self._options.indent,
            ensure_ascii=self._options.ensure_ascii,
        )
        logger.debug(f"Serialized linkset document with {len(document.links)} link(s)")
        return text

    def serialize_to_stream(self, document: LinksetDocument, stream: IO) -> None:
        """Serialize a document and write it to a binary or text stream.

        Binary streams (io.RawIOBase, io.BufferedIOBase or a "b" mode)
        receive encoded bytes; anything else receives str.

        The JSON is fully rendered before a single write, so nothing is
        written when validation fails.
        """
        if document is None:
            raise InvalidArgumentError("document")
        if stream is None:
            raise InvalidArgumentError("stream")

        text = self.serialize(document)
        if _is_binary(stream):
            stream.write(text.encode(self._options.encoding))
        else:
            stream.write(text)
