"""Exception taxonomy for linkset documents.

All caller-facing errors derive from LinksetError, which is a ValueError,
so callers that do not care about the taxonomy can keep catching ValueError.
"""

from typing import Optional

from linkset.codes import ErrorCode


class LinksetError(ValueError):
    """Base class for every linkset failure."""

    code: ErrorCode = ErrorCode.INVALID_STRUCTURE

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class InvalidArgumentError(LinksetError):
    """Raised when a required input is None, empty or whitespace-only.

    Detected before any parsing or validation work begins.
    """

    code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, name: str, message: Optional[str] = None):
        super().__init__(message or f"Argument '{name}' cannot be null or empty.")
        self.name = name


class LinksetValidationError(LinksetError):
    """A populated document violates a data-model rule."""

    def __init__(self, message: str, index: Optional[int] = None, value: Optional[str] = None):
        super().__init__(message)
        self.index = index
        self.value = value


class MissingLinksError(LinksetValidationError):
    code = ErrorCode.MISSING_LINKS

    def __init__(self):
        super().__init__("Linkset document must contain a 'linkset' array.")


class MissingTargetError(LinksetValidationError):
    code = ErrorCode.MISSING_TARGET

    def __init__(self, index: int):
        super().__init__(
            f"Link at index {index} is missing required 'href' property.",
            index=index,
        )


class InvalidTargetError(LinksetValidationError):
    code = ErrorCode.INVALID_TARGET

    def __init__(self, index: int, value: str):
        super().__init__(
            f"Link at index {index} has an invalid 'href' value: {value}",
            index=index,
            value=value,
        )


class MalformedTargetError(LinksetValidationError):
    code = ErrorCode.MALFORMED_TARGET

    def __init__(self, index: int, value: str):
        super().__init__(
            f"Link at index {index} has a malformed 'href' value: {value}",
            index=index,
            value=value,
        )


class LinksetParseError(LinksetError):
    """Raised by the parser; the underlying cause is chained.

    When the cause is a data-model violation it is also exposed as
    ``validation_error``.
    """

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        validation_error: Optional[LinksetValidationError] = None,
    ):
        if validation_error is not None and code is None:
            code = validation_error.code
        super().__init__(message, code)
        self.validation_error = validation_error


class MalformedInputError(LinksetParseError):
    """The raw input is not syntactically valid JSON."""

    code = ErrorCode.MALFORMED_INPUT

    def __init__(self, detail: str):
        super().__init__(f"Invalid JSON format: {detail}")
        self.detail = detail


class NullResultError(LinksetParseError):
    """Valid JSON that deserializes to no document at all (e.g. ``null``)."""

    code = ErrorCode.NULL_RESULT

    def __init__(self):
        super().__init__("Failed to deserialize linkset document: result was null.")
