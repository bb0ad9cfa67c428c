"""JSON text loading with optional JSON5 leniency.

Lenient mode accepts comments, trailing commas and the rest of JSON5 via
the json5 library. Strict mode is plain RFC 8259 JSON via the json module.
Either way a syntax error surfaces as MalformedInputError.
"""

import json
from typing import Any, Union

import json5

from linkset.errors import MalformedInputError

# Deepest array/object nesting accepted on input, the whole document included
MAX_DEPTH = 32


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not allowed")


def nesting_depth(text: str, limit: int = MAX_DEPTH) -> int:
    """Return the array/object nesting depth of JSON(5) text.

    Brackets inside strings and comments are ignored. Scanning stops as
    soon as ``limit`` is exceeded, returning ``limit + 1``.
    """
    depth = deepest = 0
    quote = None
    i, n = 0, len(text)
    while i < n:
        char = text[i]
        if quote is not None:
            if char == "\\":
                i += 1
            elif char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == "/" and text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end < 0 else end
        elif char == "/" and text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = n if end < 0 else end + 1
        elif char in "[{":
            depth += 1
            if depth > deepest:
                deepest = depth
                if deepest > limit:
                    return deepest
        elif char in "]}":
            depth -= 1
        i += 1
    return deepest


def decode_bytes(data: bytes, encoding: str = "utf-8") -> str:
    """Decode raw input bytes, tolerating a UTF-8 byte order mark."""
    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        encoding = "utf-8-sig"
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"input is not valid {encoding} text ({e})") from e


def load_json_text(text: Union[str, bytes], lenient: bool = True, encoding: str = "utf-8") -> Any:
    """
    Parse JSON text into a generic value tree.

    Args:
        text: JSON text (bytes are decoded first)
        lenient: Accept JSON5 extensions (comments, trailing commas)
        encoding: Encoding for bytes input

    Returns:
        dict/list/str/int/float/bool/None

    Raises:
        MalformedInputError: If the text is not syntactically valid or
            nests deeper than MAX_DEPTH
    """
    if isinstance(text, (bytes, bytearray)):
        text = decode_bytes(bytes(text), encoding)
    elif text.startswith("\ufeff"):
        text = text[1:]

    if nesting_depth(text) > MAX_DEPTH:
        raise MalformedInputError(f"nesting exceeds the maximum depth of {MAX_DEPTH}")

    try:
        if lenient:
            return json5.loads(text, parse_constant=_reject_constant)
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise MalformedInputError(str(e)) from e
