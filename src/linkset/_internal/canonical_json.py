"""Centralized JSON emission for linkset documents.

Output is deterministic for identical input: key order is the order the
caller built (recognized fields first, then extensions), never sorted, and
the text carries no comments, trailing commas or non-finite numbers.
"""

import json
from typing import Any, Optional


def canonical_dumps(obj: Any, indent: Optional[int] = 2, ensure_ascii: bool = False) -> str:
    """
    Serialize a JSON value tree to text.

    Rules:
    - Key order preserved as given
    - Stable separators (no trailing whitespace on any line)
    - NaN/Infinity rejected (ValueError)

    Args:
        obj: JSON value tree (dict/list/str/int/float/bool/None)
        indent: Spaces per nesting level, or None for compact output
        ensure_ascii: Escape non-ASCII characters

    Returns:
        JSON text
    """
    separators = (",", ": ") if indent is not None else (",", ":")
    return json.dumps(
        obj,
        indent=indent,
        separators=separators,
        ensure_ascii=ensure_ascii,
        allow_nan=False,
    )
