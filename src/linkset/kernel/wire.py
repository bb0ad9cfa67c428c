"""Mapping between generic JSON value trees and the linkset models.

Field names are matched case-insensitively on input (``LINKSET``,
``Href`` ...); unrecognized keys are captured verbatim as extension data.
Output always uses the lowercase wire names, omits absent fields, and
emits extension data as sibling keys after the recognized fields.
"""

import logging
from typing import Any, Dict, List, Tuple

from pydantic import ValidationError

from linkset.codes import ErrorCode
from linkset.errors import LinksetParseError, NullResultError
from linkset.kernel.model import Link, LinksetDocument

logger = logging.getLogger(__name__)

# wire name -> model field name, in emission order
LINK_FIELDS: Dict[str, str] = {
    "href": "target",
    "rel": "relation",
    "anchor": "context",
    "type": "media_type",
    "hreflang": "language",
    "title": "title",
    "length": "length",
}
DOCUMENT_FIELDS: Dict[str, str] = {
    "linkset": "links",
}

_WIRE_NAMES = {field: wire for wire, field in LINK_FIELDS.items()}


def _structure_error(message: str) -> LinksetParseError:
    return LinksetParseError(message, code=ErrorCode.INVALID_STRUCTURE)


def _split_fields(obj: Dict[str, Any], recognized: Dict[str, str]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Split an object into recognized fields (by model name) and extensions.

    Keys differing only in case collapse onto one field; the last wins.
    """
    known: Dict[str, Any] = {}
    extra: Dict[str, Any] = {}
    for key, value in obj.items():
        field = recognized.get(key.lower())
        if field is None:
            extra[key] = value
        else:
            known[field] = value
    return known, extra


def _describe(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        loc = item.get("loc") or ("?",)
        name = _WIRE_NAMES.get(loc[0], loc[0])
        problems.append(f"'{name}': {item.get('msg')}")
    return "; ".join(problems)


def link_from_json(obj: Any, index: int) -> Link:
    """Build a Link from the JSON object at ``linkset[index]``."""
    if obj is None:
        raise _structure_error(f"Link at index {index} is null.")
    if not isinstance(obj, dict):
        raise _structure_error(
            f"Link at index {index} must be a JSON object, got {type(obj).__name__}."
        )

    known, extra = _split_fields(obj, LINK_FIELDS)
    try:
        return Link(**known, extensions=extra)
    except ValidationError as e:
        raise _structure_error(f"Link at index {index} has an invalid structure: {_describe(e)}") from e


def document_from_json(obj: Any) -> LinksetDocument:
    """
    Build a LinksetDocument from a generic JSON value tree.

    No data-model rules are checked here; a missing ``linkset`` member
    yields ``links=None`` for the validator to report.

    Raises:
        NullResultError: If the value is JSON null
        LinksetParseError: If the value has the wrong shape
    """
    if obj is None:
        raise NullResultError()
    if not isinstance(obj, dict):
        raise _structure_error(
            f"Linkset document must be a JSON object, got {type(obj).__name__}."
        )

    known, extra = _split_fields(obj, DOCUMENT_FIELDS)
    raw_links = known.get("links")
    links = None
    if raw_links is not None:
        if not isinstance(raw_links, list):
            raise _structure_error(
                f"The 'linkset' member must be a JSON array, got {type(raw_links).__name__}."
            )
        links = [link_from_json(item, index) for index, item in enumerate(raw_links)]

    try:
        return LinksetDocument(links=links, extensions=extra)
    except ValidationError as e:
        raise _structure_error(f"Linkset document has an invalid structure: {_describe(e)}") from e


def _merge_extensions(data: Dict[str, Any], extensions: Dict[str, Any], recognized: Dict[str, str]) -> None:
    for key, value in extensions.items():
        if key.lower() in recognized:
            logger.warning(f"Skipping extension key {key!r}: collides with a recognized field")
            continue
        data[key] = value


def link_to_json(link: Link) -> Dict[str, Any]:
    """Render a Link as a JSON object, omitting absent fields."""
    data = link.model_dump(by_alias=True, exclude_none=True, exclude={"extensions"})
    _merge_extensions(data, link.extensions, LINK_FIELDS)
    return data


def document_to_json(document: LinksetDocument) -> Dict[str, Any]:
    """Render a LinksetDocument as a JSON object.

    The ``linkset`` member is always present; callers validate first.
    """
    links: List[Dict[str, Any]] = [link_to_json(link) for link in document.links or []]
    data: Dict[str, Any] = {"linkset": links}
    _merge_extensions(data, document.extensions, DOCUMENT_FIELDS)
    return data
