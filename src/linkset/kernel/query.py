"""Read-only queries over a populated linkset document.

String comparisons are case-insensitive, character by character (no "ß" to
"ss" style folding). Results preserve document order.
A document whose links container is missing is queried as if empty.
"""

from typing import Iterator, List, Optional

from linkset.errors import InvalidArgumentError
from linkset.kernel.model import Link, LinksetDocument


def _fold(value: str) -> str:
    return value.lower()


def _require_filter(name: str, value: Optional[str]) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(name)
    return _fold(value)


def _iter_links(document: LinksetDocument) -> Iterator[Link]:
    if document is None:
        raise InvalidArgumentError("document")
    return iter(document.links or [])


def links_by_relation(document: LinksetDocument, rel: str) -> List[Link]:
    """Return all links whose relation type matches ``rel``."""
    wanted = _require_filter("rel", rel)
    return [
        link for link in _iter_links(document)
        if link.relation is not None and _fold(link.relation) == wanted
    ]


def first_link_by_relation(document: LinksetDocument, rel: str) -> Optional[Link]:
    """Return the first link whose relation type matches ``rel``, or None."""
    wanted = _require_filter("rel", rel)
    for link in _iter_links(document):
        if link.relation is not None and _fold(link.relation) == wanted:
            return link
    return None


def links_by_media_type(document: LinksetDocument, media_type: str) -> List[Link]:
    """Return all links whose media type matches ``media_type``."""
    wanted = _require_filter("type", media_type)
    return [
        link for link in _iter_links(document)
        if link.media_type is not None and _fold(link.media_type) == wanted
    ]


def all_relation_types(document: LinksetDocument) -> List[str]:
    """Return the distinct relation types in first-occurrence order.

    Deduplication is case-insensitive; the first-seen spelling is kept.
    Links without a relation (or with a blank one) are skipped.
    """
    seen = set()
    relations: List[str] = []
    for link in _iter_links(document):
        if link.relation is None or not link.relation.strip():
            continue
        key = _fold(link.relation)
        if key in seen:
            continue
        seen.add(key)
        relations.append(link.relation)
    return relations
