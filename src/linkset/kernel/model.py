"""Pydantic models for linkset documents (application/linkset+json).

Models are only structural holders. Validation of the data-model rules is
explicit (see linkset.kernel.validate) so that a document may be mutated
into a temporarily invalid state between parse and serialize calls.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue


class Link(BaseModel):
    """A single typed link from a context resource to a target resource."""
    target: Optional[str] = Field(None, alias="href")  # Required by the validator, not by the model
    relation: Optional[str] = Field(None, alias="rel")  # Registered token or absolute-URI extension relation
    context: Optional[str] = Field(None, alias="anchor")  # Absent: the context is the document itself
    media_type: Optional[str] = Field(None, alias="type")
    language: Optional[str] = Field(None, alias="hreflang")
    title: Optional[str] = None
    length: Optional[int] = Field(None, ge=0)  # Byte length of the target resource
    extensions: Dict[str, JsonValue] = Field(default_factory=dict)  # Unrecognized wire keys, verbatim

    model_config = ConfigDict(populate_by_name=True, strict=True, extra="forbid")


class LinksetDocument(BaseModel):
    """An ordered collection of links plus unrecognized top-level members.

    ``links`` is None when the document has no ``linkset`` container at all,
    which the validator reports as an error. An empty list is a legal
    document.
    """
    links: Optional[List[Link]] = Field(default_factory=list, alias="linkset")
    extensions: Dict[str, JsonValue] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, strict=True, extra="forbid")

    def add_link(self, href: str, **attributes) -> Link:
        """Append a new link and return it.

        ``attributes`` accepts either the Python field names or the wire
        names (``rel``, ``type``, ...).
        """
        link = Link(href=href, **attributes)
        if self.links is None:
            self.links = []
        self.links.append(link)
        return link

    def links_by_relation(self, rel: str) -> List[Link]:
        from linkset.kernel.query import links_by_relation
        return links_by_relation(self, rel)

    def first_link_by_relation(self, rel: str) -> Optional[Link]:
        from linkset.kernel.query import first_link_by_relation
        return first_link_by_relation(self, rel)

    def links_by_media_type(self, media_type: str) -> List[Link]:
        from linkset.kernel.query import links_by_media_type
        return links_by_media_type(self, media_type)

    def all_relation_types(self) -> List[str]:
        from linkset.kernel.query import all_relation_types
        return all_relation_types(self)
