"""Parser/serializer configuration."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LinksetOptions(BaseModel):
    """Immutable JSON leniency and formatting flags.

    Frozen, so one instance can be shared read-only by concurrent callers.
    """
    lenient: bool = True  # Accept comments, trailing commas and other JSON5 input
    indent: Optional[int] = Field(2, ge=0)  # None: compact output
    ensure_ascii: bool = False
    encoding: str = "utf-8"  # For bytes input and binary output streams

    model_config = ConfigDict(frozen=True, extra="forbid")


DEFAULT_OPTIONS = LinksetOptions()
