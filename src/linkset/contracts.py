"""Public result models for the non-raising validation preflight."""

from typing import List, Optional

from pydantic import BaseModel


class ValidationIssue(BaseModel):
    """A single data-model rule violation."""
    code: str  # ErrorCode value, e.g. "MISSING_TARGET", "INVALID_TARGET"
    message: str
    index: Optional[int] = None  # Link index, None for document-level issues
    value: Optional[str] = None  # Offending raw href, where applicable


class ValidationResult(BaseModel):
    """Result of validate(); validation is fail-fast, so at most one error."""
    ok: bool
    errors: List[ValidationIssue]
