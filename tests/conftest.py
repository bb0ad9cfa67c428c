"""Pytest configuration and shared fixtures.

No sys.path hacks - tests import from the installed linkset package.
"""

from pathlib import Path

import pytest

from linkset import Link, LinksetDocument, LinksetParser

HERE = Path(__file__).resolve().parent
FIXTURES = HERE.parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def parser() -> LinksetParser:
    return LinksetParser()


@pytest.fixture
def sample_document() -> LinksetDocument:
    """Three links with mixed-case relations and media types."""
    return LinksetDocument(
        links=[
            Link(href="https://example.com/1", rel="describedby", type="text/html", title="First"),
            Link(href="https://example.com/2", rel="DESCRIBEDBY", type="application/pdf"),
            Link(href="https://example.com/3", rel="related", type="TEXT/HTML"),
            Link(href="https://example.com/4"),
        ]
    )
