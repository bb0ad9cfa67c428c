"""Tests for the URI reference checks."""

import pytest

from linkset.kernel.uri import (
    is_absolute_uri,
    is_parseable_reference,
    is_well_formed_absolute,
    looks_like_absolute,
)


@pytest.mark.parametrize("value", [
    "https://example.com",
    "http://example.com/path?q=1#frag",
    "urn:isbn:0451450523",
    "mailto:someone@example.com",
    "tag:example.com,2024:thing",
])
def test_absolute(value):
    assert is_absolute_uri(value)


@pytest.mark.parametrize("value", [
    "/relative/path",
    "../up/one",
    "page.html#section",
    "?q=1",
    "//example.com/network-path",
    "not a valid uri ://",
    "1http://example.com",
])
def test_not_absolute(value):
    assert not is_absolute_uri(value)


@pytest.mark.parametrize("value", [
    "https://example.com",
    "https://user@example.com:8080/path",
    "https://[::1]:8080/x",
    "/relative/path",
    "mailto:someone@example.com",
])
def test_parseable(value):
    assert is_parseable_reference(value)


@pytest.mark.parametrize("value", [
    "http://[::1",  # unbalanced IPv6 bracket
    "https://example.com:99999/",  # port out of range
    "https://example.com:abc/",  # non-numeric port
    "https://",  # http(s) without host
    "http:/path-only",
])
def test_not_parseable(value):
    assert not is_parseable_reference(value)


@pytest.mark.parametrize("value", [
    "https://example.com/a%20b",
    "https://example.org/resource/description",
    "https://www.rfc-editor.org/rfc/rfc9110.html#name-retry-after",
    "https://[::1]:8080/x",
    "https://example.com/café",
    "urn:isbn:0451450523",
    "https://example.com/?a=1&b=(2)",
])
def test_well_formed(value):
    assert is_well_formed_absolute(value)


@pytest.mark.parametrize("value", [
    "https://example.com/a b",  # space
    "https://example.com/%zz",  # bad escape
    "https://example.com/100%",  # truncated escape
    "https://exa^mple.com/",  # illegal character
    "https://example.com/a#b#c",  # second fragment delimiter
    "https://example.com/path[1]",  # brackets outside host
    "https://example.com/\"quoted\"",
])
def test_malformed(value):
    assert not is_well_formed_absolute(value)


def test_scheme_separator_heuristic():
    assert looks_like_absolute("not a valid uri ://")
    assert not looks_like_absolute("/relative/path")
