"""URI reference checks used by the linkset validator.

Rules follow RFC 3986 syntax, with non-ASCII characters accepted in the
IRI sense (RFC 3987) as long as they are not whitespace. Relative
references are not resolved against any base.
"""

import re
from urllib.parse import SplitResult, urlsplit

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_IP_LITERAL_RE = re.compile(r"^\[(?:[0-9A-Fa-f:.]+|[vV][0-9A-Fa-f]+\.[A-Za-z0-9\-._~!$&'()*+,;=:]+)\]$")

_UNRESERVED = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~")
_GEN_DELIMS = frozenset(":/?#[]@")
_SUB_DELIMS = frozenset("!$&'()*+,;=")
_URI_CHARS = _UNRESERVED | _GEN_DELIMS | _SUB_DELIMS | {"%"}
_REG_NAME_CHARS = _UNRESERVED | _SUB_DELIMS | {"%"}

# Schemes whose URIs are meaningless without a host
HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def _is_uri_char(char: str, allowed: frozenset) -> bool:
    if char in allowed:
        return True
    return ord(char) > 0x7F and not char.isspace()


def is_absolute_uri(value: str) -> bool:
    """True when ``value`` starts with a scheme (``scheme:``)."""
    return bool(_SCHEME_RE.match(value))


def looks_like_absolute(value: str) -> bool:
    """True when ``value`` contains the scheme separator ``://``."""
    return "://" in value


def _split(value: str) -> SplitResult:
    parts = urlsplit(value)
    # Accessing port validates it (numeric, 0..65535)
    parts.port
    return parts


def is_parseable_reference(value: str) -> bool:
    """True when ``value`` can be split into URI reference components."""
    try:
        parts = _split(value)
    except ValueError:
        return False
    if is_absolute_uri(value) and parts.scheme.lower() in HOST_REQUIRED_SCHEMES:
        return bool(parts.hostname)
    return True


def _host_of(netloc: str) -> str:
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[: host.find("]") + 1] if "]" in host else host
    return host.partition(":")[0]


def is_well_formed_absolute(value: str) -> bool:
    """True when an absolute URI uses only legal characters and escapes.

    Checks character repertoire, percent-encoding and the authority's host.
    Assumes ``is_parseable_reference(value)`` already holds.
    """
    if not all(_is_uri_char(char, _URI_CHARS) for char in value):
        return False
    if _BAD_ESCAPE_RE.search(value):
        return False

    parts = _split(value)
    # '[' and ']' are only legal around an IP-literal host; '#' only once
    for component in (parts.path, parts.query, parts.fragment):
        if "[" in component or "]" in component:
            return False
    if "#" in parts.fragment:
        return False

    if parts.netloc:
        host = _host_of(parts.netloc)
        if host.startswith("["):
            return bool(_IP_LITERAL_RE.match(host))
        return all(_is_uri_char(char, _REG_NAME_CHARS) for char in host)
    return True
