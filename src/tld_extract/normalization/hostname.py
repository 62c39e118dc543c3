"""
Hostname extraction and canonicalization.

Pulls a bare host token out of a URL-like or plain string:
- Strip the scheme (``https://``, or a scheme-relative ``//``)
- Keep the authority part, drop path, query and fragment
- Drop credentials and port
- Lowercase and NFC-normalize

This is a best-effort extractor, not a validator. Anything that does not
yield a host-like token returns None instead of raising.
"""

import re
import unicodedata
from typing import Optional, Protocol, Union, runtime_checkable
from urllib.parse import ParseResult, SplitResult, unquote, urlsplit

from pydantic import AnyUrl
from pydantic_core import Url

# Optional scheme ("https:", "svn+ssh:") followed by "//"
SCHEME_RE = re.compile(r"^(?:[^\W\d_][\w+.-]*:)?//")

# Optional leading label, then a final label with at least one alphanumeric,
# not ending in a bare colon ("localhost:" is not a host)
HOST_RE = re.compile(
    r"^(?:[^\W_](?:[^\W_]|-){1,61}\.?)?"
    r"(?:[^\W\d_]|-)*[^\W_]+"
    r"(?!.*:$).*$"
)

_WHITESPACE_RE = re.compile(r"\s")
_PORT_RE = re.compile(r":\d*$")


@runtime_checkable
class SupportsHostname(Protocol):
    """
    Anything that can report the hostname it refers to.

    Either a ``hostname()`` method or a ``hostname`` attribute holding the
    host string, as on ``starlette.datastructures.URL``.
    """

    def hostname(self) -> Optional[str]: ...


URLValue = Union[SplitResult, ParseResult, AnyUrl, Url]
Parseable = Union[str, URLValue, SupportsHostname]


def normalize_host(value: str) -> Optional[str]:
    """
    Extract the canonical hostname from a URL-like string.

    Args:
        value: URL, scheme-relative URL, ``host/path`` or bare hostname

    Returns:
        Lowercase, NFC-normalized hostname, or None if no host-like token
        can be extracted

    Examples:
        >>> normalize_host("https://www.Example.com/path?x=1")
        'www.example.com'
        >>> normalize_host("not a url at all") is None
        True
    """
    if not value:
        return None

    value = value.strip()

    if SCHEME_RE.match(value):
        candidate = _first_segment(SCHEME_RE.sub("", value, count=1))
    elif HOST_RE.match(value):
        candidate = _first_segment(value)
        if candidate.endswith(":"):
            # Malformed scheme separator ("http:/example.com"), not a host
            return None
    else:
        try:
            candidate = urlsplit(value).hostname
        except ValueError:
            return None

    if not candidate:
        return None
    return _reduce_authority(candidate)


def hostname_of(value: Parseable) -> Optional[str]:
    """
    Extract the canonical hostname from any supported input.

    Strings go through ``normalize_host`` directly. URL values are
    percent-decoded on their full string form first. Any other object
    implementing ``SupportsHostname`` is asked for its hostname, by calling
    ``hostname`` if it is a method or reading it otherwise.

    Raises:
        TypeError: For unsupported input types
    """
    if isinstance(value, str):
        return normalize_host(value)
    if isinstance(value, (SplitResult, ParseResult)):
        return normalize_host(unquote(value.geturl()))
    if isinstance(value, (AnyUrl, Url)):
        return normalize_host(unquote(str(value)))
    if isinstance(value, SupportsHostname):
        host = value.hostname
        if callable(host):
            host = host()
        return normalize_host(host) if host else None
    raise TypeError(f"Cannot extract a hostname from {type(value).__name__}")


def _first_segment(value: str) -> str:
    """First ``/``-delimited segment."""
    return value.split("/", 1)[0]


def _reduce_authority(authority: str) -> Optional[str]:
    """
    Reduce an authority-ish token to the bare host.

    ``user:pw@Example.com:8080?q`` -> ``example.com``
    """
    host = re.split(r"[?#]", authority, maxsplit=1)[0]
    host = host.rpartition("@")[2]

    if host.startswith("["):
        # IPv6 literal
        host = host[1:].partition("]")[0]
    else:
        host = _PORT_RE.sub("", host)
        host = host.rstrip(".")

    if not host or _WHITESPACE_RE.search(host):
        return None

    return unicodedata.normalize("NFC", host.lower())
