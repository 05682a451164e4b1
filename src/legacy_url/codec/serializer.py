"""
URL record serializer.

Reconstructs a URL string from the components of a ``Url`` record, following
the legacy ``url.format`` rules: host wins over hostname/port, '?' and '#'
inside the pathname are escaped, and '//' is only emitted when the record
says so or when a slashed protocol has a host.
"""

from typing import Any
from urllib.parse import quote

from .querystring import SAFE_CHARS, encode

SLASHED_PROTOCOLS = frozenset(
    ["http", "https", "ftp", "gopher", "file"]
    + ["http:", "https:", "ftp:", "gopher:", "file:"]
)


def _escape_auth(auth: str) -> str:
    # Only the first ':' survives unescaped
    escaped = quote(auth, safe=SAFE_CHARS)
    index = escaped.upper().find("%3A")
    if index != -1:
        escaped = escaped[:index] + ":" + escaped[index + 3 :]
    return escaped


def format_url(record: Any) -> str:
    """
    Serialize a URL record.

    Args:
        record: Any object with the ``Url`` attributes; None and '' both
            count as absent

    Returns:
        URL string
    """
    auth = record.auth or ""
    if auth:
        auth = _escape_auth(auth) + "@"

    protocol = record.protocol or ""
    pathname = record.pathname or ""
    hash_ = record.hash or ""

    host = None
    if record.host:
        host = auth + record.host
    elif record.hostname:
        hostname = record.hostname
        host = auth + (f"[{hostname}]" if ":" in hostname else hostname)
        if record.port:
            host += f":{record.port}"

    query = ""
    if record.query and isinstance(record.query, dict):
        query = encode(record.query)

    search = record.search or (query and f"?{query}") or ""

    if protocol and not protocol.endswith(":"):
        protocol += ":"

    pathname = pathname.replace("?", "%3F").replace("#", "%23")
    search = search.replace("#", "%23", 1)

    if record.slashes or (
        (not protocol or protocol in SLASHED_PROTOCOLS) and host is not None
    ):
        host = "//" + (host or "")
        if pathname and not pathname.startswith("/"):
            pathname = "/" + pathname
    elif not host:
        host = ""

    if hash_ and not hash_.startswith("#"):
        hash_ = "#" + hash_
    if search and not search.startswith("?"):
        search = "?" + search

    return protocol + host + pathname + search + hash_
