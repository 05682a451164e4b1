"""
Legacy URL record.

Fixed-shape result of ``parse``, mirroring the field set of the legacy
Node.js ``url.parse`` object.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Union

from legacy_url.codec.serializer import format_url

QueryValue = Union[str, List[str]]
Query = Union[str, Dict[str, QueryValue]]


@dataclass(frozen=True)
class Url:
    """
    Decomposed URL.

    Attributes:
        protocol: Scheme including the trailing ':' (e.g. 'http:')
        slashes: Whether '//' followed the scheme
        auth: Decoded 'user:pass' (or just 'user')
        host: 'hostname[:port]', IPv6 literals kept in brackets
        port: Port as text
        hostname: Bare host, IPv6 brackets stripped
        hash: Fragment including the leading '#'
        search: Query including the leading '?'
        query: Raw query text, or a decoded mapping
        pathname: Path component
        path: pathname + search
        href: Serialized URL

    Absent components are None. For 'file:' URLs host and hostname are
    the empty string when there is no authority.
    """

    protocol: Optional[str] = None
    slashes: Optional[bool] = None
    auth: Optional[str] = None
    host: Optional[str] = None
    port: Optional[str] = None
    hostname: Optional[str] = None
    hash: Optional[str] = None
    search: Optional[str] = None
    query: Optional[Query] = None
    pathname: Optional[str] = None
    path: Optional[str] = None
    href: Optional[str] = None

    def format(self) -> str:
        """Serialize the record back into a URL string."""
        return format_url(self)

    def to_dict(self) -> Dict[str, Any]:
        """Get the record as a plain dictionary."""
        return asdict(self)
