"""
Input preprocessing.

Rewrites the raw string into something the WHATWG parser accepts and
collects the metadata the legacy record needs but the parser normalizes
away: the explicit protocol, whether '//' followed it, and an explicit
default port.

Each step takes a ``Preprocessed`` state and returns a new one.
"""

import re
from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple

# Schemes whose authority is introduced by '//'
SLASHED_PROTOCOL_RE = re.compile(r"^(?:https?|ftp|gopher|file):?$", re.IGNORECASE)

SPLIT_RE = re.compile(r"^(.*?)([#?].*)")
PROTOCOL_RE = re.compile(r"^([a-z0-9.+-]*:)(/{0,3})(.*)", re.IGNORECASE)
SLASHES_RE = re.compile(r"^([a-z0-9.+-]*:)?//", re.IGNORECASE)
IPV6_RE = re.compile(r"^([a-z0-9.+-]*:)(/{0,2})\[(.*)\]$", re.IGNORECASE)
JAVASCRIPT_RE = re.compile(r"^javascript")
PORT_RE = re.compile(r"^https?://[^/]+(:[0-9]+)(?=/|$)")


def is_slashed_protocol(protocol: str) -> bool:
    """Check whether a scheme (with or without ':') is a slashed scheme."""
    return bool(SLASHED_PROTOCOL_RE.match(protocol))


@dataclass(frozen=True)
class Preprocessed:
    """
    Rewritten input plus side metadata.

    Attributes:
        source: String handed to the delegate parser
        prefix: Part before the first '#' or '?' (None if there was none)
        protocol_matched: A leading 'scheme:' was recognized
        explicit_protocol: Protocol carried outside the delegate parse
        has_slashes: '//' followed the scheme
        port_suffix: Literal ':PORT' of an http(s) authority
    """

    source: str
    prefix: Optional[str] = None
    protocol_matched: bool = False
    explicit_protocol: str = ""
    has_slashes: bool = False
    port_suffix: Optional[str] = None


def _normalize_backslashes(state: Preprocessed) -> Preprocessed:
    # Backslashes in the query or fragment are escaped later, not replaced
    match = SPLIT_RE.match(state.source)
    if not match:
        return replace(state, source=state.source.replace("\\", "/"))

    prefix = match.group(1).replace("\\", "/")
    return replace(state, source=prefix + match.group(2), prefix=prefix)


def _terminate_ipv6_authority(state: Preprocessed) -> Preprocessed:
    # A bare '[literal]' is only read as a host when a path follows
    if IPV6_RE.match(state.source) and not state.source.endswith("/"):
        return replace(state, source=state.source + "/")
    return state


def _detect_slashes(state: Preprocessed) -> Preprocessed:
    return replace(state, has_slashes=bool(SLASHES_RE.match(state.source)))


def _rewrite_protocol(state: Preprocessed) -> Preprocessed:
    if JAVASCRIPT_RE.match(state.source):
        return state
    match = PROTOCOL_RE.match(state.source)
    if not match:
        return state

    protocol, slashes, rest = match.groups()
    source = state.source
    explicit_protocol = state.explicit_protocol
    has_slashes = state.has_slashes

    if not is_slashed_protocol(protocol):
        explicit_protocol = protocol.lower()
        source = slashes + rest

    if not slashes:
        has_slashes = False
        if is_slashed_protocol(protocol):
            explicit_protocol = protocol
            source = rest
        else:
            source = "//" + rest

    # http:/path and http:///path both collapse to a rooted path
    if len(slashes) in (1, 3):
        explicit_protocol = protocol
        source = "/" + rest

    return replace(
        state,
        source=source,
        protocol_matched=True,
        explicit_protocol=explicit_protocol,
        has_slashes=has_slashes,
    )


def _capture_port_suffix(state: Preprocessed) -> Preprocessed:
    target = state.prefix if state.prefix is not None else state.source
    match = PORT_RE.match(target)
    if not match:
        return state
    return replace(state, port_suffix=match.group(1))


STEPS: Tuple[Callable[[Preprocessed], Preprocessed], ...] = (
    _normalize_backslashes,
    _terminate_ipv6_authority,
    _detect_slashes,
    _rewrite_protocol,
    _capture_port_suffix,
)


def preprocess(url: str) -> Preprocessed:
    """
    Run all preprocessing steps over a raw URL string.

    Args:
        url: Raw input (surrounding whitespace is trimmed)

    Returns:
        Final preprocessing state
    """
    state = Preprocessed(source=url.strip())
    for step in STEPS:
        state = step(state)
    return state
