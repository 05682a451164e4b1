"""
Reconciliation of the WHATWG parse with the legacy field semantics.

Undoes parser conveniences (dropped default ports, placeholder host,
about:blank) and restores legacy quirks (lone '?' and '#', escaped
backslashes, path escape normalization).
"""

import re
from typing import Any
from urllib.parse import unquote_to_bytes

from legacy_url.codec import querystring
from legacy_url.record import Url

from .delegate import HOST, ParseAttempt
from .preprocessor import Preprocessed, is_slashed_protocol

FORCE_ESCAPE_RE = re.compile(r"['^|`]")
ESCAPE_RUN_RE = re.compile(r"((?:%[0-9A-F]{2})+)")


def _escape_char(char: str) -> str:
    # Code point in uppercase hex, not zero-padded
    return f"%{ord(char):X}"


def _is_safe_char(char: str) -> bool:
    return ord(char) > 256 or (char.isascii() and char.isalnum())


def decode_uri_component(value: str) -> str:
    """
    Percent-decode a URL component as UTF-8.

    Raises:
        UnicodeDecodeError: If the escapes do not form valid UTF-8
    """
    return unquote_to_bytes(value).decode("utf-8")


def _normalize_escape_run(match: "re.Match[str]") -> str:
    run = match.group(1)
    try:
        decoded = decode_uri_component(run)
    except UnicodeDecodeError:
        return run
    return "".join(
        char if _is_safe_char(char) else _escape_char(char) for char in decoded
    )


def decode_path(pathname: str) -> str:
    """
    Normalize percent-escapes in a path.

    Forces ', ^, | and ` into escaped form, then decodes every run of
    escapes and re-escapes whatever is not ASCII alphanumeric or above
    U+0100. Runs that are not valid UTF-8 are left alone.

    Args:
        pathname: Path as returned by the WHATWG parser

    Returns:
        Normalized path
    """
    pathname = FORCE_ESCAPE_RE.sub(lambda m: _escape_char(m.group(0)), pathname)
    return ESCAPE_RUN_RE.sub(_normalize_escape_run, pathname)


def _decode_auth_part(value: str) -> str:
    try:
        return decode_uri_component(value)
    except UnicodeDecodeError:
        return value


def _unless_sentinel(value: str) -> str:
    return "" if value == HOST else value


def reconcile(
    attempt: ParseAttempt, state: Preprocessed, decode_query: bool = False
) -> Url:
    """
    Build the raw record fields from a successful delegate parse.

    Empty components are returned as '' here; mapping them to None is left
    to the builder. ``href`` is not computed yet.

    Args:
        attempt: Delegate parse result (must not be FAILED)
        state: Preprocessing result
        decode_query: Decode the query into a mapping

    Returns:
        Url with all fields but href populated
    """
    url: Any = attempt.url
    source = attempt.source
    explicit_protocol = state.explicit_protocol

    host = _unless_sentinel(url.host)
    hostname = _unless_sentinel(url.hostname).replace("[", "").replace("]", "")
    protocol = (explicit_protocol or None) if attempt.failed_direct else url.protocol

    search = url.search.replace("\\", "%5C")
    hash_ = url.hash.replace("\\", "%5C")

    # Lone '?' or '#' are dropped by the parser
    hash_split = source.split("#")
    if not search and "?" in hash_split[0]:
        search = "?"
    if not hash_ and len(hash_split) > 1 and hash_split[1] == "":
        hash_ = "#"

    if decode_query:
        query = querystring.decode(url.search[1:])
    else:
        query = search[1:]

    pathname = attempt.pre_slash + (
        decode_path(url.pathname) if state.protocol_matched else url.pathname
    )

    # '#abc' can come back as about:blank#abc
    if protocol == "about:" and pathname == "blank":
        protocol = ""
        pathname = ""

    # Drop the '/' contributed by joining a bare 'host/path' onto the base
    if attempt.failed_direct and not source.startswith("/"):
        pathname = pathname[1:]

    # Opaque schemes get a root path from the '//' disguise
    if (
        explicit_protocol
        and not is_slashed_protocol(explicit_protocol)
        and not source.endswith("/")
        and pathname == "/"
    ):
        pathname = ""

    credentials = (_decode_auth_part(url.username), _decode_auth_part(url.password))
    auth = ":".join(part for part in credentials if part)

    port = url.port
    if state.port_suffix and not host.endswith(state.port_suffix):
        host += state.port_suffix
        port = state.port_suffix[1:]

    return Url(
        protocol=protocol,
        slashes=state.has_slashes and not attempt.pre_slash,
        auth=auth,
        host=host,
        port=port,
        hostname=hostname,
        hash=hash_,
        search=search,
        query=query,
        pathname=pathname,
        path=pathname + search,
    )
