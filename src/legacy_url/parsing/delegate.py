"""
Delegate parsing with the WHATWG URL parser.

The preprocessed string is first parsed as an absolute URL. If that fails it
is resolved against a fixed placeholder base; the placeholder's host is the
sentinel the postprocessor strips again.
"""

import enum
import logging
import re
from dataclasses import dataclass
from typing import Optional

from ada_url import URL

from .preprocessor import Preprocessed

logger = logging.getLogger(__name__)

# Placeholder base for relative input, and the host it contributes
BASE_URL = "http://w.w"
HOST = "w.w"

AUTHORITY_LIKE_RE = re.compile(r"^//.+[@.]")


class AttemptStatus(enum.Enum):
    """Outcome of the delegate parse."""

    DIRECT = "direct"
    FALLBACK = "fallback"
    FAILED = "failed"


@dataclass(frozen=True)
class ParseAttempt:
    """
    Result of the two-step delegate parse.

    Attributes:
        status: Which step produced ``url`` (FAILED if neither did)
        url: Parsed WHATWG URL, None when FAILED
        source: String that was finally handed to the parser
        pre_slash: '/' when a protocol-relative input lost its leading
            slash for the fallback parse and must get it back
    """

    status: AttemptStatus
    url: Optional[URL]
    source: str
    pre_slash: str = ""

    @property
    def failed_direct(self) -> bool:
        """Whether the absolute parse failed."""
        return self.status is not AttemptStatus.DIRECT


def _try_parse(source: str, base: Optional[str] = None) -> Optional[URL]:
    try:
        if base is None:
            return URL(source)
        return URL(source, base)
    except ValueError:
        return None


def attempt_parse(
    state: Preprocessed, slashes_denote_host: bool = False
) -> ParseAttempt:
    """
    Parse a preprocessed string, falling back to the placeholder base.

    Args:
        state: Preprocessing result
        slashes_denote_host: Read a leading '//' as an authority even when
            what follows does not look like a host

    Returns:
        ParseAttempt tagged with the step that succeeded
    """
    source = state.source

    url = _try_parse(source)
    if url is not None:
        return ParseAttempt(AttemptStatus.DIRECT, url, source)

    pre_slash = ""
    if (
        not state.explicit_protocol
        and not slashes_denote_host
        and source.startswith("//")
        and not AUTHORITY_LIKE_RE.match(source)
    ):
        # Parse '//path' as a path, restore the slash afterwards
        pre_slash = "/"
        source = source[1:]

    url = _try_parse(source, BASE_URL)
    if url is None:
        logger.debug("Unable to parse %r, even against %s", state.source, BASE_URL)
        return ParseAttempt(AttemptStatus.FAILED, None, source, pre_slash)

    logger.debug("Parsed %r relative to %s", source, BASE_URL)
    return ParseAttempt(AttemptStatus.FALLBACK, url, source, pre_slash)
