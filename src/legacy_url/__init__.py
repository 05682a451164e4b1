"""
legacy-url: legacy Node.js url.parse semantics on top of a WHATWG parser.
"""

from legacy_url.codec import format_url
from legacy_url.parsing import parse
from legacy_url.record import Url

__all__ = [
    "Url",
    "format_url",
    "parse",
]
