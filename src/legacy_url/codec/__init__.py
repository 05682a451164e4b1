"""
Codecs used around the parser.

Legacy query-string decoding/encoding and record serialization.
"""

from .querystring import decode, encode
from .serializer import format_url

__all__ = [
    "decode",
    "encode",
    "format_url",
]
