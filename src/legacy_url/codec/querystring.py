"""
Legacy query-string codec.

Keys and values are split on '&' and the first '=', '+' is read as a space
and both sides are percent-decoded. Repeated keys accumulate into a list,
single keys map to a plain string.
"""

from typing import Dict, Iterable, List, Mapping, Tuple, Union
from urllib.parse import parse_qsl, quote, urlencode

QueryMapping = Dict[str, Union[str, List[str]]]

# Characters left unescaped when encoding (encodeURIComponent set)
SAFE_CHARS = "!~*'()"


def decode(qs: str) -> QueryMapping:
    """
    Decode a query string into a mapping.

    Args:
        qs: Query string without the leading '?'

    Returns:
        Mapping in order of first key occurrence
    """
    result: QueryMapping = {}
    if not qs:
        return result

    for key, value in parse_qsl(qs, keep_blank_values=True, errors="replace"):
        if key not in result:
            result[key] = value
        elif isinstance(result[key], list):
            result[key].append(value)
        else:
            result[key] = [result[key], value]

    return result


def _pairs(query: Mapping[str, Union[str, Iterable[str]]]) -> List[Tuple[str, str]]:
    pairs = []
    for key, value in query.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, item) for item in value)
        else:
            pairs.append((key, "" if value is None else str(value)))
    return pairs


def encode(query: Mapping[str, Union[str, Iterable[str]]]) -> str:
    """Encode a mapping produced by ``decode`` back into a query string."""
    return urlencode(_pairs(query), safe=SAFE_CHARS, quote_via=quote)
