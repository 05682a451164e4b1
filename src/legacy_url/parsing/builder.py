"""
Result assembly.

Serializes ``href`` and maps empty components to None.
"""

from dataclasses import fields, replace

from legacy_url.codec.serializer import format_url
from legacy_url.record import Url

# Fields that keep '' for 'file:' URLs ("no authority" vs. "not parsed")
FILE_AUTHORITY_FIELDS = ("host", "hostname")


def build_href(record: Url, pre_slash: str = "") -> str:
    """Serialize a reconciled record, without the serializer for '//path' input."""
    if pre_slash:
        return f"{record.pathname}{record.search}{record.hash}"
    return format_url(record)


def default_absent(record: Url) -> Url:
    """Replace every '' field with None, honoring the 'file:' exception."""
    excluded = FILE_AUTHORITY_FIELDS if (record.href or "").startswith("file") else ()
    changes = {
        field.name: None
        for field in fields(record)
        if field.name not in excluded and getattr(record, field.name) == ""
    }
    return replace(record, **changes)


def build(record: Url, pre_slash: str = "") -> Url:
    """
    Finish a reconciled record.

    Args:
        record: Output of the postprocessor ('' for empty fields, no href)
        pre_slash: Restored leading slash of a protocol-relative path

    Returns:
        Final Url
    """
    record = replace(record, href=build_href(record, pre_slash))
    return default_absent(record)


def build_unparsed(explicit_protocol: str) -> Url:
    """Record for input the delegate parser rejected outright."""
    return Url(protocol=explicit_protocol, href=explicit_protocol)
