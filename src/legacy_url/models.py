"""
Output models.

Pydantic model used to serialize parsed records to JSON.
"""

from pydantic import BaseModel, Field

from legacy_url.record import Query, Url


class UrlModel(BaseModel):
    """JSON view of a parsed URL record."""

    input: str = Field(..., description="Input string as given")
    protocol: str | None = Field(None, description="Scheme including ':'")
    slashes: bool | None = Field(None, description="'//' followed the scheme")
    auth: str | None = Field(None, description="Decoded user info")
    host: str | None = Field(None, description="hostname[:port]")
    port: str | None = Field(None, description="Port as text")
    hostname: str | None = Field(None, description="Bare host name")
    hash: str | None = Field(None, description="Fragment including '#'")
    search: str | None = Field(None, description="Query including '?'")
    query: Query | None = Field(None, description="Raw or decoded query")
    pathname: str | None = Field(None, description="Path")
    path: str | None = Field(None, description="pathname + search")
    href: str | None = Field(None, description="Serialized URL")

    @classmethod
    def from_record(cls, raw: str, record: Url) -> "UrlModel":
        """Build the model from a parsed record."""
        return cls(input=raw, **record.to_dict())
