"""
Configuration management for the legacy-url command-line tools.

The parser itself is a pure function and never reads configuration; these
settings only supply defaults to the CLI.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParseConfig(BaseSettings):
    """Default options passed to ``parse``."""

    decode_query: bool = Field(
        default=False, description="Decode the query string into a mapping"
    )
    slashes_denote_host: bool = Field(
        default=False,
        description="Treat a leading '//' as an authority rather than a path",
    )

    model_config = SettingsConfigDict(env_prefix="PARSE_")


class OutputConfig(BaseSettings):
    """Configuration for JSON output of parsed records."""

    indent: int = Field(default=2, description="JSON indentation (0 for compact)")
    exclude_none: bool = Field(
        default=False, description="Omit absent fields from the output"
    )

    model_config = SettingsConfigDict(env_prefix="OUTPUT_")


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    parse: ParseConfig = Field(default_factory=ParseConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    # Global settings
    log_level: str = Field(default="WARNING", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__"
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
