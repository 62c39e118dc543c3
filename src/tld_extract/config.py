"""
Configuration management for tld_extract.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PSL_URL = "https://publicsuffix.org/list/public_suffix_list.dat"


class PSLConfig(BaseSettings):
    """Configuration for locating and caching the Public Suffix List."""

    source_url: str = Field(
        default=DEFAULT_PSL_URL, description="URL of the Public Suffix List"
    )
    local_path: Optional[Path] = Field(
        default=None,
        description="Local PSL file (.dat or .dat.zst); takes precedence over the cache",
    )
    cache_dir: Path = Field(
        default=Path("./data/psl"), description="Directory for fetched PSL snapshots"
    )
    fetch_timeout: float = Field(
        default=10.0, description="Timeout in seconds for fetching the PSL"
    )
    allow_fetch: bool = Field(
        default=True,
        description="Fetch the PSL when neither a local file nor a snapshot exists",
    )
    allow_bundled: bool = Field(
        default=True,
        description="Fall back to the PSL snapshot shipped with the package",
    )
    compression_level: int = Field(
        default=6, description="Compression level for snapshots (1-22 for zstd)"
    )

    model_config = SettingsConfigDict(env_prefix="PSL_")


class APIConfig(BaseSettings):
    """Configuration for the HTTP API."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")

    model_config = SettingsConfigDict(env_prefix="API_")


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    psl: PSLConfig = Field(default_factory=PSLConfig)
    api: APIConfig = Field(default_factory=APIConfig)

    # Global settings
    log_level: str = Field(default="INFO", description="Logging level")

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
