"""
Shared configuration management for argcache.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    """Settings for the Redis-backed cache facade."""

    model_config = SettingsConfigDict(
        env_prefix="ARGCACHE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Backing store
    redis_url: str = Field(default="redis://localhost:6379/0")
    key_prefix: str = Field(default="argcache", min_length=1)
    socket_timeout: float = Field(default=5.0, gt=0)
    socket_connect_timeout: float = Field(default=5.0, gt=0)
    health_check_interval: int = Field(default=30, ge=0)


def get_config(**overrides) -> CacheSettings:
    """Load settings from the environment, applying explicit overrides."""
    return CacheSettings(**overrides)
