import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str | None = None):
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # YouVersion platform API
    youversion_api_key: str | None = _env("YOUVERSION_API_KEY")
    youversion_api_url: str = _env("YOUVERSION_API_URL", "https://api.youversion.com/v1")
    # 111 = NIV (licensed), 206 = World English Bible (public domain)
    bible_id: str = _env("YOUVERSION_BIBLE_ID", "111")
    share_base_url: str = _env("VOTD_SHARE_BASE_URL", "https://www.bible.com/bible")

    # Cache
    cache_ttl: int = field(default_factory=lambda: int(os.getenv("VOTD_CACHE_TTL", "3600")))
    http_timeout: float = field(
        default_factory=lambda: float(os.getenv("VOTD_HTTP_TIMEOUT", "10.0"))
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    log_format: str = field(default_factory=lambda: os.getenv("LOG_FORMAT", "json").lower())

    # API
    api_host: str = _env("API_HOST", "0.0.0.0")
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))
    api_reload: bool = field(
        default_factory=lambda: os.getenv("API_RELOAD", "false").lower() == "true"
    )
    cors_allow_origins: str = _env("CORS_ALLOW_ORIGINS", "*")

    @property
    def cache_ttl_ms(self) -> int:
        """Cache freshness window in milliseconds."""
        return self.cache_ttl * 1000

    @property
    def cache_control(self) -> str:
        """Shared-cache header value sent with every successful response.

        Browsers always revalidate (``max-age=0``); intermediary caches keep
        the response for the same window as the in-process cache.
        """
        return f"public, max-age=0, s-maxage={self.cache_ttl}"

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl <= 0:
            raise ValueError("VOTD_CACHE_TTL must be a positive number of seconds")

        if self.http_timeout <= 0:
            raise ValueError("VOTD_HTTP_TIMEOUT must be a positive number of seconds")

        if self.log_level not in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            raise ValueError(
                f"LOG_LEVEL must be one of [DEBUG, INFO, WARNING, ERROR], got {self.log_level}"
            )

        if self.log_format not in ["json", "text"]:
            raise ValueError(f"LOG_FORMAT must be 'json' or 'text', got {self.log_format}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
