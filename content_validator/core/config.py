"""
Configuration settings for the application.
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Key Authentication
    API_KEY: Optional[str] = None  # Bearer token clients must present
    REQUIRE_API_KEY: bool = True  # Set to False to disable API key authentication (not recommended for production)

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # Options: "text", "json"
    LOG_INCLUDE_REQUEST_ID: bool = True  # Include X-Request-ID in logs

    # HTTP Client Configuration
    HTTP_CLIENT_TIMEOUT: float = 30.0  # Default timeout for HTTP clients (seconds)
    HTTP_MAX_KEEPALIVE_CONNECTIONS: int = 10
    HTTP_MAX_CONNECTIONS: int = 20
    HTTP_RETRY_ATTEMPTS: int = 2  # One retry on transient failures
    HTTP_RETRY_BACKOFF_SECONDS: float = 1.0  # Base backoff for retries
    HTTP_RETRY_STATUSES: tuple[int, ...] = (429, 500, 502, 503, 504)

    # Performance Monitoring
    RESPONSE_TIME_WARNING_THRESHOLD_MS: int = 60000  # Imports validate every row, so allow a minute

    # Serper Search API Configuration
    SERPER_API_KEY: Optional[str] = None  # Missing key degrades every record to pending, never fails startup
    SEARCH_API_URL: str = "https://google.serper.dev/search"
    SEARCH_RESULT_COUNT: int = 5  # Top results used for keyword comparison
    SEARCH_TIMEOUT_SECONDS: float = 15.0  # Per-call timeout for a single search

    # Validation Settings
    QUERY_MAX_LENGTH: int = 100  # Search query is truncated to this many characters
    APPROVE_ABOVE_PERCENT: int = 60  # Confidence percentage strictly above this is approved
    REJECT_BELOW_PERCENT: int = 50  # Confidence percentage strictly below this is rejected
    VALIDATION_CONCURRENCY: int = 1  # 1 = strictly sequential, >1 = bounded worker pool

    # Input Guardrails
    MAX_UPLOAD_MB: int = 10  # Max CSV upload size

    @property
    def search_configured(self) -> bool:
        """Whether a search provider credential is available."""
        return bool(self.SERPER_API_KEY)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
