from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    # CORS allowed origins for the HTTP surface
    allowed_origins: List[str] = ["*"]

    # CoinGecko upstream
    coingecko_base_url: str = "https://api.coingecko.com/api/v3"
    coingecko_api_key: str | None = None

    # Outbound requester: seconds per attempt, total attempts, seconds between attempts
    request_timeout: float = 3.0
    retries: int = 3
    retry_delay: float = 1.0
    # Upper bound on a server-supplied Retry-After, in seconds
    max_retry_after: float = 30.0

    log_level: str = "INFO"

    # Load .env file automatically if present
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )

# Create a single settings instance
settings = Settings()
