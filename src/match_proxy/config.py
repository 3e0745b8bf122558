import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Riot API
    riot_api_key: str = os.getenv("RIOT_API_KEY", "")
    riot_api_base_url: str = os.getenv("RIOT_API_BASE_URL", "https://americas.api.riotgames.com")
    riot_request_timeout: float = float(os.getenv("RIOT_REQUEST_TIMEOUT", "10"))

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    redis_socket_timeout: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5"))

    # Match cache
    match_cache_prefix: str = os.getenv("MATCH_CACHE_PREFIX", "matches")
    match_cache_ttl: int = int(os.getenv("MATCH_CACHE_TTL", "0"))  # 0 = never expire

    # Retrieval
    default_match_count: int = int(os.getenv("DEFAULT_MATCH_COUNT", "20"))
    fanout_timeout: float = float(os.getenv("FANOUT_TIMEOUT", "30"))

    # Match history fixture
    match_fixture_path: str = os.getenv("MATCH_FIXTURE_PATH", "data/match.json")
    fixture_participant: str = os.getenv("FIXTURE_PARTICIPANT", "lolarmon1")

    # API
    static_dir: str = os.getenv("STATIC_DIR", "public")
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "3000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def has_api_key(self) -> bool:
        """Check whether a Riot API key is configured."""
        return bool(self.riot_api_key)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.riot_request_timeout <= 0:
            raise ValueError("RIOT_REQUEST_TIMEOUT must be positive")

        if self.fanout_timeout <= 0:
            raise ValueError("FANOUT_TIMEOUT must be positive")

        if self.match_cache_ttl < 0:
            raise ValueError("MATCH_CACHE_TTL must be zero (no expiry) or positive")

        if not 1 <= self.default_match_count <= 100:
            raise ValueError(
                f"DEFAULT_MATCH_COUNT must be between 1 and 100, got {self.default_match_count}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create an asyncio Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_timeout,
        decode_responses=True,
    )
