from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "terrakube-python"
DEFAULT_TIMEOUT = 30.0


class ClientSettings(BaseSettings):
    """Client settings loaded from environment variables with TERRAKUBE_ prefix."""

    # Connection
    endpoint: str = ""
    token: str = ""
    # Transport
    insecure_tls: bool = False
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    model_config = SettingsConfigDict(env_prefix="TERRAKUBE_", env_file=".env")


@lru_cache
def get_settings() -> ClientSettings:
    """Return cached client settings instance."""
    return ClientSettings()
