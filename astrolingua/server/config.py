# astrolingua/server/config.py
"""Server configuration with sensible defaults for local play."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings, overridable via environment variables."""

    # SSE
    SSE_MAX_CLIENTS: int = 16
    SSE_KEEPALIVE_S: float = 15.0

    # Game loop
    TICK_HZ: float = 60.0
    AUTO_TICK: bool = True
    SEED: int | None = None
    VOCAB_PATH: Path | None = None

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8090

    model_config = SettingsConfigDict(env_prefix="ASTRO_", env_file=".env", extra="ignore")


settings = Settings()
