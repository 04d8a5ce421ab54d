# mediaprobe/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MAX_REDIRECT_ATTEMPTS = 10


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False


class FFProbeConfig(BaseModel):
    bin: str = "ffprobe"
    # None means "wait for ffprobe forever"
    timeout_sec: Optional[float] = Field(30, gt=0)
    show_chapters: bool = False


class HTTPConfig(BaseModel):
    # Budget of redirect hops followed while verifying a remote resource.
    max_redirect_attempts: int = Field(DEFAULT_MAX_REDIRECT_ATTEMPTS, ge=0)
    timeout_sec: float = Field(30.0, gt=0)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "mediaprobe"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    ffprobe: FFProbeConfig = FFProbeConfig()
    http: HTTPConfig = HTTPConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Prefer passing a Settings instance
    explicitly into the probe adapter; this is the fallback when none is given:
        from mediaprobe.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
