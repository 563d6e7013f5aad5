import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def _env_bool(name: str, default: bool) -> bool:
    v = (os.environ.get(name) or "").strip().lower()
    if not v:
        return default
    if v in ("true", "1", "yes", "on"):
        return True
    if v in ("false", "0", "no", "off"):
        return False
    return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables with safe defaults."""

    app_name: str = "WAISPATH Priority Engine"
    env: str = "dev"
    database_url: str = "sqlite+aiosqlite:///./waispath.db"
    log_level: str = "INFO"
    audit_enabled: bool = True
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            env=os.getenv("ENV", cls.env),
            database_url=os.getenv("DATABASE_URL") or cls.database_url,
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            audit_enabled=_env_bool("AUDIT_ENABLED", cls.audit_enabled),
            cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()
