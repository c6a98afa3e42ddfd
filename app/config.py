"""
Career Match API Configuration
==============================
Environment-driven settings shared by the API server, stores and identity client.

Environment Variables:
- DATABASE_URL: Postgres DSN holding the UserPreferences and CareerFields tables
- SUPABASE_URL: Base URL of the auth service (e.g. https://<project>.supabase.co)
- SUPABASE_ANON_KEY: Public API key sent as the `apikey` header
- IDENTITY_TIMEOUT_SECONDS: Timeout for identity lookups (default 10)
- DB_POOL_MIN_SIZE / DB_POOL_MAX_SIZE: asyncpg pool bounds (default 1 / 5)
- CORS_ALLOW_ORIGINS: Comma-separated origins (default "*")
- LOG_LEVEL: Root log level (default INFO)
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""
    database_url: Optional[str] = None
    supabase_url: str = ""
    supabase_anon_key: str = ""
    identity_timeout_seconds: float = 10.0
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def database_configured(self) -> bool:
        return bool(self.database_url)

    @property
    def identity_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)


def load_settings() -> Settings:
    """Read settings from the environment."""
    return Settings(
        database_url=os.getenv("DATABASE_URL"),
        supabase_url=os.getenv("SUPABASE_URL", "").rstrip("/"),
        supabase_anon_key=os.getenv("SUPABASE_ANON_KEY", ""),
        identity_timeout_seconds=float(os.getenv("IDENTITY_TIMEOUT_SECONDS", "10.0")),
        db_pool_min_size=int(os.getenv("DB_POOL_MIN_SIZE", "1")),
        db_pool_max_size=int(os.getenv("DB_POOL_MAX_SIZE", "5")),
        cors_allow_origins=_split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")) or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
