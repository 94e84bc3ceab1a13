"""Global configuration singleton for DummyImage.

Reads settings from environment variables by default.  When embedded in
another ASGI host, the caller can populate the singleton *before* building
the app so values don't have to live in the process environment.

    from dummyimage.config import settings
    settings.CACHE_MAX_ENTRIES = 4096
"""

import os
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}


class Settings:
    """Mutable settings object; attributes win over the environment."""

    LOG_LEVEL: Optional[str] = None
    CACHE_ENABLED: Optional[bool] = None
    CACHE_MAX_ENTRIES: Optional[int] = None
    HOST: Optional[str] = None
    PORT: Optional[int] = None

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the attribute value if set, otherwise fall back to env."""
        value = getattr(self, name, None)
        if value is not None:
            return str(value)
        return os.getenv(name, default)

    @property
    def log_level(self) -> str:
        return (self.get("LOG_LEVEL") or "INFO").upper()

    @property
    def cache_enabled(self) -> bool:
        return (self.get("CACHE_ENABLED") or "true").strip().lower() in _TRUTHY

    @property
    def cache_max_entries(self) -> int:
        return int(self.get("CACHE_MAX_ENTRIES") or 1024)

    @property
    def host(self) -> str:
        return self.get("HOST") or "0.0.0.0"

    @property
    def port(self) -> int:
        return int(self.get("PORT") or 8080)


settings = Settings()
