"""Runtime configuration helpers."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PORT = 8080
INFO_PATH = "/info"


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    info_path: str = INFO_PATH
    log_level: str = "info"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the fixed service settings; nothing is read from the environment."""
    return Settings()
