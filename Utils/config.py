import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from Utils.appError import ConfigError

load_dotenv()

TRUTHY = ("1", "true", "yes", "on")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


@dataclass(frozen=True)
class Settings:
    """Startup configuration, resolved once and handed to the app factory."""

    version: str = "1.0"
    animal: str = "unknown"
    host: str = "0.0.0.0"
    port: int = 8000
    item_count: int = 50
    seed: Optional[int] = None
    log_dir: str = "logs"
    file_logging: bool = True
    ratelimit_enabled: bool = True
    hourly_limit: str = "5000 per hour"
    secondly_limit: str = "50 per second"

    def __post_init__(self):
        if self.item_count < 1:
            raise ConfigError(f"CATALOG_ITEM_COUNT must be positive, got {self.item_count}")
        if not 0 < self.port < 65536:
            raise ConfigError(f"PORT out of range: {self.port}")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            version=os.getenv("APP_VERSION", "1.0"),
            animal=os.getenv("APP_ANIMAL", "unknown"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", 8000),
            item_count=_env_int("CATALOG_ITEM_COUNT", 50),
            seed=_env_int("CATALOG_SEED", None),
            log_dir=os.getenv("LOG_DIR", "logs"),
            file_logging=_env_bool("LOG_TO_FILE", True),
            ratelimit_enabled=_env_bool("RATELIMIT_ENABLED", True),
            hourly_limit=os.getenv("LIMIT_DEFAULT_HOURLY", "5000 per hour"),
            secondly_limit=os.getenv("LIMIT_DEFAULT_SECONDLY", "50 per second"),
        )
