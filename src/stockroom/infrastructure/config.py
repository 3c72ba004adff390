import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _get_bool(env_name: str, default: bool = False) -> bool:
    val = os.getenv(env_name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_int(env_name: str, default: int) -> int:
    val = os.getenv(env_name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer); using %d", env_name, val, default)
        return default


@dataclass
class Settings:
    # Advisory text service (OpenAI); empty key disables it
    OPENAI_API_KEY: str = os.getenv("STOCKROOM_OPENAI_API_KEY", os.getenv("OPENAI_API_KEY", ""))
    ADVISORY_MODEL: str = os.getenv("STOCKROOM_ADVISORY_MODEL", "gpt-4o-mini")

    # Catalog
    LOW_STOCK_THRESHOLD: int = _get_int("STOCKROOM_LOW_STOCK_THRESHOLD", 10)
    SEED_DEMO: bool = _get_bool("STOCKROOM_SEED_DEMO", True)

    # Logging
    LOG_LEVEL: str = os.getenv("STOCKROOM_LOG_LEVEL", "WARNING")


settings = Settings()
