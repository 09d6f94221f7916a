"""Configuration management"""
import logging
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dotenv import load_dotenv

from eunoia.exceptions import ConfigurationError

load_dotenv()


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


# API server
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8080"))
RATE_LIMIT_ENABLED: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"

# Bearer keys accepted by the achievement and streak endpoints (comma separated)
API_KEYS: list[str] = _split_csv(os.getenv("API_KEYS", ""))

# Origins allowed to call the API from a browser (the journal client by default)
CORS_ORIGINS: list[str] = _split_csv(os.getenv("CORS_ORIGINS", "http://localhost:5173"))

# Timezone used to read entry timestamps.
# - '' (default): use the wall clock stored on each timestamp, no conversion
# - 'Europe/Stockholm' etc: convert aware timestamps to this zone first
# Which zone the product should use is still undecided, see DESIGN.md.
ENTRY_TIMEZONE: str = os.getenv("ENTRY_TIMEZONE", "")

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def get_entry_timezone() -> Optional[ZoneInfo]:
    """Return the configured entry timezone, or None to keep stored wall clocks"""
    if not ENTRY_TIMEZONE:
        return None
    return ZoneInfo(ENTRY_TIMEZONE)


# Validation
def validate_config() -> None:
    """Validate configuration"""
    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        raise ConfigurationError(f"Unknown LOG_LEVEL '{LOG_LEVEL}'", config_key="LOG_LEVEL")
    if ENTRY_TIMEZONE:
        try:
            ZoneInfo(ENTRY_TIMEZONE)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(
                f"Unknown ENTRY_TIMEZONE '{ENTRY_TIMEZONE}'",
                config_key="ENTRY_TIMEZONE",
                cause=e
            )
    if not API_KEYS:
        raise ConfigurationError(
            "API_KEYS is empty; the achievement endpoints would reject every request",
            config_key="API_KEYS"
        )
