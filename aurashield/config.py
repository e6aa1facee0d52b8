"""Environment configuration. Values come from the process environment or a
local .env file."""

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_KEY = "sk-aura-default-key"
DEFAULT_PORT = 3000


def parse_api_keys(raw: Optional[str]) -> List[str]:
    """Split a comma-separated key list, trimming and dropping blanks.
    Unset falls back to the development key."""
    if raw is None:
        return [DEFAULT_API_KEY]
    return [key.strip() for key in raw.split(",") if key.strip()]


def parse_port(raw: Optional[str]) -> int:
    try:
        return int(raw) if raw else DEFAULT_PORT
    except ValueError:
        return DEFAULT_PORT


class Config:
    SERVICE_NAME = "AuraShield API"
    VERSION = "1.0.0"

    API_KEYS: List[str] = parse_api_keys(os.getenv("API_KEYS"))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = parse_port(os.getenv("PORT"))
    APP_ENV: str = os.getenv("APP_ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
