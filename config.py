"""Application configuration."""
import os
from dotenv import load_dotenv

load_dotenv()


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return int(value)


# Backend REST service exposing the product records
BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "http://localhost:3001").rstrip("/")
REQUEST_TIMEOUT = _get_int("REQUEST_TIMEOUT", 15)

# Review queue
PAGE_SIZE = _get_int("PAGE_SIZE", 8)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# App settings
APP_TITLE = "INHABITR"
APP_PORT = _get_int("APP_PORT", 8080)
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
