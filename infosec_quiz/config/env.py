"""
Environment variable loading and validation for InfoSec Quiz.

- API_HOST / API_PORT: bind address for main.py (default 0.0.0.0:8000)
- MAX_RESPONSE_CHARS: longest answer scored; longer input is truncated (default 1000)
- SCENARIOS_PATH: optional override for the scenario catalogue JSON
- LOG_LEVEL: structlog filtering level name (default INFO)
- LOG_FORMAT: json | console (default json)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is infosec_quiz/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000
DEFAULT_MAX_RESPONSE_CHARS = 1000
DEFAULT_SCENARIOS_PATH = _PACKAGE_DIR / "scenarios" / "scenarios.json"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "console")


def load_quiz_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH)


def _get_int(name: str, default: int, *, minimum: int = 1) -> int:
    """Read a positive int from env; unset, empty or invalid values give the default."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def get_api_host() -> str:
    load_quiz_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    load_quiz_env()
    return _get_int("API_PORT", DEFAULT_API_PORT)


def get_max_response_chars() -> int:
    """
    Return MAX_RESPONSE_CHARS from env.
    Default: 1000 (the quiz form's character limit).
    """
    load_quiz_env()
    return _get_int("MAX_RESPONSE_CHARS", DEFAULT_MAX_RESPONSE_CHARS)


def get_scenarios_path() -> Path:
    """
    Return SCENARIOS_PATH from env, or the catalogue shipped with the package.
    """
    load_quiz_env()
    raw = (os.getenv("SCENARIOS_PATH") or "").strip()
    return Path(raw) if raw else DEFAULT_SCENARIOS_PATH


def get_log_level() -> str:
    """
    Return LOG_LEVEL from env as an upper-case level name.
    Unknown names give INFO.
    """
    load_quiz_env()
    raw = (os.getenv("LOG_LEVEL") or "").strip().upper()
    return raw if raw in LOG_LEVELS else DEFAULT_LOG_LEVEL


def get_log_format() -> str:
    """
    Return LOG_FORMAT from env: json | console.
    Default: json.
    """
    load_quiz_env()
    raw = (os.getenv("LOG_FORMAT") or "").strip().lower()
    return raw if raw in LOG_FORMATS else DEFAULT_LOG_FORMAT
