"""
Application settings and environment configuration.

Responsibilities:
- Collect env-derived values (see config.env) into one typed object.
- Provide defaults for every optional setting.
- Cache the result; tests call get_settings.cache_clear() after monkeypatching env.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from pathlib import Path

from infosec_quiz.config.env import (
    get_api_host,
    get_api_port,
    get_max_response_chars,
    get_scenarios_path,
)


@dataclass(frozen=True)
class Settings:
    """Service configuration resolved from the environment."""

    api_host: str
    api_port: int
    max_response_chars: int
    scenarios_path: Path


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings.

    Returns:
        Settings with api_host, api_port, max_response_chars and scenarios_path.
    """
    return Settings(
        api_host=get_api_host(),
        api_port=get_api_port(),
        max_response_chars=get_max_response_chars(),
        scenarios_path=get_scenarios_path(),
    )
