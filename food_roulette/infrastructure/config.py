"""Configuration utilities for the infrastructure layer.

Values come from environment variables; ``app.py`` loads ``.env`` first.
"""

import os
from pathlib import Path
from typing import Optional

from food_roulette.domain.suggestion.services.suggestion_service import DEFAULT_THEME

DEFAULT_STORAGE_PATH = Path.home() / ".food_roulette" / "storage.json"


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_storage_backend() -> str:
    """
    Get storage backend name.

    Returns:
        ``json`` (default, local file) or ``memory``
    """
    return os.getenv("STORAGE_BACKEND", "json").lower()


def get_storage_path() -> Path:
    """
    Get path of the JSON storage file.

    ``~`` and ``$VAR`` placeholders in STORAGE_PATH are expanded.
    """
    raw = os.getenv("STORAGE_PATH")
    if not raw:
        return DEFAULT_STORAGE_PATH
    return Path(os.path.expandvars(raw)).expanduser()


def get_spin_duration_s() -> float:
    """Seconds a spin takes before the winner is resolved (default 4.0)."""
    value = _get_float("SPIN_DURATION_S", 4.0)
    if value < 0:
        raise ValueError(f"SPIN_DURATION_S cannot be negative, got {value}")
    return value


def get_spin_min_turns() -> int:
    return int(_get_float("SPIN_MIN_TURNS", 10))


def get_suggestion_provider_mode() -> str:
    return os.getenv("SUGGESTION_PROVIDER", "openai").lower()


def get_openai_api_key() -> Optional[str]:
    key = os.getenv("OPENAI_API_KEY")
    return key.strip() if key and key.strip() else None


def get_suggestion_model() -> str:
    return os.getenv("OPENAI_SUGGESTION_MODEL", "gpt-4o-mini")


def get_suggestion_theme() -> str:
    return os.getenv("SUGGESTION_THEME", DEFAULT_THEME)


def get_app_version() -> str:
    return os.getenv("APP_VERSION", "0.0.0-dev")
