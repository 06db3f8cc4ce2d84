"""Runtime configuration read from the environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .storage import DEFAULT_API_URL, DEFAULT_GROUP_ID, ApiStore, JsonFileStore, RosterStore


BACKEND_LOCAL = "local"
BACKEND_API = "api"
BACKENDS = (BACKEND_LOCAL, BACKEND_API)

DEFAULT_DATA_FILE = Path("data") / "roster.json"


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _parse_log_level(env_var: str, default: str) -> str:
    raw = (os.getenv(env_var) or "").strip().upper()
    return raw if isinstance(logging.getLevelName(raw), int) else default


def _parse_choice(env_var: str, choices: tuple[str, ...], default: str) -> str:
    raw = (os.getenv(env_var) or "").strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        backend: Which store to use, "local" or "api".
        data_file: JSON document used by the local store.
        api_url: Root URL of the REST API.
        group_id: Group whose roster the API store manages.
        api_timeout: Seconds to wait for API responses.
        log_level: Logging level name.
    """

    backend: str = BACKEND_LOCAL
    data_file: Path = DEFAULT_DATA_FILE
    api_url: str = DEFAULT_API_URL
    group_id: str = DEFAULT_GROUP_ID
    api_timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: Optional[Path] = None) -> "Settings":
        """
        Read settings from TEAMPLANNER_* environment variables.

        Values from a .env file are loaded first; variables already set in
        the environment take precedence. Unparseable values fall back to
        their defaults.
        """
        load_dotenv(dotenv_path)
        return cls(
            backend=_parse_choice("TEAMPLANNER_BACKEND", BACKENDS, BACKEND_LOCAL),
            data_file=Path(os.getenv("TEAMPLANNER_DATA_FILE") or DEFAULT_DATA_FILE),
            api_url=os.getenv("TEAMPLANNER_API_URL") or DEFAULT_API_URL,
            group_id=os.getenv("TEAMPLANNER_GROUP_ID") or DEFAULT_GROUP_ID,
            api_timeout=_parse_float("TEAMPLANNER_API_TIMEOUT", 30.0),
            log_level=_parse_log_level("TEAMPLANNER_LOG_LEVEL", "INFO"),
        )


def create_store(settings: Settings) -> RosterStore:
    """Build the roster store selected by the settings."""
    if settings.backend == BACKEND_API:
        return ApiStore(
            base_url=settings.api_url,
            group_id=settings.group_id,
            timeout=settings.api_timeout,
        )
    return JsonFileStore(settings.data_file)
