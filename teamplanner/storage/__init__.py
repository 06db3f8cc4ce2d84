"""Roster stores for players and events."""

from .base import (
    ApiError,
    DataFormatError,
    DuplicateError,
    NotFoundError,
    RosterStore,
    StoreError,
)
from .local import JsonFileStore
from .api import ApiStore, DEFAULT_API_URL, DEFAULT_GROUP_ID

__all__ = [
    # Base
    "ApiError",
    "DataFormatError",
    "DuplicateError",
    "NotFoundError",
    "RosterStore",
    "StoreError",
    # Local
    "JsonFileStore",
    # API
    "ApiStore",
    "DEFAULT_API_URL",
    "DEFAULT_GROUP_ID",
]
