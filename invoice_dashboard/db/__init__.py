"""
Database package initializer exposing key public interfaces for configuration,
engine management and the store client.
"""

from .base import Base
from .config import get_settings, Settings
from .session import dispose_engine, get_engine, get_store_client
from .store import StoreClient, StoreQueryError

# Import models to ensure they are registered with SQLAlchemy metadata
# when the db package is imported.
from . import models as models  # noqa: F401

__all__ = [
    "Base",
    "Settings",
    "get_settings",
    "get_engine",
    "get_store_client",
    "dispose_engine",
    "StoreClient",
    "StoreQueryError",
    "models",
]
