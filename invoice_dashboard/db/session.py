from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from .config import get_settings
from .store import StoreClient


_ENGINE: AsyncEngine | None = None


def _ensure_engine_initialized() -> None:
    """
    Lazily initialize the AsyncEngine.
    """
    global _ENGINE
    if _ENGINE is None:
        settings = get_settings()
        options: dict[str, Any] = {"echo": settings.SQL_ECHO, "pool_pre_ping": True}
        if settings.is_postgres:
            # Card data fans out three queries at once; keep enough connections.
            options["pool_size"] = settings.DB_POOL_SIZE
        _ENGINE = create_async_engine(settings.async_database_url, **options)


# PUBLIC_INTERFACE
def get_engine() -> AsyncEngine:
    """Return the global AsyncEngine instance."""
    _ensure_engine_initialized()
    assert _ENGINE is not None
    return _ENGINE


# PUBLIC_INTERFACE
def get_store_client() -> StoreClient:
    """Return a StoreClient bound to the global engine."""
    return StoreClient(get_engine())


# PUBLIC_INTERFACE
async def dispose_engine() -> None:
    """Close pooled connections and forget the global engine."""
    global _ENGINE
    if _ENGINE is not None:
        await _ENGINE.dispose()
        _ENGINE = None
