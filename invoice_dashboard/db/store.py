from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import Executable, Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT", bound=BaseModel)


class StoreQueryError(RuntimeError):
    """
    Any failure while running a query or decoding its rows.

    The store client does not interpret the cause; the original exception is
    chained as ``__cause__``.
    """


class StoreClient:
    """
    Executes parameterized statements and decodes rows into typed records.

    Each call checks out its own pooled connection, so independent calls can be
    awaited together without sharing a session.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def execute(
        self, statement: Executable, params: Optional[dict[str, Any]] = None
    ) -> Sequence[Row]:
        """Execute a statement on a fresh connection and return all rows."""
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(statement, params or {})
                return result.all()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreQueryError(f"{type(exc).__name__}: {exc}") from exc

    async def fetch_all(
        self,
        statement: Executable,
        row_type: Type[RowT],
        params: Optional[dict[str, Any]] = None,
    ) -> list[RowT]:
        """Execute and decode every row into ``row_type``."""
        rows = await self.execute(statement, params)
        try:
            return [row_type.model_validate(row._asdict()) for row in rows]
        except ValidationError as exc:
            raise StoreQueryError(
                f"Could not decode row as {row_type.__name__}: {exc.error_count()} error(s)"
            ) from exc

    async def fetch_one(
        self,
        statement: Executable,
        row_type: Type[RowT],
        params: Optional[dict[str, Any]] = None,
    ) -> Optional[RowT]:
        """Execute and decode the first row, or return None if there is none."""
        records = await self.fetch_all(statement, row_type, params)
        if len(records) > 1:
            logger.debug("fetch_one discarded %d extra %s rows", len(records) - 1, row_type.__name__)
        return records[0] if records else None

    async def fetch_scalar(
        self, statement: Executable, params: Optional[dict[str, Any]] = None
    ) -> Any:
        """Execute and return the first column of the first row (None if no rows)."""
        rows = await self.execute(statement, params)
        if not rows:
            return None
        return rows[0][0]
