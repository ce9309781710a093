from __future__ import annotations

from typing import List

from sqlalchemy import select

from invoice_dashboard.db.models import Revenue
from invoice_dashboard.schemas.revenue import RevenueRead
from .base import BaseRepository


class RevenueRepository(BaseRepository):
    """Repository for the monthly revenue summary."""

    async def list_revenue(self) -> List[RevenueRead]:
        # No ORDER BY: months are returned in stored order.
        stmt = select(Revenue.month, Revenue.revenue)
        return await self.store.fetch_all(stmt, RevenueRead)
