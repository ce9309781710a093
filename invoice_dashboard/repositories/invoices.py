from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import ColumnElement, Select, String, case, cast, func, or_, select

from invoice_dashboard.db.models import Customer, Invoice
from invoice_dashboard.schemas.cards import RowCount, InvoiceTotals
from invoice_dashboard.schemas.invoices import (
    InvoiceFormRaw,
    InvoicesTableRow,
    LatestInvoiceRaw,
)
from .base import LIKE_ESCAPE, BaseRepository, contains_pattern


# PUBLIC_INTERFACE
def invoice_search_clause(query: str) -> ColumnElement[bool]:
    """
    Case-insensitive substring match of ``query`` against customer name,
    customer email, amount, date and status.

    Both the invoices page query and the page-count query filter with this
    clause, so the two cannot drift apart.
    """
    like = contains_pattern(query)
    return or_(
        Customer.name.ilike(like, escape=LIKE_ESCAPE),
        Customer.email.ilike(like, escape=LIKE_ESCAPE),
        cast(Invoice.amount, String).ilike(like, escape=LIKE_ESCAPE),
        cast(Invoice.date, String).ilike(like, escape=LIKE_ESCAPE),
        Invoice.status.ilike(like, escape=LIKE_ESCAPE),
    )


def _with_customer(stmt: Select) -> Select:
    return stmt.select_from(Invoice).join(Customer, Invoice.customer_id == Customer.id)


class InvoiceRepository(BaseRepository):
    """Read-only queries over invoices (joined with customers where needed)."""

    async def count_invoices(self) -> RowCount:
        stmt = select(func.count().label("count")).select_from(Invoice)
        return await self.store.fetch_one(stmt, RowCount) or RowCount()

    async def status_totals(self) -> InvoiceTotals:
        """Paid and pending sums in a single scan."""
        stmt = select(
            func.sum(case((Invoice.status == "paid", Invoice.amount), else_=0)).label("paid"),
            func.sum(case((Invoice.status == "pending", Invoice.amount), else_=0)).label("pending"),
        )
        return await self.store.fetch_one(stmt, InvoiceTotals) or InvoiceTotals()

    async def list_latest(self, *, limit: int) -> List[LatestInvoiceRaw]:
        stmt = _with_customer(
            select(
                Invoice.amount,
                Customer.name,
                Customer.image_url,
                Customer.email,
                Invoice.id,
            )
        )
        stmt = stmt.order_by(Invoice.date.desc(), Invoice.id).limit(limit)
        return await self.store.fetch_all(stmt, LatestInvoiceRaw)

    async def list_filtered(
        self, *, query: str, limit: int, offset: int
    ) -> List[InvoicesTableRow]:
        stmt = _with_customer(
            select(
                Invoice.id,
                Invoice.customer_id,
                Invoice.amount,
                Invoice.date,
                Invoice.status,
                Customer.name,
                Customer.email,
                Customer.image_url,
            )
        )
        stmt = (
            stmt.where(invoice_search_clause(query))
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(limit)
            .offset(offset)
        )
        return await self.store.fetch_all(stmt, InvoicesTableRow)

    async def count_filtered(self, *, query: str) -> int:
        stmt = _with_customer(select(func.count().label("count")))
        stmt = stmt.where(invoice_search_clause(query))
        count = await self.store.fetch_scalar(stmt)
        return int(count or 0)

    async def get_invoice_form(self, invoice_id: UUID) -> Optional[InvoiceFormRaw]:
        stmt = select(
            Invoice.id,
            Invoice.customer_id,
            Invoice.amount,
            Invoice.status,
        ).where(Invoice.id == invoice_id)
        return await self.store.fetch_one(stmt, InvoiceFormRaw)
