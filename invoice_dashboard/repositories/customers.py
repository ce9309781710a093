from __future__ import annotations

from typing import List

from sqlalchemy import case, func, or_, select

from invoice_dashboard.db.models import Customer, Invoice
from invoice_dashboard.schemas.cards import RowCount
from invoice_dashboard.schemas.customers import CustomerField, CustomersTableRaw
from .base import LIKE_ESCAPE, BaseRepository, contains_pattern


class CustomerRepository(BaseRepository):
    """Read-only queries over customers."""

    async def count_customers(self) -> RowCount:
        stmt = select(func.count().label("count")).select_from(Customer)
        return await self.store.fetch_one(stmt, RowCount) or RowCount()

    async def list_customer_fields(self) -> List[CustomerField]:
        stmt = select(Customer.id, Customer.name).order_by(Customer.name.asc())
        return await self.store.fetch_all(stmt, CustomerField)

    async def list_filtered_with_totals(self, *, query: str) -> List[CustomersTableRaw]:
        """
        Customers whose name or email contains ``query``, with invoice count and
        pending/paid sums. Customers without invoices are kept (left join).
        """
        like = contains_pattern(query)
        stmt = (
            select(
                Customer.id,
                Customer.name,
                Customer.email,
                Customer.image_url,
                func.count(Invoice.id).label("total_invoices"),
                func.sum(
                    case((Invoice.status == "pending", Invoice.amount), else_=0)
                ).label("total_pending"),
                func.sum(
                    case((Invoice.status == "paid", Invoice.amount), else_=0)
                ).label("total_paid"),
            )
            .select_from(Customer)
            .outerjoin(Invoice, Customer.id == Invoice.customer_id)
            .where(
                or_(
                    Customer.name.ilike(like, escape=LIKE_ESCAPE),
                    Customer.email.ilike(like, escape=LIKE_ESCAPE),
                )
            )
            .group_by(Customer.id, Customer.name, Customer.email, Customer.image_url)
            .order_by(Customer.name.asc())
        )
        return await self.store.fetch_all(stmt, CustomersTableRaw)
