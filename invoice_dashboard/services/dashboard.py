from __future__ import annotations

import asyncio
import functools
import logging
import math
from typing import Awaitable, Callable, List, Optional, TypeVar, Union
from uuid import UUID

from invoice_dashboard.core.errors import StoreFailure
from invoice_dashboard.core.logging import operation_var
from invoice_dashboard.core.settings import get_app_settings
from invoice_dashboard.db.session import get_store_client
from invoice_dashboard.db.store import StoreClient, StoreQueryError
from invoice_dashboard.repositories.customers import CustomerRepository
from invoice_dashboard.repositories.invoices import InvoiceRepository
from invoice_dashboard.repositories.revenue import RevenueRepository
from invoice_dashboard.schemas.cards import CardData
from invoice_dashboard.schemas.customers import CustomerField, FormattedCustomersTable
from invoice_dashboard.schemas.invoices import InvoiceForm, InvoicesTableRow, LatestInvoice
from invoice_dashboard.schemas.revenue import RevenueRead
from invoice_dashboard.services.base import BaseService
from invoice_dashboard.utils.formatting import format_currency, minor_to_major

logger = logging.getLogger(__name__)

T = TypeVar("T")


def store_operation(message: str):
    """
    Wrap a fetcher so store errors are logged and re-raised as StoreFailure.

    The failure exposes only ``message``; the store error is kept as its cause.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            token = operation_var.set(func.__name__)
            try:
                return await func(*args, **kwargs)
            except StoreQueryError as exc:
                logger.exception("Database error in %s: %s", func.__name__, exc)
                raise StoreFailure(message, operation=func.__name__) from exc
            finally:
                operation_var.reset(token)

        return wrapper

    return decorator


class DashboardService(BaseService):
    """
    Fetchers backing the dashboard pages.

    Amounts stay in integer cents until they are formatted for display; only
    ``fetch_invoice_by_id`` returns a numeric dollar amount, for the edit form.
    """

    def __init__(
        self,
        store: StoreClient,
        *,
        page_size: Optional[int] = None,
        latest_limit: Optional[int] = None,
    ) -> None:
        super().__init__(store)
        settings = get_app_settings()
        self.page_size = page_size or settings.INVOICES_PAGE_SIZE
        self.latest_limit = latest_limit or settings.LATEST_INVOICES_LIMIT
        self.invoice_repo = InvoiceRepository(store)
        self.customer_repo = CustomerRepository(store)
        self.revenue_repo = RevenueRepository(store)

    # PUBLIC_INTERFACE
    @store_operation("Failed to fetch revenue data.")
    async def fetch_revenue(self) -> List[RevenueRead]:
        """Return every monthly revenue row as stored."""
        return await self.revenue_repo.list_revenue()

    # PUBLIC_INTERFACE
    @store_operation("Failed to fetch the latest invoices.")
    async def fetch_latest_invoices(self) -> List[LatestInvoice]:
        """Return the most recent invoices (newest first) with formatted amounts."""
        rows = await self.invoice_repo.list_latest(limit=self.latest_limit)
        return [
            LatestInvoice(**row.model_dump(exclude={"amount"}), amount=format_currency(row.amount))
            for row in rows
        ]

    # PUBLIC_INTERFACE
    @store_operation("Failed to fetch card data.")
    async def fetch_card_data(self) -> CardData:
        """
        Run the invoice count, customer count and paid/pending totals queries
        concurrently and merge them.

        All three queries are awaited before anything is merged; if any of them
        failed the whole call fails and no partial summary is returned.
        """
        results = await asyncio.gather(
            self.invoice_repo.count_invoices(),
            self.customer_repo.count_customers(),
            self.invoice_repo.status_totals(),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        invoice_count, customer_count, totals = results

        return CardData(
            number_of_invoices=invoice_count.count,
            number_of_customers=customer_count.count,
            total_paid_invoices=format_currency(totals.paid),
            total_pending_invoices=format_currency(totals.pending),
        )

    # PUBLIC_INTERFACE
    @store_operation("Failed to fetch invoices.")
    async def fetch_filtered_invoices(self, query: str, current_page: int) -> List[InvoicesTableRow]:
        """
        Return one page of invoices matching ``query``, newest first.

        Pages are 1-indexed; a page below 1 is treated as page 1.
        """
        if current_page < 1:
            logger.debug("Clamping page %s to 1", current_page)
            current_page = 1
        offset = (current_page - 1) * self.page_size
        logger.debug("Fetching invoices page=%s offset=%s limit=%s", current_page, offset, self.page_size)
        return await self.invoice_repo.list_filtered(
            query=query, limit=self.page_size, offset=offset
        )

    # PUBLIC_INTERFACE
    @store_operation("Failed to fetch total number of invoices.")
    async def fetch_invoices_pages(self, query: str) -> int:
        """Return the number of pages of invoices matching ``query``."""
        count = await self.invoice_repo.count_filtered(query=query)
        return math.ceil(count / self.page_size)

    # PUBLIC_INTERFACE
    @store_operation("Failed to fetch invoice.")
    async def fetch_invoice_by_id(self, invoice_id: Union[UUID, str]) -> Optional[InvoiceForm]:
        """
        Return the invoice for the edit form, amount converted to dollars.

        Returns None when no invoice has this id (including ids that are not
        valid UUIDs); that is not a failure.
        """
        if not isinstance(invoice_id, UUID):
            try:
                invoice_id = UUID(str(invoice_id))
            except ValueError:
                logger.warning("Invoice id %r is not a valid UUID", invoice_id)
                return None

        row = await self.invoice_repo.get_invoice_form(invoice_id)
        if row is None:
            logger.info("Invoice %s not found", invoice_id)
            return None
        return InvoiceForm(
            id=row.id,
            customer_id=row.customer_id,
            amount=minor_to_major(row.amount),
            status=row.status,
        )

    # PUBLIC_INTERFACE
    @store_operation("Failed to fetch all customers.")
    async def fetch_customers(self) -> List[CustomerField]:
        """Return id and name of all customers, by name."""
        return await self.customer_repo.list_customer_fields()

    # PUBLIC_INTERFACE
    @store_operation("Failed to fetch customer table.")
    async def fetch_filtered_customers(self, query: str) -> List[FormattedCustomersTable]:
        """Return customers matching ``query`` with formatted invoice totals."""
        rows = await self.customer_repo.list_filtered_with_totals(query=query)
        return [
            FormattedCustomersTable(
                **row.model_dump(exclude={"total_pending", "total_paid"}),
                total_pending=format_currency(row.total_pending),
                total_paid=format_currency(row.total_paid),
            )
            for row in rows
        ]


# PUBLIC_INTERFACE
def get_dashboard_service() -> DashboardService:
    """Build a DashboardService on the globally configured engine."""
    return DashboardService(get_store_client())
