"""
Repository layer for data access.

Repositories build SQLAlchemy Core statements for each table and run them
through the StoreClient, which decodes rows into the typed records in
invoice_dashboard.schemas.
"""

from .customers import CustomerRepository
from .invoices import InvoiceRepository, invoice_search_clause
from .revenue import RevenueRepository

__all__ = [
    "CustomerRepository",
    "InvoiceRepository",
    "RevenueRepository",
    "invoice_search_clause",
]
