"""
Typed records for each query shape.

Rows are decoded into these models once, inside the store client. Models with
a formatted variant (e.g. ``LatestInvoiceRaw`` -> ``LatestInvoice``) keep the
raw integer cents until the fetcher applies the currency formatter.
"""

from .cards import CardData, RowCount, InvoiceTotals
from .customers import (
    CustomerField,
    CustomersTableRaw,
    FormattedCustomersTable,
)
from .invoices import (
    InvoiceForm,
    InvoiceFormRaw,
    InvoicesTableRow,
    InvoiceStatus,
    LatestInvoice,
    LatestInvoiceRaw,
)
from .revenue import RevenueRead

__all__ = [
    "CardData",
    "RowCount",
    "InvoiceTotals",
    "CustomerField",
    "CustomersTableRaw",
    "FormattedCustomersTable",
    "InvoiceForm",
    "InvoiceFormRaw",
    "InvoicesTableRow",
    "InvoiceStatus",
    "LatestInvoice",
    "LatestInvoiceRaw",
    "RevenueRead",
]
