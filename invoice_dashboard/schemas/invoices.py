from __future__ import annotations

import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field


class InvoiceStatus(str, Enum):
    """Closed set of invoice states."""
    PENDING = "pending"
    PAID = "paid"


class LatestInvoiceRaw(BaseModel):
    """Invoice joined with its customer, amount still in cents."""
    id: UUID = Field(..., description="Invoice ID")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")
    image_url: str = Field(..., description="Customer avatar URL")
    amount: int = Field(..., ge=0, description="Invoice amount in cents")


class LatestInvoice(BaseModel):
    """Latest-invoices list entry with a display-formatted amount."""
    id: UUID = Field(..., description="Invoice ID")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")
    image_url: str = Field(..., description="Customer avatar URL")
    amount: str = Field(..., description="Formatted amount, e.g. '$12.34'")


class InvoicesTableRow(BaseModel):
    """Row of the searchable invoices table."""
    id: UUID = Field(..., description="Invoice ID")
    customer_id: UUID = Field(..., description="Customer ID")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")
    image_url: str = Field(..., description="Customer avatar URL")
    date: datetime.date = Field(..., description="Invoice date")
    amount: int = Field(..., ge=0, description="Invoice amount in cents")
    status: InvoiceStatus = Field(..., description="Invoice status")


class InvoiceFormRaw(BaseModel):
    """Invoice fields needed by the edit form, amount in cents."""
    id: UUID
    customer_id: UUID
    amount: int = Field(..., ge=0)
    status: InvoiceStatus


class InvoiceForm(BaseModel):
    """Invoice as consumed by the edit form; ``amount`` is in dollars."""
    id: UUID = Field(..., description="Invoice ID")
    customer_id: UUID = Field(..., description="Customer ID")
    amount: float = Field(..., description="Invoice amount in dollars")
    status: InvoiceStatus = Field(..., description="Invoice status")
