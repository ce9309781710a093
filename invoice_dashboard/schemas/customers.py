from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class CustomerField(BaseModel):
    """Customer entry for selection lists."""
    id: UUID = Field(..., description="Customer ID")
    name: str = Field(..., description="Customer name")


class CustomersTableRaw(BaseModel):
    """Customer with invoice aggregates, totals in cents."""
    id: UUID = Field(..., description="Customer ID")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")
    image_url: str = Field(..., description="Customer avatar URL")
    total_invoices: int = Field(0, ge=0, description="Number of invoices")
    total_pending: int = Field(0, description="Sum of pending invoice amounts (cents)")
    total_paid: int = Field(0, description="Sum of paid invoice amounts (cents)")

    @field_validator("total_invoices", "total_pending", "total_paid", mode="before")
    @classmethod
    def _null_aggregate_is_zero(cls, v):
        return 0 if v is None else v


class FormattedCustomersTable(BaseModel):
    """Customers table row with display-formatted totals."""
    id: UUID = Field(..., description="Customer ID")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")
    image_url: str = Field(..., description="Customer avatar URL")
    total_invoices: int = Field(..., description="Number of invoices")
    total_pending: str = Field(..., description="Formatted pending total")
    total_paid: str = Field(..., description="Formatted paid total")
