from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class RowCount(BaseModel):
    """Result of a COUNT(*) query."""
    count: int = Field(0, ge=0)

    @field_validator("count", mode="before")
    @classmethod
    def _absent_count_is_zero(cls, v):
        return 0 if v is None else v


class InvoiceTotals(BaseModel):
    """Paid and pending sums computed in one pass over invoices (cents)."""
    paid: int = Field(0)
    pending: int = Field(0)

    @field_validator("paid", "pending", mode="before")
    @classmethod
    def _empty_sum_is_zero(cls, v):
        # SUM over zero rows is NULL
        return 0 if v is None else v


class CardData(BaseModel):
    """Summary figures for the dashboard cards."""
    number_of_invoices: int = Field(..., description="Total number of invoices")
    number_of_customers: int = Field(..., description="Total number of customers")
    total_paid_invoices: str = Field(..., description="Formatted sum of paid invoices")
    total_pending_invoices: str = Field(..., description="Formatted sum of pending invoices")
