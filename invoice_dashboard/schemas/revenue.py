from __future__ import annotations

from pydantic import BaseModel, Field


class RevenueRead(BaseModel):
    """One month of the revenue summary."""
    month: str = Field(..., description="Month label, e.g. 'Jan'")
    revenue: int = Field(..., description="Revenue for the month")
