"""
Table definitions for the dashboard schema.

The tables are created and written by the surrounding application; this package
only reads them. The mapped classes exist so queries can be composed with
SQLAlchemy expressions instead of hand-written SQL strings.
"""

from __future__ import annotations

import uuid
import datetime

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Customer(Base):
    """Customer master."""
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)


class Invoice(Base):
    """Invoice header. ``amount`` is in cents."""
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="amount_non_negative"),
        CheckConstraint("status IN ('pending', 'paid')", name="status_valid"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("customers.id"), nullable=False, index=True
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)


class Revenue(Base):
    """Monthly revenue summary, one row per month."""
    __tablename__ = "revenue"

    month: Mapped[str] = mapped_column(Text, primary_key=True)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)
