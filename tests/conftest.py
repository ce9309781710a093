"""Pytest configuration and fixtures."""

from datetime import date
from uuid import UUID

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine

from invoice_dashboard.db.base import Base
from invoice_dashboard.db.models import Customer, Invoice, Revenue
from invoice_dashboard.db.store import StoreClient
from invoice_dashboard.services.dashboard import DashboardService


DELBA = UUID("d6e15727-9fe1-4961-8c5b-ea44a9bd81aa")
LEE = UUID("3958dc9e-712f-4377-85e9-fec4b6a6442a")
HECTOR = UUID("3958dc9e-742f-4377-85e9-fec4b6a6442a")
AMY = UUID("76d65c26-f784-44a2-ac19-586678f7c2f2")

CUSTOMERS = [
    {"id": DELBA, "name": "Delba de Oliveira", "email": "delba@oliveira.com", "image_url": "/customers/delba-de-oliveira.png"},
    {"id": LEE, "name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/customers/lee-robinson.png"},
    {"id": HECTOR, "name": "Hector Simpson", "email": "hector@simpson.com", "image_url": "/customers/hector-simpson.png"},
    {"id": AMY, "name": "Amy Burns", "email": "amy@burns.com", "image_url": "/customers/amy-burns.png"},
]

# Invoice ids are deterministic so ordering assertions can name them.
INV = {n: UUID(int=n) for n in range(1, 10)}

INVOICES = [
    {"id": INV[1], "customer_id": DELBA, "amount": 15795, "status": "pending", "date": date(2022, 12, 6)},
    {"id": INV[2], "customer_id": LEE, "amount": 20348, "status": "pending", "date": date(2022, 11, 14)},
    {"id": INV[3], "customer_id": HECTOR, "amount": 3040, "status": "paid", "date": date(2022, 10, 29)},
    {"id": INV[4], "customer_id": DELBA, "amount": 44800, "status": "paid", "date": date(2023, 9, 10)},
    {"id": INV[5], "customer_id": LEE, "amount": 34577, "status": "pending", "date": date(2023, 8, 5)},
    {"id": INV[6], "customer_id": HECTOR, "amount": 54246, "status": "pending", "date": date(2023, 7, 16)},
    {"id": INV[7], "customer_id": DELBA, "amount": 666, "status": "pending", "date": date(2023, 6, 27)},
    {"id": INV[8], "customer_id": LEE, "amount": 32545, "status": "paid", "date": date(2023, 6, 9)},
    {"id": INV[9], "customer_id": HECTOR, "amount": 1250, "status": "paid", "date": date(2023, 6, 17)},
]

REVENUE = [
    {"month": m, "revenue": r}
    for m, r in [
        ("Jan", 2000), ("Feb", 1800), ("Mar", 2200), ("Apr", 2500),
        ("May", 2300), ("Jun", 3200), ("Jul", 3500), ("Aug", 3700),
        ("Sep", 2500), ("Oct", 2800), ("Nov", 3000), ("Dec", 4800),
    ]
]


async def insert_rows(engine, customers=(), invoices=(), revenue=()):
    """Insert fixture rows directly; the package itself never writes."""
    async with engine.begin() as conn:
        if customers:
            await conn.execute(insert(Customer), list(customers))
        if invoices:
            await conn.execute(insert(Invoice), list(invoices))
        if revenue:
            await conn.execute(insert(Revenue), list(revenue))


@pytest.fixture
async def engine(tmp_path):
    """Create a temporary SQLite file database with the dashboard tables."""
    # A file (not :memory:) so that concurrent connections see the same data
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'dashboard.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def seeded_engine(engine):
    await insert_rows(engine, CUSTOMERS, INVOICES, REVENUE)
    return engine


@pytest.fixture
def store(seeded_engine):
    return StoreClient(seeded_engine)


@pytest.fixture
def service(store):
    return DashboardService(store, page_size=6, latest_limit=5)
