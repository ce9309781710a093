"""Tests for the store client: execution, row decoding and failures."""

import pytest
from pydantic import BaseModel
from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError

from invoice_dashboard.db.models import Customer, Invoice
from invoice_dashboard.db.store import StoreQueryError
from invoice_dashboard.schemas.customers import CustomerField

from conftest import AMY, DELBA


async def test_fetch_all_decodes_rows(store):
    stmt = select(Customer.id, Customer.name).order_by(Customer.name)
    rows = await store.fetch_all(stmt, CustomerField)
    assert [r.name for r in rows] == [
        "Amy Burns",
        "Delba de Oliveira",
        "Hector Simpson",
        "Lee Robinson",
    ]
    assert rows[0].id == AMY


async def test_fetch_all_binds_parameters(store):
    stmt = text("SELECT id, name FROM customers WHERE name = :name")
    rows = await store.fetch_all(stmt, CustomerField, {"name": "Delba de Oliveira"})
    assert len(rows) == 1
    assert rows[0].name == "Delba de Oliveira"


async def test_fetch_one_returns_none_for_no_rows(store):
    stmt = select(Customer.id, Customer.name).where(Customer.name == "Nobody")
    assert await store.fetch_one(stmt, CustomerField) is None


async def test_fetch_one_returns_first_row(store):
    stmt = select(Customer.id, Customer.name).where(Customer.id == DELBA)
    row = await store.fetch_one(stmt, CustomerField)
    assert row is not None
    assert row.id == DELBA


async def test_fetch_scalar(store):
    assert await store.fetch_scalar(select(func.count()).select_from(Customer)) == 4
    assert await store.fetch_scalar(select(Customer.id).where(Customer.name == "Nobody")) is None


async def test_missing_bind_parameter_is_rejected(store):
    stmt = text("SELECT id, name FROM customers WHERE name = :name")
    with pytest.raises(StoreQueryError) as exc_info:
        await store.fetch_all(stmt, CustomerField)
    assert isinstance(exc_info.value.__cause__, SQLAlchemyError)


async def test_syntax_error_is_store_error(store):
    with pytest.raises(StoreQueryError):
        await store.execute(text("SELEC id FROM customers"))


async def test_missing_table_is_store_error(store):
    with pytest.raises(StoreQueryError):
        await store.execute(text("SELECT * FROM no_such_table"))


async def test_row_that_does_not_fit_the_record_is_store_error(store):
    class NeedsEmail(BaseModel):
        id: str
        email: str

    with pytest.raises(StoreQueryError, match="NeedsEmail"):
        await store.fetch_all(select(Customer.id, Customer.name), NeedsEmail)


def test_invoice_constraints_keep_declared_names():
    names = {c.name for c in Invoice.__table__.constraints if c.name}
    assert {"amount_non_negative", "status_valid"} <= names
