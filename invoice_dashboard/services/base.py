from __future__ import annotations

from invoice_dashboard.db.store import StoreClient


class BaseService:
    """
    Base class for services. Holds the store client shared by its repositories.

    Services keep formatting and orchestration, delegating statement building
    to repositories.
    """

    def __init__(self, store: StoreClient) -> None:
        self.store = store
