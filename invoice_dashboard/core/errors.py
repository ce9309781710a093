from __future__ import annotations


class StoreFailure(RuntimeError):
    """
    Domain failure raised by every dashboard fetcher when the relational store
    could not answer.

    Only the coarse, operation-specific message is exposed through ``str()``.
    The underlying store error stays reachable as ``__cause__``.
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
