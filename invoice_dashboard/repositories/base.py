from __future__ import annotations

from invoice_dashboard.db.store import StoreClient

# Escape character for LIKE patterns; avoids backslash quoting differences between dialects.
LIKE_ESCAPE = "!"


# PUBLIC_INTERFACE
def contains_pattern(query: str) -> str:
    """
    Build a LIKE pattern matching ``query`` as a literal substring.

    An empty query yields '%%', which matches every non-null value.
    """
    escaped = (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


class BaseRepository:
    """
    Base class for repositories.

    Repositories only build statements and hand them to the store client,
    which owns connections and row decoding.
    """

    def __init__(self, store: StoreClient) -> None:
        self.store = store
