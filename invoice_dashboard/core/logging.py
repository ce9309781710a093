from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Optional, Union

from invoice_dashboard.core.settings import get_app_settings


# Name of the fetch operation currently running, for enriched logging
operation_var: ContextVar[Optional[str]] = ContextVar("operation", default=None)


class LoggingContextFilter(logging.Filter):
    """
    Logging filter that injects the current fetch operation from contextvars
    into each log record so formatters can include it.

    If no operation is active, a placeholder is used.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        op = operation_var.get()
        setattr(record, "operation", op or "-")
        return True


# PUBLIC_INTERFACE
def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging with a structured format and context filter.

    The level defaults to the LOG_LEVEL setting.
    """
    if level is None:
        level = get_app_settings().LOG_LEVEL
    handler = logging.StreamHandler(stream=sys.stdout)
    fmt = "%(asctime)s | %(levelname)s | %(name)s | op=%(operation)s | %(message)s"
    formatter = logging.Formatter(fmt=fmt)
    handler.setFormatter(formatter)
    handler.addFilter(LoggingContextFilter())

    root = logging.getLogger()
    # Remove pre-existing default handlers configured elsewhere (e.g., basicConfig)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)
