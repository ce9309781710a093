"""
Data-access layer for the invoices dashboard.

Turns the invoices, customers and revenue tables into the shaped, paginated
and formatted views the presentation layer renders.
"""

__version__ = "0.1.0"
