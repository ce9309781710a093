from __future__ import annotations

CURRENCY_SYMBOL = "$"
MINOR_UNITS_PER_MAJOR = 100


# PUBLIC_INTERFACE
def format_currency(amount: int) -> str:
    """
    Render an amount in cents as a US-dollar display string.

    Examples:
        1234 -> "$12.34"
        123456789 -> "$1,234,567.89"
        -50 -> "-$0.50"
    """
    amount = int(amount)
    sign = "-" if amount < 0 else ""
    major, minor = divmod(abs(amount), MINOR_UNITS_PER_MAJOR)
    return f"{sign}{CURRENCY_SYMBOL}{major:,}.{minor:02d}"


# PUBLIC_INTERFACE
def minor_to_major(amount: int) -> float:
    """Convert cents to dollars for editable form values (1234 -> 12.34)."""
    return int(amount) / MINOR_UNITS_PER_MAJOR
