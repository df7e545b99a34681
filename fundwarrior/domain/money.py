"""Pure functions for converting between cents and dollar strings.

All arithmetic is integer based; amounts never pass through floats.
"""

import re

from fundwarrior.domain.models import Money

_DOLLARS_RE = re.compile(r"(?P<sign>[+-])?\$?(?P<dollars>\d*)(?:\.(?P<cents>\d{1,2}))?")


def display_dollars(amount: int) -> str:
    """Format an amount in cents as a dollar string.

    Args:
        amount: Amount in cents, may be negative.

    Returns:
        String like "$12.34". Negative amounts put the sign before the
        dollar symbol, e.g. "-$0.05".
    """
    sign = "-" if amount < 0 else ""
    dollars, cents = divmod(abs(amount), 100)
    return f"{sign}${dollars}.{cents:02d}"


def parse_dollars(text: str) -> Money:
    """Parse a user-supplied dollar amount into cents.

    Accepts "12", "12.5", "12.34", "$12.34", "-3.00" and similar.

    Args:
        text: Amount in dollars as typed by the user.

    Returns:
        Amount in cents.

    Raises:
        ValueError: If the text is not a dollar amount with at most two
            decimal places.
    """
    match = _DOLLARS_RE.fullmatch(text.strip())
    if match is None or not (match["dollars"] or match["cents"]):
        raise ValueError(f"'{text}' is not a valid dollar amount")

    dollars = int(match["dollars"] or 0)
    cents = int((match["cents"] or "0").ljust(2, "0"))
    total = dollars * 100 + cents
    return Money(-total if match["sign"] == "-" else total)
