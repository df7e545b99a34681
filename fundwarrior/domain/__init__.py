"""Domain models and types for fundwarrior.

This package contains the functional core:
- Fund values and their mutations
- Money formatting and parsing
- No file or console I/O
"""

from fundwarrior.domain.fund import Fund
from fundwarrior.domain.models import FundName, Money
from fundwarrior.domain.money import display_dollars, parse_dollars

__all__ = ["Fund", "FundName", "Money", "display_dollars", "parse_dollars"]
