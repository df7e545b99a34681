"""Fund store layer - provides persistence for the application.

This module re-exports the public store API for easy importing.
"""

from fundwarrior.store.manager import (
    FundManager,
    format_fund_line,
    parse_fund_line,
    validate_fund_name,
)

__all__ = [
    "FundManager",
    "format_fund_line",
    "parse_fund_line",
    "validate_fund_name",
]
