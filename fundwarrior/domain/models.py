"""Domain type definitions for fundwarrior.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in cents (minor units)
- FundName: Name of a fund, unique within a fund file
"""

from typing import NewType

# Money amounts are stored as cents (minor units) to avoid floating point errors
Money = NewType("Money", int)

# Fund names are matched exactly, case-sensitive
FundName = NewType("FundName", str)
