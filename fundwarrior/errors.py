"""Exceptions raised by the fund store.

All errors derive from FundError so the CLI layer can catch them in one place.
"""

from pathlib import Path


class FundError(Exception):
    """Base class for fund store errors."""


class FundNotFoundError(FundError):
    """A lookup or mutation targeted a fund name that does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"fund '{name}' not found")


class DuplicateFundError(FundError):
    """An insert or rename targeted a fund name that is already in use."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"fund '{name}' already exists. Please choose a different name")


class InvalidFundNameError(FundError):
    """A fund name that cannot be stored in the fund file."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid fund name {name!r}: names must be non-blank and contain no ':' or newline")


class FundParseError(FundError):
    """The fund file does not follow the name:amount:goal format."""

    def __init__(self, path: Path, detail: str, line: int | None = None) -> None:
        self.path = path
        self.detail = detail
        self.line = line
        location = f"{path}:{line}" if line is not None else str(path)
        super().__init__(f"while parsing {location}: {detail}")


class FundIOError(FundError):
    """The filesystem refused to create, read or write the fund file."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")
