"""In-memory fund collection and its flat-file persistence.

The fund file holds one fund per line as ``name:amount:goal``, amounts in
cents. A FundManager is loaded once per command, mutated in memory, and
written back with a full rewrite.
"""

import logging
import os
import re
import stat
import tempfile
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from pathlib import Path

from fundwarrior.domain.fund import Fund
from fundwarrior.domain.models import FundName, Money
from fundwarrior.errors import (
    DuplicateFundError,
    FundIOError,
    FundNotFoundError,
    FundParseError,
    InvalidFundNameError,
)

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ":"

_INTEGER_RE = re.compile(r"[+-]?\d+")


def validate_fund_name(name: str) -> FundName:
    """Check that a name can be written to and read back from the fund file.

    Raises:
        InvalidFundNameError: If the name is blank or contains ':' or a newline.
    """
    if not name.strip() or FIELD_SEPARATOR in name or "\n" in name or "\r" in name:
        raise InvalidFundNameError(name)
    return FundName(name)


def format_fund_line(name: str, fund: Fund) -> str:
    """Serialize one fund as a line of the fund file."""
    return f"{name}{FIELD_SEPARATOR}{fund.amount}{FIELD_SEPARATOR}{fund.goal}\n"


def _parse_integer(path: Path, line_number: int, label: str, value: str) -> Money:
    if not _INTEGER_RE.fullmatch(value):
        raise FundParseError(path, f"{label} {value!r} is not an integer", line_number)
    return Money(int(value))


def parse_fund_line(path: Path, line_number: int, line: str) -> tuple[FundName, Fund]:
    """Parse one ``name:amount:goal`` line.

    Fields after the third are ignored.

    Args:
        path: Fund file being read, for error messages.
        line_number: 1-based line number, for error messages.
        line: Line content without its terminator.

    Returns:
        Tuple of (name, fund).

    Raises:
        FundParseError: If the line has fewer than three fields or a
            non-integer amount or goal.
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) < 3:
        raise FundParseError(path, f"expected name:amount:goal, got {line!r}", line_number)

    name, amount, goal = fields[:3]
    return FundName(name), Fund(
        amount=_parse_integer(path, line_number, "amount", amount),
        goal=_parse_integer(path, line_number, "goal", goal),
    )


@dataclass
class FundManager:
    """Named funds with unique, case-sensitive names."""

    funds: dict[FundName, Fund] = field(default_factory=dict)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Fund]]) -> "FundManager":
        """Build a manager from (name, fund) pairs; a later duplicate name wins."""
        return cls({FundName(name): fund for name, fund in pairs})

    @classmethod
    def load(cls, path: Path) -> "FundManager":
        """Load funds from a fund file, creating it empty if it does not exist.

        Args:
            path: Location of the fund file. Missing parent directories are created.

        Returns:
            FundManager holding every fund in the file.

        Raises:
            FundIOError: If the directory or file cannot be created or read.
            FundParseError: If any line does not follow name:amount:goal.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise FundParseError(path, f"not valid UTF-8: {e}") from e
        except OSError as e:
            raise FundIOError(path, e.strerror or str(e)) from e

        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()

        manager = cls.from_pairs(parse_fund_line(path, number, line) for number, line in enumerate(lines, start=1))
        logger.debug("Loaded %d funds from %s", len(manager), path)
        return manager

    def save(self, path: Path) -> None:
        """Write every fund to the fund file, replacing its previous contents.

        The lines go to a temporary file next to the target which is then
        moved over it, so an interrupted save leaves the old file intact. A
        symlinked fund file is followed and its target rewritten, keeping the
        existing file mode.

        Raises:
            FundIOError: If the directory or file cannot be created or written.
        """
        try:
            target = path.resolve()
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
            try:
                if target.exists():
                    os.chmod(tmp_name, stat.S_IMODE(target.stat().st_mode))
                with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                    f.writelines(format_fund_line(name, fund) for name, fund in self)
                os.replace(tmp_name, target)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise FundIOError(path, e.strerror or str(e)) from e

        logger.debug("Saved %d funds to %s", len(self), path)

    def fund(self, name: str) -> Fund:
        """Return a copy of the named fund.

        Raises:
            FundNotFoundError: If no fund has that name.
        """
        return replace(self.fund_mut(name))

    def fund_mut(self, name: str) -> Fund:
        """Return the stored fund itself, so changes to it are kept.

        Raises:
            FundNotFoundError: If no fund has that name.
        """
        try:
            return self.funds[FundName(name)]
        except KeyError:
            raise FundNotFoundError(name) from None

    def add_fund(self, name: str, fund: Fund) -> None:
        """Add a new fund.

        Raises:
            InvalidFundNameError: If the name cannot be stored in the fund file.
            DuplicateFundError: If a fund with that name already exists.
        """
        fund_name = validate_fund_name(name)
        if fund_name in self.funds:
            raise DuplicateFundError(name)
        self.funds[fund_name] = fund
        logger.debug("Added fund %r", name)

    def rename(self, old_name: str, new_name: str) -> None:
        """Move a fund to a new name.

        Every check runs before the fund is moved, so a failed rename leaves
        the manager unchanged. Renaming a fund to its own name does nothing.

        Raises:
            FundNotFoundError: If old_name does not exist.
            InvalidFundNameError: If new_name cannot be stored in the fund file.
            DuplicateFundError: If new_name is already taken.
        """
        fund = self.fund_mut(old_name)
        if new_name == old_name:
            return
        fund_name = validate_fund_name(new_name)
        if fund_name in self.funds:
            raise DuplicateFundError(new_name)

        self.funds[fund_name] = fund
        del self.funds[FundName(old_name)]
        logger.debug("Renamed fund %r to %r", old_name, new_name)

    def transfer(self, from_name: str, to_name: str, amount: int) -> None:
        """Spend from one fund and deposit the same amount into another.

        Raises:
            FundNotFoundError: If either fund is missing. Neither fund is changed.
        """
        source = self.fund_mut(from_name)
        target = self.fund_mut(to_name)
        source.spend(amount)
        target.deposit(amount)
        logger.debug("Transferred %d from %r to %r", amount, from_name, to_name)

    def extend(self, pairs: Iterable[tuple[str, Fund]]) -> None:
        """Merge funds in, keeping existing ones.

        Unlike add_fund, a name that is already present is skipped silently:
        the existing fund is neither replaced nor reported. Every new name is
        validated before any fund is added, so a failed merge changes nothing.

        Raises:
            InvalidFundNameError: If a new name cannot be stored in the fund file.
        """
        pending: dict[FundName, Fund] = {}
        for name, fund in pairs:
            if name in self.funds or name in pending:
                logger.debug("Skipped merging existing fund %r", name)
                continue
            pending[validate_fund_name(name)] = fund

        self.funds.update(pending)

    def names(self) -> list[FundName]:
        """Return fund names in sorted order."""
        return sorted(self.funds)

    def __iter__(self) -> Iterator[tuple[FundName, Fund]]:
        for name in self.names():
            yield name, self.funds[name]

    def __len__(self) -> int:
        return len(self.funds)

    def __contains__(self, name: object) -> bool:
        return name in self.funds
