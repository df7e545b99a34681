"""The Fund value type: a running balance and a goal to save towards."""

from dataclasses import dataclass

from fundwarrior.domain.models import Money
from fundwarrior.domain.money import display_dollars


@dataclass
class Fund:
    """A balance and a goal, both in cents.

    Neither field is range checked: the balance may go negative and the
    goal is not a ceiling.
    """

    amount: Money = Money(0)
    goal: Money = Money(0)

    def deposit(self, amount: int) -> None:
        """Increase the balance. A negative amount acts as a spend."""
        self.amount = Money(self.amount + amount)

    def spend(self, amount: int) -> None:
        """Decrease the balance. A negative amount acts as a deposit."""
        self.amount = Money(self.amount - amount)

    @property
    def remaining(self) -> Money:
        """Amount still needed to reach the goal (negative once exceeded)."""
        return Money(self.goal - self.amount)

    def display(self) -> str:
        """Render balance, goal and distance from goal."""
        return (
            f"{display_dollars(self.amount):^8} / {display_dollars(self.goal):<8} "
            f"-- {display_dollars(self.remaining)} away from goal"
        )

    def __str__(self) -> str:
        return self.display()
