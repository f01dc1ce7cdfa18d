"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, Overflow

from ims.domain.exceptions import ValidationError

# Prices and costs entered by the operator must stay below this.
MAX_AMOUNT = Decimal("1e15")


def format_amount(amount: Decimal) -> str:
    """Render a (possibly negative) amount the way reports show money."""
    return f"${amount:.2f}"


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in cost averaging and profit calculations.  Signed
    results such as profit are plain Decimals, not Money.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(_checked(lambda: self.amount + other.amount))

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(_checked(lambda: self.amount * factor))

    def __truediv__(self, divisor: int) -> Money:
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            raise TypeError(f"Can only divide Money by int, got {type(divisor).__name__}")
        if divisor <= 0:
            raise ValidationError("Money can only be divided by a positive count")
        return Money(_checked(lambda: self.amount / divisor))

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return format_amount(self.amount)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def positive(amount: str | float | int | Decimal) -> Money:
        """Like ``of`` but rejects zero, for selling and purchase prices."""
        money = Money.of(amount)
        if money.amount <= 0:
            raise ValidationError(f"Price must be greater than zero, got {amount!r}")
        if money.amount >= MAX_AMOUNT:
            raise ValidationError(
                f"Amount must be less than {MAX_AMOUNT:f}, got {amount!r}"
            )
        return money

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer count of units.

    Zero is allowed: stock can run out, and a purchase or sale of zero
    units is accepted and simply recorded.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Quantity cannot be negative")


def _checked(compute: Callable[[], Decimal]) -> Decimal:
    try:
        return compute()
    except (Overflow, InvalidOperation) as exc:
        raise ValidationError("Amount is too large to calculate with") from exc
