"""Money and Quantity.

Both are frozen dataclasses: two instances with the same fields are the
same value, and construction fails on anything a price or a line count
can never be.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ams.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "INR"

_CENT = Decimal("0.01")
_SYMBOLS = {"INR": "₹"}


@dataclass(frozen=True)
class Money:
    """A non-negative amount in one currency.

    Amounts keep full Decimal precision until ``rounded()`` is called;
    prices and totals are rounded half-up to whole cents at the points
    where the marketplace fixes them (listing, tax, order total).
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount.is_nan() or self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    @staticmethod
    def of(amount: str | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Parse user input such as ``"499.00"``."""
        try:
            return Money(Decimal(str(amount).strip()), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0.00"), currency)

    @staticmethod
    def total(amounts: Iterable[Money], currency: str = DEFAULT_CURRENCY) -> Money:
        result = Money.zero(currency)
        for amount in amounts:
            result = result + amount
        return result

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, units: int) -> Money:
        if not isinstance(units, int) or isinstance(units, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(units).__name__}")
        return Money(self.amount * units, self.currency)

    def percent(self, rate: Decimal) -> Money:
        """``self * rate`` rounded to cents, e.g. tax on a subtotal."""
        return Money(self.amount * rate, self.currency).rounded()

    def rounded(self) -> Money:
        return Money(self.amount.quantize(_CENT, rounding=ROUND_HALF_UP), self.currency)

    def __str__(self) -> str:
        symbol = _SYMBOLS.get(self.currency, f"{self.currency} ")
        return f"{symbol}{self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """Units of one product on an order line, at least one."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
