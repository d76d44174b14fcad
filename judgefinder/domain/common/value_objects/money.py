"""
Money value object.

Amounts are stored as integer minor units (cents) so repeated pricing
arithmetic never drifts. Every arithmetic operation returns a new Money
inside a Result and rounds half-up to the nearest cent.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import StrEnum
from typing import Final

from ..exceptions import ValidationError
from ..result import Err, Ok, Result
from ..value_object import ValueObject


class Currency(StrEnum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


_CURRENCY_SYMBOLS: Final[dict[Currency, str]] = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
}

_CURRENCY_DECIMALS: Final[dict[Currency, int]] = {
    Currency.USD: 2,
    Currency.EUR: 2,
    Currency.GBP: 2,
}

# Upper bound for a single amount, in major units.
MAX_AMOUNT: Final = Decimal("1000000000")

Number = int | float | Decimal


def _to_decimal(value: object) -> Decimal | None:
    """Convert a real number to Decimal, or None when it is not finite."""
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        return None
    try:
        # str() keeps the shortest float repr, so 0.1 stays 0.1
        converted = Decimal(str(value))
    except InvalidOperation:
        return None
    if not converted.is_finite():
        return None
    return converted


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Immutable amount and currency pair.

    Build instances through the factory methods; they validate input and
    return a Result. Negative amounts only appear as the result of
    ``subtract`` and are never valid as a final price.
    """

    cents: int
    currency: Currency = Currency.USD

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError("Money cents must be an integer")
        object.__setattr__(self, "currency", Currency(self.currency))

    @classmethod
    def from_dollars(
        cls, amount: Number, currency: Currency = Currency.USD
    ) -> Result[Money, ValidationError]:
        """Create Money from a major-unit amount, rounding half-up to cents."""
        value = _to_decimal(amount)
        if value is None:
            return Err(
                ValidationError("Amount must be a finite number", {"amount": str(amount)})
            )
        if value < 0:
            return Err(ValidationError("Amount cannot be negative", {"amount": str(amount)}))
        if value > MAX_AMOUNT:
            return Err(
                ValidationError(
                    "Amount exceeds the maximum supported value",
                    {"amount": str(amount), "maximum": str(MAX_AMOUNT)},
                )
            )
        scale = 10 ** _CURRENCY_DECIMALS[Currency(currency)]
        cents = int((value * scale).quantize(Decimal(1), rounding=ROUND_HALF_UP))
        return Ok(cls(cents, currency))

    @classmethod
    def from_cents(
        cls, cents: int, currency: Currency = Currency.USD
    ) -> Result[Money, ValidationError]:
        """Create Money from minor units."""
        if isinstance(cents, bool) or not isinstance(cents, int):
            return Err(
                ValidationError("Amount in cents must be an integer", {"cents": str(cents)})
            )
        if cents < 0:
            return Err(ValidationError("Amount cannot be negative", {"cents": cents}))
        if cents > cls._max_minor_units(Currency(currency)):
            return Err(
                ValidationError("Amount exceeds the maximum supported value", {"cents": cents})
            )
        return Ok(cls(cents, currency))

    @classmethod
    def zero(cls, currency: Currency = Currency.USD) -> Money:
        return cls(0, currency)

    @classmethod
    def sum(
        cls, amounts: Iterable[Money], currency: Currency = Currency.USD
    ) -> Result[Money, ValidationError]:
        """Add up amounts, failing on the first currency mismatch or overflow."""
        total: Result[Money, ValidationError] = Ok(cls.zero(currency))
        for amount in amounts:
            total = total.flat_map(lambda running, amount=amount: running.add(amount))
            if total.is_err:
                return total
        return total

    @property
    def dollars(self) -> Decimal:
        """Amount in major units."""
        return Decimal(self.cents) / self._scale()

    def add(self, other: Money) -> Result[Money, ValidationError]:
        if mismatch := self._currency_mismatch(other, "add"):
            return mismatch
        return self._rounded(Decimal(self.cents + other.cents))

    def subtract(self, other: Money) -> Result[Money, ValidationError]:
        """Subtract another amount. The result may be negative."""
        if mismatch := self._currency_mismatch(other, "subtract"):
            return mismatch
        return self._rounded(Decimal(self.cents - other.cents))

    def multiply(self, factor: Number) -> Result[Money, ValidationError]:
        value = _to_decimal(factor)
        if value is None:
            return Err(ValidationError("Factor must be a finite number", {"factor": str(factor)}))
        if value < 0:
            return Err(ValidationError("Factor cannot be negative", {"factor": str(factor)}))
        return self._rounded(Decimal(self.cents) * value)

    def divide(self, divisor: Number) -> Result[Money, ValidationError]:
        value = _to_decimal(divisor)
        if value is None:
            return Err(
                ValidationError("Divisor must be a finite number", {"divisor": str(divisor)})
            )
        if value == 0:
            return Err(ValidationError("Cannot divide by zero", {"divisor": str(divisor)}))
        if value < 0:
            return Err(ValidationError("Divisor cannot be negative", {"divisor": str(divisor)}))
        return self._rounded(Decimal(self.cents) / value)

    def apply_discount(self, percentage: Number) -> Result[Money, ValidationError]:
        """
        Apply a percentage discount.

        Args:
            percentage: Discount in percent, 15 means 15% off

        Returns:
            ``amount * (1 - percentage / 100)`` rounded half-up to the cent
        """
        value = self._checked_percentage(percentage)
        if isinstance(value, Err):
            return value
        return self._rounded(Decimal(self.cents) * (1 - value / 100))

    def percentage(self, percentage: Number) -> Result[Money, ValidationError]:
        """Return ``percentage`` percent of this amount."""
        value = self._checked_percentage(percentage)
        if isinstance(value, Err):
            return value
        return self._rounded(Decimal(self.cents) * value / 100)

    def is_zero(self) -> bool:
        return self.cents == 0

    def is_positive(self) -> bool:
        return self.cents > 0

    def is_negative(self) -> bool:
        return self.cents < 0

    def __lt__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.cents < other.cents

    def __le__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.cents <= other.cents

    def __gt__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.cents > other.cents

    def __ge__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.cents >= other.cents

    def __str__(self) -> str:
        sign = "-" if self.cents < 0 else ""
        decimals = _CURRENCY_DECIMALS[self.currency]
        return f"{sign}{_CURRENCY_SYMBOLS[self.currency]}{abs(self.dollars):.{decimals}f}"

    def to_formatted_string(self) -> str:
        """Format with the currency symbol and thousands separators, e.g. $20,500.00."""
        sign = "-" if self.cents < 0 else ""
        decimals = _CURRENCY_DECIMALS[self.currency]
        return f"{sign}{_CURRENCY_SYMBOLS[self.currency]}{abs(self.dollars):,.{decimals}f}"

    def to_dict(self) -> dict[str, object]:
        return {
            "amount": float(self.dollars),
            "cents": self.cents,
            "currency": self.currency.value,
            "formatted": self.to_formatted_string(),
        }

    def to_primitive(self) -> dict[str, object]:
        return self.to_dict()

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[Money, ValidationError]:
        raw_currency = data.get("currency", Currency.USD.value)
        try:
            currency = Currency(raw_currency)
        except ValueError:
            return Err(
                ValidationError(
                    f"Unsupported currency: {raw_currency}", {"currency": str(raw_currency)}
                )
            )
        cents = data.get("cents")
        if not isinstance(cents, int):
            return Err(ValidationError("Money record requires integer cents", field="cents"))
        return cls.from_cents(cents, currency)

    def _scale(self) -> int:
        return 10 ** _CURRENCY_DECIMALS[self.currency]

    @staticmethod
    def _max_minor_units(currency: Currency) -> int:
        return int(MAX_AMOUNT) * 10 ** _CURRENCY_DECIMALS[currency]

    def _rounded(self, minor_units: Decimal) -> Result[Money, ValidationError]:
        """Round half-up to whole minor units, rejecting out-of-range results."""
        if abs(minor_units) > self._max_minor_units(self.currency):
            return Err(
                ValidationError(
                    "Money arithmetic overflow",
                    {"currency": self.currency.value, "maximum": str(MAX_AMOUNT)},
                )
            )
        cents = int(minor_units.quantize(Decimal(1), rounding=ROUND_HALF_UP))
        return Ok(Money(cents, self.currency))

    def _currency_mismatch(
        self, other: Money, operation: str
    ) -> Err[ValidationError] | None:
        if self.currency == other.currency:
            return None
        return Err(
            ValidationError(
                f"Cannot {operation} money with different currencies",
                {"this_currency": self.currency.value, "other_currency": other.currency.value},
            )
        )

    @staticmethod
    def _checked_percentage(percentage: Number) -> Decimal | Err[ValidationError]:
        value = _to_decimal(percentage)
        if value is None or value < 0 or value > 100:
            return Err(
                ValidationError(
                    "Percentage must be between 0 and 100", {"percentage": str(percentage)}
                )
            )
        return value

    def _ensure_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError(f"Currency mismatch: {self.currency} vs {other.currency}")
