"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from gas.domain.exceptions import ValidationError

ZERO = Decimal("0")
HUNDRED = Decimal("100")

_CURRENCY_SYMBOLS = {"EUR": "€"}


def to_decimal(raw: str | float | int | Decimal | None, field_name: str = "value") -> Decimal:
    """Coerce user or storage input to Decimal; None and "" become zero."""
    if raw is None or raw == "":
        return ZERO
    try:
        value = Decimal(str(raw))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {field_name}: {raw!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid {field_name}: {raw!r}")
    return value


def parse_percentage(raw: str | float | int | Decimal | None) -> Decimal | None:
    """Parse a discount percentage given at an input boundary.

    Returns None when no discount was given. Anything outside [0, 100]
    is rejected here, so the pricing functions can stay unchecked.
    """
    if raw is None or raw == "":
        return None
    percent = to_decimal(raw, "percentage")
    if percent < ZERO or percent > HUNDRED:
        raise ValidationError(f"Percentage must be between 0 and 100, got {percent}")
    return percent


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "EUR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < ZERO:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    @property
    def is_zero(self) -> bool:
        return self.amount == ZERO

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        symbol = _CURRENCY_SYMBOLS.get(self.currency, self.currency)
        return f"{self.amount:.2f} {symbol}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive booked quantity.

    Booked quantities are Decimal because products sold by weight or
    volume can be booked in fractions of their measure unit.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            object.__setattr__(self, "value", Decimal(self.value))
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Quantity must be a Decimal, got {type(self.value).__name__}"
            )
        if not self.value.is_finite():
            raise ValidationError(f"Quantity must be finite, got {self.value}")
        if self.value <= ZERO:
            raise ValidationError("Quantity must be positive")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(raw: str | int | Decimal) -> Quantity:
        return Quantity(to_decimal(raw, "quantity"))


# ---------------------------------------------------------------------------
# Read-only references to collaborators managed elsewhere in the catalog
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Measure:
    """Unit a product is measured in (kg, l, piece...)."""

    id: str
    name: str


@dataclass(frozen=True)
class Category:
    id: str
    name: str


@dataclass(frozen=True)
class Supplier:
    id: str
    name: str
