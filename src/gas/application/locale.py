"""Display conventions for catalog strings."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from gas.domain.exceptions import ValidationError


@dataclass(frozen=True)
class CatalogLocale:
    code: str
    currency_symbol: str
    decimal_separator: str
    portion_prefix: str
    transport_label: str
    variable_price_note: str
    minimum_label: str
    maximum_label: str
    available_label: str
    total_label: str
    multiple_label: str

    def number(self, value: Decimal) -> str:
        """Two-decimal rendering with this locale's separator."""
        text = f"{value:.2f}"
        if self.decimal_separator != ".":
            text = text.replace(".", self.decimal_separator)
        return text

    def amount(self, value: Decimal) -> str:
        return f"{self.number(value)} {self.currency_symbol}"


ITALIAN = CatalogLocale(
    code="it",
    currency_symbol="€",
    decimal_separator=",",
    portion_prefix="Pezzi da",
    transport_label="trasporto",
    variable_price_note="(prodotto a prezzo variabile)",
    minimum_label="Minimo",
    maximum_label="Massimo Consigliato",
    available_label="Disponibile",
    total_label="totale",
    multiple_label="Multiplo",
)

ENGLISH = CatalogLocale(
    code="en",
    currency_symbol="€",
    decimal_separator=".",
    portion_prefix="Pieces of",
    transport_label="transport",
    variable_price_note="(variable price product)",
    minimum_label="Minimum",
    maximum_label="Suggested Maximum",
    available_label="Available",
    total_label="total",
    multiple_label="Multiple",
)

_LOCALES = {locale.code: locale for locale in (ITALIAN, ENGLISH)}


def get_locale(code: str) -> CatalogLocale:
    try:
        return _LOCALES[code.lower()]
    except KeyError:
        raise ValidationError(
            f"Unsupported locale '{code}' (expected one of: {', '.join(sorted(_LOCALES))})"
        ) from None
