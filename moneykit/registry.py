"""Process-wide table of known currencies and lookups against it."""

from __future__ import annotations

from moneykit.currency import Currencies, Currency, default_currencies

registered_currencies: Currencies = default_currencies()


def add_currency(
    code: str,
    grapheme: str,
    template: str,
    decimal: str,
    thousand: str,
    fraction: int,
) -> Currency:
    """Insert or replace a currency in the shared table and return it."""
    currency = Currency(
        code=code,
        grapheme=grapheme,
        template=template,
        decimal=decimal,
        thousand=thousand,
        fraction=fraction,
    )
    registered_currencies.add(currency)
    return currency


def get_currency(code: str) -> Currency | None:
    """Registered currency for ``code`` (case-insensitive), or ``None``."""
    return registered_currencies.by_code(code.upper())


def get_currency_by_numeric_code(code: str) -> Currency | None:
    """Registered currency with the ISO 4217 numeric ``code``, or ``None``.

    ``code`` is a three-digit string such as ``"840"`` or ``"978"``.
    """
    return registered_currencies.by_numeric_code(code)


def resolve_currency(code: str) -> Currency:
    """Registered currency for ``code``, or a fallback built from the code.

    The code is upper-cased before lookup; the fallback uses it as grapheme.
    """
    normalized = code.upper()
    registered = registered_currencies.by_code(normalized)
    if registered is not None:
        return registered
    return Currency.fallback(normalized)