"""Text encodings of money and currencies for database columns."""

from __future__ import annotations

import dataclasses
import re

from moneykit.currency import Currency
from moneykit.money import Money
from moneykit.registry import get_currency

DEFAULT_SEPARATOR = "|"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def money_to_db_value(money: Money, separator: str = DEFAULT_SEPARATOR) -> str:
    """Encode ``money`` as ``"<amount><separator><currency code>"``."""
    return f"{money.amount}{separator}{money.currency.code}"


def _parse_amount(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"scanning {text!r} into an amount: invalid syntax")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"scanning {text!r} into an amount: value out of range")
    return value


def money_from_db_value(src: object, separator: str = DEFAULT_SEPARATOR) -> Money:
    """Decode a ``"<amount><separator><currency code>"`` string into Money."""
    if not isinstance(src, str):
        raise TypeError(
            f"don't know how to scan {type(src).__name__} into Money; "
            f'expected a pair of "amount{separator}currency_code"'
        )
    parts = src.split(separator)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(
            f'{src!r} is not valid to scan into Money; expected a pair of "amount{separator}currency_code"'
        )
    amount = _parse_amount(parts[0])
    try:
        currency = currency_from_db_value(parts[1])
    except ValueError as error:
        raise ValueError(f"scanning {parts[1]!r} into a Currency: {error}") from error
    return Money(amount, currency)


def currency_to_db_value(currency: Currency) -> str:
    """Encode ``currency`` as its code."""
    return currency.code


def currency_from_db_value(src: object) -> Currency:
    """A copy of the registered currency whose code is ``src``."""
    if not isinstance(src, str):
        raise TypeError(
            f"{type(src).__name__} is not a supported type for a Currency "
            "(store the currency code as a string only)"
        )
    currency = get_currency(src)
    if currency is None:
        raise ValueError(f"unknown currency code {src!r}")
    return dataclasses.replace(currency)