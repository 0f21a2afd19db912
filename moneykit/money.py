"""Monetary values held in minor units, with currency-aware arithmetic."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass

from moneykit import calculator, registry
from moneykit.currency import Currency

_MAX_INT64 = 2**63 - 1


class CurrencyMismatchError(ValueError):
    """Raised when two amounts in different currencies are combined or compared."""

    def __init__(self, message: str = "currencies don't match") -> None:
        super().__init__(message)


class InvalidJSONError(ValueError):
    """Raised when a JSON document does not describe a money value."""

    def __init__(self, message: str = "invalid json unmarshal") -> None:
        super().__init__(message)


def _current(currency: Currency) -> Currency:
    """The registered entry for the currency's code, or its fallback."""
    registered = registry.registered_currencies.by_code(currency.code)
    if registered is not None:
        return registered
    return Currency.fallback(currency.code)


def _round_half_away_from_zero(value: float) -> int:
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return whole


@dataclass(frozen=True)
class Money:
    """An amount in minor units of a currency.

    ``currency`` may be given as a code, which is resolved against the
    registered currencies (case-insensitive; unknown codes get a fallback).
    ``Money()`` is the empty value: zero with no currency.
    """

    amount: int = 0
    currency: Currency | None = None

    def __post_init__(self) -> None:
        if isinstance(self.currency, str):
            object.__setattr__(self, "currency", registry.resolve_currency(self.currency))

    def __hash__(self) -> int:
        code = None if self.currency is None else self.currency.code
        return hash((self.amount, code))

    @classmethod
    def from_float(cls, amount: float, code: str) -> Money:
        """Money from a major-unit float, dropping extra decimals toward zero."""
        currency = registry.resolve_currency(code)
        return cls(int(amount * 10.0**currency.fraction), currency)

    @classmethod
    def from_float_with_round(cls, amount: float, code: str) -> Money:
        """Money from a major-unit float, rounding half away from zero."""
        currency = registry.resolve_currency(code)
        return cls(_round_half_away_from_zero(amount * 10.0**currency.fraction), currency)

    def _with_amount(self, amount: int) -> Money:
        return Money(amount, self.currency)

    def same_currency(self, other: Money) -> bool:
        """Whether ``other`` has the same currency code."""
        return self.currency.code == other.currency.code

    def _require_same_currency(self, other: Money) -> None:
        if not self.same_currency(other):
            raise CurrencyMismatchError()

    def _sign_against(self, other: Money) -> int:
        return (self.amount > other.amount) - (self.amount < other.amount)

    def equals(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self._sign_against(other) == 0

    def greater_than(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self._sign_against(other) == 1

    def greater_than_or_equal(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self._sign_against(other) >= 0

    def less_than(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self._sign_against(other) == -1

    def less_than_or_equal(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self._sign_against(other) <= 0

    def compare(self, other: Money) -> int:
        """1, 0 or -1 as this amount is above, equal to or below ``other``."""
        self._require_same_currency(other)
        return self._sign_against(other)

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def absolute(self) -> Money:
        return self._with_amount(calculator.absolute(self.amount))

    def negative(self) -> Money:
        return self._with_amount(calculator.negative(self.amount))

    def add(self, *others: Money) -> Money:
        """Sum of this value and ``others``; all must share the currency."""
        if not others:
            return self
        total = 0
        for other in others:
            self._require_same_currency(other)
            total += other.amount
        return self._with_amount(self.amount + total)

    def subtract(self, *others: Money) -> Money:
        """This value minus ``others``; all must share the currency."""
        if not others:
            return self
        total = 0
        for other in others:
            self._require_same_currency(other)
            total += other.amount
        return self._with_amount(self.amount - total)

    def multiply(self, *multipliers: int) -> Money:
        """This value multiplied by every one of ``multipliers``."""
        if not multipliers:
            raise ValueError("at least one multiplier is required to multiply")
        return self._with_amount(self.amount * math.prod(multipliers))

    def round(self) -> Money:
        """Rounded to a whole major unit of the currency."""
        return self._with_amount(calculator.round_to_fraction(self.amount, self.currency.fraction))

    def split(self, parts: int) -> list[Money]:
        """Split into ``parts`` shares; leftover minor units go to the first shares."""
        if parts <= 0:
            raise ValueError("split must be higher than zero")
        share = calculator.truncating_divide(self.amount, parts)
        leftover = calculator.absolute(calculator.truncating_modulus(self.amount, parts))
        step = -1 if self.amount < 0 else 1
        amounts = [share + (step if index < leftover else 0) for index in range(parts)]
        return [self._with_amount(amount) for amount in amounts]

    def allocate(self, *ratios: int) -> list[Money]:
        """Split by ``ratios`` without losing minor units.

        Leftover units go one each to the first shares.
        """
        if not ratios:
            raise ValueError("no ratios specified")
        total = 0
        for ratio in ratios:
            if ratio < 0:
                raise ValueError("negative ratios not allowed")
            if ratio > _MAX_INT64 - total:
                raise ValueError("sum of given ratios exceeds max int")
            total += ratio

        amounts = [calculator.allocate(self.amount, ratio, total) for ratio in ratios]
        if total != 0:
            leftover = self.amount - sum(amounts)
            step = -1 if leftover < 0 else 1
            for index in range(abs(leftover)):
                amounts[index] += step
        return [self._with_amount(amount) for amount in amounts]

    def display(self) -> str:
        """Formatted text using the currently registered rules for the currency."""
        return _current(self.currency).formatter().format(self.amount)

    def as_major_units(self) -> float:
        """Value in major units using the currently registered currency rules."""
        return _current(self.currency).formatter().to_major_units(self.amount)

    def to_json(self) -> str:
        """JSON object with ``amount`` and ``currency`` code."""
        code = "" if self.currency is None else self.currency.code
        return json.dumps(
            {"amount": self.amount, "currency": code},
            separators=(",", ":"),
            ensure_ascii=False,
        )

    @classmethod
    def from_json(cls, data: str | bytes) -> Money:
        """Money from a JSON object with ``amount`` and ``currency`` keys.

        A zero amount with an empty or missing currency gives ``Money()``.
        """
        payload = json.loads(data)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise InvalidJSONError()

        amount: float = 0
        if "amount" in payload:
            amount = payload["amount"]
            if isinstance(amount, bool) or not isinstance(amount, (int, float)):
                raise InvalidJSONError()

        code = ""
        if "currency" in payload:
            code = payload["currency"]
            if not isinstance(code, str):
                raise InvalidJSONError()

        if amount == 0 and code == "":
            return cls()
        return cls(int(amount), code)