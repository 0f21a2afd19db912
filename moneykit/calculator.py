"""Integer arithmetic on minor-unit amounts.

Division and remainder truncate toward zero, so results keep the sign of
the dividend, as fixed-width integer arithmetic does.
"""

from __future__ import annotations


def truncating_divide(amount: int, divisor: int) -> int:
    """Divide ``amount`` by ``divisor``, truncating the quotient toward zero."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(amount) // abs(divisor)
    return quotient if (amount < 0) == (divisor < 0) else -quotient


def truncating_modulus(amount: int, divisor: int) -> int:
    """Remainder of a truncating division; it carries the sign of ``amount``."""
    return amount - divisor * truncating_divide(amount, divisor)


def allocate(amount: int, ratio: int, total: int) -> int:
    """Share of ``amount`` for ``ratio`` out of ``total``, truncated toward zero."""
    if amount == 0 or total == 0:
        return 0
    return truncating_divide(amount * ratio, total)


def absolute(amount: int) -> int:
    """Absolute value of ``amount``."""
    return -amount if amount < 0 else amount


def negative(amount: int) -> int:
    """``amount`` made non-positive."""
    return -amount if amount > 0 else amount


def round_to_fraction(amount: int, fraction: int) -> int:
    """Round ``amount`` to a whole multiple of ``10 ** fraction``.

    Magnitudes strictly above half a unit round away from zero; exactly half
    or less rounds toward zero.
    """
    if amount == 0:
        return 0
    unit = 10 ** fraction
    magnitude = absolute(amount)
    if magnitude % unit > unit // 2:
        magnitude += unit
    magnitude = (magnitude // unit) * unit
    return -magnitude if amount < 0 else magnitude