"""Rendering minor-unit amounts as currency strings."""

from __future__ import annotations

from dataclasses import dataclass


def _group_thousands(digits: str, separator: str) -> str:
    if not separator:
        return digits
    groups = []
    while len(digits) > 3:
        groups.append(digits[-3:])
        digits = digits[:-3]
    groups.append(digits)
    return separator.join(reversed(groups))


@dataclass
class Formatter:
    """Formatting rules for one currency.

    ``template`` holds ``1`` where the number goes and ``$`` where the
    grapheme goes.
    """

    fraction: int
    decimal: str
    thousand: str
    grapheme: str
    template: str

    def format(self, amount: int) -> str:
        """Render ``amount`` (in minor units) using the template."""
        digits = str(abs(amount)).rjust(self.fraction + 1, "0")
        if self.fraction > 0:
            whole, minor = digits[: -self.fraction], digits[-self.fraction :]
            number = _group_thousands(whole, self.thousand) + self.decimal + minor
        else:
            number = _group_thousands(digits, self.thousand)

        text = self.template.replace("1", number, 1).replace("$", self.grapheme, 1)
        return "-" + text if amount < 0 else text

    def to_major_units(self, amount: int) -> float:
        """Value of ``amount`` in major units as a float."""
        if self.fraction == 0:
            return float(amount)
        return float(amount) / 10.0 ** self.fraction