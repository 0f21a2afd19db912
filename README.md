# moneykit

Monetary amounts held as whole numbers of minor units (cents, pence, fils…)
together with their currency. Arithmetic is done on integers, so splitting
and allocating never lose a minor unit.

## Install

```
pip install moneykit
```

## Creating money

```python
from moneykit.money import Money

pound = Money(100, "GBP")                            # £1.00
price = Money.from_float(12.34, "EUR")               # amount 1234, extra decimals cut toward zero
rounded = Money.from_float_with_round(0.125, "EUR")  # amount 13, half rounds away from zero
```

`Money` is a frozen dataclass with the fields `amount` (an `int` of minor
units) and `currency` (a `moneykit.currency.Currency`). A currency code
passed as a string is looked up case-insensitively. A code that is not
registered still works: it gets two decimal places and displays with the
code itself, so `Money(100, "FOO").display()` gives `"1.00FOO"`.

`Money()` is the empty value: amount zero and no currency.

## Arithmetic

Every operation returns a new `Money`.

```python
two_pounds = pound.add(pound)          # £2.00
pound.subtract(two_pounds).display()   # '-£1.00'
pound.multiply(2, 3).display()         # '£6.00'
Money(-100, "GBP").absolute()          # amount 100
Money(100, "GBP").negative()           # amount -100
Money(175, "EUR").round()              # amount 200
```

`add` and `subtract` take any number of other values; with none they
return the value unchanged. `multiply` needs at least one multiplier and
raises `ValueError` otherwise. `round` rounds to a whole major unit:
remainders above half go away from zero, exactly half or less toward zero.

Combining values in different currencies raises
`moneykit.money.CurrencyMismatchError` (a `ValueError`).

## Comparisons

`equals`, `greater_than`, `greater_than_or_equal`, `less_than`,
`less_than_or_equal` return booleans, and `compare` returns -1, 0 or 1.
All of them raise `CurrencyMismatchError` for different currencies.
`same_currency` tells whether two values share a currency code, and
`is_zero`, `is_positive` and `is_negative` test the sign.

## Splitting without losing pennies

```python
[p.display() for p in Money(100, "GBP").split(3)]
# ['£0.34', '£0.33', '£0.33']

[p.display() for p in Money(100, "GBP").allocate(33, 33, 33)]
# ['£0.34', '£0.33', '£0.33']
```

Leftover minor units go to the first parties, one each. `split` raises
`ValueError` for a count of zero or less; `allocate` raises `ValueError`
when no ratios are given, when a ratio is negative, or when the ratios add
up to more than 2**63 - 1. If all ratios are zero, every share is zero.

## Display

```python
Money(123456789, "EUR").display()         # '€1,234,567.89'
Money(123456789, "EUR").as_major_units()  # 1234567.89
```

Both use the rules currently registered for the currency's code. For
custom output use `moneykit.formatter.Formatter` directly — its fields are
`fraction`, `decimal`, `thousand`, `grapheme` and `template`, where the
template holds `1` for the number and `$` for the grapheme — or call
`Currency.formatter()` to start from a currency's settings.

## Currencies

```python
from moneykit.registry import add_currency, get_currency, get_currency_by_numeric_code

get_currency("usd").grapheme              # '$'
get_currency_by_numeric_code("986").code  # 'BRL'
add_currency("GOLD", "g", "1 $", ".", ",", 3)
```

`get_currency` and `get_currency_by_numeric_code` return `None` for
unknown codes; `resolve_currency` returns the fallback currency instead.
`add_currency` inserts or replaces an entry in the shared table.

`moneykit.currency` holds the built-in ISO 4217 table: `ISO_CODES` lists
its codes, `default_currencies()` returns a fresh `Currencies` collection
of them, and `Currencies` (a `dict` of code to `Currency`) offers
`by_code`, `by_numeric_code` and `add` for collections of your own.

## JSON

```python
Money(12345, "IQD").to_json()   # '{"amount":12345,"currency":"IQD"}'
Money.from_json('{"amount": 10012, "currency": "USD"}').display()  # '$100.12'
```

A zero amount with an empty or missing currency reads back as `Money()`.
A non-numeric amount, a non-string currency or a document that is not an
object raises `moneykit.money.InvalidJSONError` (a `ValueError`).

## Database column values

`moneykit.db` turns values into plain strings and back:

```python
from moneykit.db import money_to_db_value, money_from_db_value

money_to_db_value(Money(10, "CAD"), "|")   # '10|CAD'
money_from_db_value("10|CAD", "|")         # Money with amount 10 in CAD
```

The separator defaults to `DEFAULT_SEPARATOR` (`"|"`). `currency_to_db_value`
and `currency_from_db_value` do the same for a currency on its own, by its
code. Malformed strings, amounts outside the 64-bit range and unknown
currency codes raise `ValueError`; input that is not a string raises
`TypeError`.

## What it does not do

moneykit holds no exchange rates and does not convert between currencies.
`moneykit.db` only produces and parses column strings; it does not connect
to or register itself with any database driver.