"""Currency descriptions and the built-in ISO 4217 currency table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from moneykit.formatter import Formatter


@dataclass
class Currency:
    """Currency information needed for formatting and arithmetic."""

    code: str
    numeric_code: str = ""
    fraction: int = 0
    grapheme: str = ""
    template: str = ""
    decimal: str = ""
    thousand: str = ""

    def formatter(self) -> Formatter:
        """Formatter built from this currency's formatting rules."""
        return Formatter(
            fraction=self.fraction,
            decimal=self.decimal,
            thousand=self.thousand,
            grapheme=self.grapheme,
            template=self.template,
        )

    @classmethod
    def fallback(cls, code: str) -> Currency:
        """Currency used for a code that is not registered.

        The code itself serves as the grapheme.
        """
        return cls(
            code=code,
            fraction=2,
            grapheme=code,
            template="1$",
            decimal=".",
            thousand=",",
        )


class Currencies(dict):
    """Mapping of currency code to :class:`Currency`."""

    def __init__(self, currencies: Iterable[Currency] = ()) -> None:
        super().__init__((currency.code, currency) for currency in currencies)

    def by_code(self, code: str) -> Currency | None:
        """Currency registered under ``code``, or ``None``."""
        return self.get(code)

    def by_numeric_code(self, code: str) -> Currency | None:
        """First currency whose ISO 4217 numeric code is ``code``, or ``None``."""
        return next(
            (currency for currency in self.values() if currency.numeric_code == code),
            None,
        )

    def add(self, currency: Currency) -> Currencies:
        """Insert or replace ``currency``; returns this collection."""
        self[currency.code] = currency
        return self


# code, numeric code, fraction, grapheme, template, decimal, thousand
_TABLE: tuple[tuple[str, str, int, str, str, str, str], ...] = (
    ("AED", "784", 2, ".\u062f.\u0625", "1 $", ".", ","),
    ("AFN", "971", 2, "\u060b", "1 $", ".", ","),
    ("ALL", "008", 2, "L", "$1", ".", ","),
    ("AMD", "051", 2, "\u0564\u0580.", "1 $", ".", ","),
    ("ANG", "532", 2, "\u0192", "$1", ",", "."),
    ("AOA", "973", 2, "Kz", "1$", ".", ","),
    ("ARS", "032", 2, "$", "$1", ",", "."),
    ("AUD", "036", 2, "A$", "$1", ".", ","),
    ("AWG", "533", 2, "\u0192", "1$", ".", ","),
    ("AZN", "944", 2, "\u20bc", "$1", ".", ","),
    ("BAM", "977", 2, "KM", "$1", ".", ","),
    ("BBD", "052", 2, "$", "$1", ".", ","),
    ("BDT", "050", 2, "\u09f3", "$1", ".", ","),
    ("BGN", "975", 2, "\u043b\u0432", "$1", ".", ","),
    ("BHD", "048", 3, ".\u062f.\u0628", "1 $", ".", ","),
    ("BIF", "108", 0, "Fr", "1$", ".", ","),
    ("BMD", "060", 2, "$", "$1", ".", ","),
    ("BND", "096", 2, "$", "$1", ".", ","),
    ("BOB", "068", 2, "Bs.", "$1", ".", ","),
    ("BRL", "986", 2, "R$", "$1", ",", "."),
    ("BSD", "044", 2, "$", "$1", ".", ","),
    ("BTN", "064", 2, "Nu.", "1$", ".", ","),
    ("BWP", "072", 2, "P", "$1", ".", ","),
    ("BYN", "933", 2, "p.", "1 $", ",", " "),
    ("BYR", "", 0, "p.", "1 $", ",", " "),
    ("BZD", "084", 2, "BZ$", "$1", ".", ","),
    ("CAD", "124", 2, "$", "$1", ".", ","),
    ("CDF", "976", 2, "FC", "1$", ".", ","),
    ("CHF", "756", 2, "CHF", "1 $", ".", ","),
    ("CLF", "990", 4, "UF", "$1", ",", "."),
    ("CLP", "152", 0, "$", "$1", ",", "."),
    ("CNY", "156", 2, "\u5143", "1 $", ".", ","),
    ("COP", "170", 2, "$", "$1", ",", "."),
    ("CRC", "188", 2, "\u20a1", "$1", ".", ","),
    ("CUC", "931", 2, "$", "1$", ".", ","),
    ("CUP", "192", 2, "$MN", "$1", ".", ","),
    ("CVE", "132", 2, "$", "1$", ".", ","),
    ("CZK", "203", 2, "K\u010d", "1 $", ".", ","),
    ("DJF", "262", 0, "Fdj", "1 $", ".", ","),
    ("DKK", "208", 2, "kr", "$ 1", ",", "."),
    ("DOP", "214", 2, "RD$", "$1", ".", ","),
    ("DZD", "012", 2, ".\u062f.\u062c", "1 $", ".", ","),
    ("EEK", "", 2, "kr", "$1", ".", ","),
    ("EGP", "818", 2, "\u00a3", "$1", ".", ","),
    ("ERN", "232", 2, "Nfk", "1 $", ".", ","),
    ("ETB", "230", 2, "Br", "1 $", ".", ","),
    ("EUR", "978", 2, "\u20ac", "$1", ".", ","),
    ("FJD", "242", 2, "$", "$1", ".", ","),
    ("FKP", "238", 2, "\u00a3", "$1", ".", ","),
    ("GBP", "826", 2, "\u00a3", "$1", ".", ","),
    ("GEL", "981", 2, "\u10da", "1 $", ".", ","),
    ("GGP", "", 2, "\u00a3", "$1", ".", ","),
    ("GHC", "", 2, "\u00a2", "$1", ".", ","),
    ("GHS", "936", 2, "\u20b5", "$1", ".", ","),
    ("GIP", "292", 2, "\u00a3", "$1", ".", ","),
    ("GMD", "270", 2, "D", "1 $", ".", ","),
    ("GNF", "324", 0, "FG", "1 $", ".", ","),
    ("GTQ", "320", 2, "Q", "$1", ".", ","),
    ("GYD", "328", 2, "$", "$1", ".", ","),
    ("HKD", "344", 2, "HK$", "$1", ".", ","),
    ("HNL", "340", 2, "L", "$1", ".", ","),
    ("HRK", "191", 2, "kn", "1 $", ",", "."),
    ("HTG", "332", 2, "G", "1 $", ",", "."),
    ("HUF", "348", 2, "Ft", "1 $", ",", "."),
    ("IDR", "360", 2, "Rp", "$1", ",", "."),
    ("ILS", "376", 2, "\u20aa", "$1", ".", ","),
    ("IMP", "", 2, "\u00a3", "$1", ".", ","),
    ("INR", "356", 2, "\u20b9", "$1", ".", ","),
    ("IQD", "368", 3, ".\u062f.\u0639", "1 $", ".", ","),
    ("IRR", "364", 2, "\ufdfc", "1 $", ".", ","),
    ("ISK", "352", 0, "kr", "$1", ",", "."),
    ("JEP", "", 2, "\u00a3", "$1", ".", ","),
    ("JMD", "388", 2, "J$", "$1", ".", ","),
    ("JOD", "400", 3, ".\u062f.\u0625", "1 $", ".", ","),
    ("JPY", "392", 0, "\u00a5", "$1", ".", ","),
    ("KES", "404", 2, "KSh", "$1", ".", ","),
    ("KGS", "417", 2, "\u0441\u043e\u043c", "1 $", ".", ","),
    ("KHR", "116", 2, "\u17db", "$1", ".", ","),
    ("KMF", "174", 0, "CF", "$1", ".", ","),
    ("KPW", "408", 2, "\u20a9", "$1", ".", ","),
    ("KRW", "410", 0, "\u20a9", "$1", ".", ","),
    ("KWD", "414", 3, ".\u062f.\u0643", "1 $", ".", ","),
    ("KYD", "136", 2, "$", "$1", ".", ","),
    ("KZT", "398", 2, "\u20b8", "$1", ".", ","),
    ("LAK", "418", 2, "\u20ad", "$1", ".", ","),
    ("LBP", "422", 2, "\u00a3", "$1", ".", ","),
    ("LKR", "144", 2, "\u20a8", "$1", ".", ","),
    ("LRD", "430", 2, "$", "$1", ".", ","),
    ("LSL", "426", 2, "L", "$1", ".", ","),
    ("LTL", "", 2, "Lt", "$1", ".", ","),
    ("LVL", "", 2, "Ls", "1 $", ".", ","),
    ("LYD", "434", 3, ".\u062f.\u0644", "1 $", ".", ","),
    ("MAD", "504", 2, ".\u062f.\u0645", "1 $", ".", ","),
    ("MDL", "498", 2, "lei", "1 $", ".", ","),
    ("MGA", "969", 2, "Ar", "1$", ".", ","),
    ("MKD", "807", 2, "\u0434\u0435\u043d", "$1", ".", ","),
    ("MMK", "104", 2, "K", "$1", ".", ","),
    ("MNT", "496", 2, "\u20ae", "$1", ".", ","),
    ("MOP", "446", 2, "P", "1 $", ".", ","),
    ("MRU", "929", 2, "UM", "$1", ".", ","),
    ("MUR", "480", 2, "\u20a8", "$1", ".", ","),
    ("MVR", "462", 2, "MVR", "1 $", ".", ","),
    ("MWK", "454", 2, "MK", "$1", ".", ","),
    ("MXN", "484", 2, "$", "$1", ".", ","),
    ("MYR", "458", 2, "RM", "$1", ".", ","),
    ("MZN", "943", 2, "MT", "$1", ".", ","),
    ("NAD", "516", 2, "$", "$1", ".", ","),
    ("NGN", "566", 2, "\u20a6", "$1", ".", ","),
    ("NIO", "558", 2, "C$", "$1", ".", ","),
    ("NOK", "578", 2, "kr", "1 $", ".", ","),
    ("NPR", "524", 2, "\u20a8", "$1", ".", ","),
    ("NZD", "554", 2, "$", "$1", ".", ","),
    ("OMR", "512", 3, "\ufdfc", "1 $", ".", ","),
    ("PAB", "590", 2, "B/.", "$1", ".", ","),
    ("PEN", "604", 2, "S/", "$1", ".", ","),
    ("PGK", "598", 2, "K", "1 $", ".", ","),
    ("PHP", "608", 2, "\u20b1", "$1", ".", ","),
    ("PKR", "586", 2, "\u20a8", "$1", ".", ","),
    ("PLN", "985", 2, "z\u0142", "1 $", ".", ","),
    ("PYG", "600", 0, "Gs", "1$", ".", ","),
    ("QAR", "634", 2, "\ufdfc", "1 $", ".", ","),
    ("RON", "946", 2, "lei", "$1", ".", ","),
    ("RSD", "941", 2, "\u0414\u0438\u043d.", "$1", ".", ","),
    ("RUB", "643", 2, "\u20bd", "1 $", ".", ","),
    ("RUR", "", 2, "\u20bd", "1 $", ".", ","),
    ("RWF", "646", 0, "FRw", "1 $", ".", ","),
    ("SAR", "682", 2, "\ufdfc", "1 $", ".", ","),
    ("SBD", "090", 2, "$", "$1", ".", ","),
    ("SCR", "690", 2, "\u20a8", "$1", ".", ","),
    ("SDG", "938", 2, "\u00a3", "$1", ".", ","),
    ("SEK", "752", 2, "kr", "1 $", ".", ","),
    ("SGD", "702", 2, "S$", "$1", ".", ","),
    ("SHP", "654", 2, "\u00a3", "$1", ".", ","),
    ("SKK", "", 2, "Sk", "$1", ".", ","),
    ("SLE", "925", 2, "Le", "1 $", ".", ","),
    ("SLL", "694", 2, "Le", "1 $", ".", ","),
    ("SOS", "706", 2, "Sh", "1 $", ".", ","),
    ("SRD", "968", 2, "$", "$1", ".", ","),
    ("SSP", "728", 2, "\u00a3", "1 $", ".", ","),
    ("STD", "", 2, "Db", "1 $", ".", ","),
    ("STN", "930", 2, "Db", "1 $", ".", ","),
    ("SVC", "222", 2, "\u20a1", "$1", ".", ","),
    ("SYP", "760", 2, "\u00a3", "1 $", ".", ","),
    ("SZL", "748", 2, "\u00a3", "$1", ".", ","),
    ("THB", "764", 2, "\u0e3f", "$1", ".", ","),
    ("TJS", "972", 2, "SM", "1 $", ".", ","),
    ("TMT", "934", 2, "T", "1 $", ".", ","),
    ("TND", "788", 3, ".\u062f.\u062a", "1 $", ".", ","),
    ("TOP", "776", 2, "T$", "$1", ".", ","),
    ("TRL", "", 2, "\u20a4", "$1", ".", ","),
    ("TRY", "949", 2, "\u20ba", "$1", ".", ","),
    ("TTD", "780", 2, "TT$", "$1", ".", ","),
    ("TWD", "901", 2, "NT$", "$1", ".", ","),
    ("TZS", "834", 2, "TSh", "$1", ".", ","),
    ("UAH", "980", 2, "\u20b4", "1 $", ".", ","),
    ("UGX", "800", 0, "USh", "1 $", ".", ","),
    ("USD", "840", 2, "$", "$1", ".", ","),
    ("UYU", "858", 2, "$U", "$1", ".", ","),
    ("UZS", "860", 2, "so\u2019m", "$1", ".", ","),
    ("VEF", "937", 2, "Bs", "$1", ".", ","),
    ("VES", "928", 2, "Bs.S", "$1", ".", ","),
    ("VND", "704", 0, "\u20ab", "1 $", ".", ","),
    ("VUV", "548", 0, "Vt", "$1", ".", ","),
    ("WST", "882", 2, "T", "1 $", ".", ","),
    ("XAF", "950", 0, "Fr", "1 $", ".", ","),
    ("XAG", "961", 0, "oz t", "1 $", ".", ","),
    ("XAU", "959", 0, "oz t", "1 $", ".", ","),
    ("XCD", "951", 2, "$", "$1", ".", ","),
    ("XCG", "532", 2, "Cg", "$1", ",", "."),
    ("XDR", "960", 0, "SDR", "1 $", ".", ","),
    ("XOF", "952", 0, "CFA", "1 $", ".", ","),
    ("XPF", "953", 0, "\u20a3", "1 $", ".", ","),
    ("YER", "886", 2, "\ufdfc", "1 $", ".", ","),
    ("ZAR", "710", 2, "R", "$1", ".", ","),
    ("ZMW", "967", 2, "ZK", "$1", ".", ","),
    ("ZWD", "716", 2, "Z$", "$1", ".", ","),
    ("ZWL", "932", 2, "Z$", "$1", ".", ","),
)

ISO_CODES: tuple[str, ...] = tuple(row[0] for row in _TABLE)


def default_currencies() -> Currencies:
    """A fresh collection holding every built-in currency."""
    return Currencies(
        Currency(
            code=code,
            numeric_code=numeric_code,
            fraction=fraction,
            grapheme=grapheme,
            template=template,
            decimal=decimal,
            thousand=thousand,
        )
        for code, numeric_code, fraction, grapheme, template, decimal, thousand in _TABLE
    )