"""Locale-bound price formatting.

A deliberately small stand-in for a full CLDR engine: each supported locale
knows its separators and where the currency symbol goes, and each supported
currency knows its symbol. Anything else is a LocalizationError.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .errors import LocalizationError, errmsg
from .legacy import Amount

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "PLN": "zł",
    "CHF": "CHF",
    "CAD": "CA$",
    "AUD": "A$",
}

# Currencies with no minor unit.
ZERO_DECIMAL_CURRENCIES = {"JPY"}


@dataclass(frozen=True)
class LocaleSpec:
    """Number and currency layout of one locale.

    ``pattern`` receives ``{symbol}`` and ``{number}``.
    """

    decimal_separator: str
    group_separator: str
    pattern: str


# Group and symbol separators are no-break spaces, as in CLDR data.
LOCALES = {
    "en-US": LocaleSpec(".", ",", "{symbol}{number}"),
    "en-GB": LocaleSpec(".", ",", "{symbol}{number}"),
    "fr-FR": LocaleSpec(",", "\u202f", "{number}\xa0{symbol}"),
    "de-DE": LocaleSpec(",", ".", "{number}\xa0{symbol}"),
    "pl-PL": LocaleSpec(",", "\xa0", "{number}\xa0{symbol}"),
}


class LocalePriceFormatter:
    """Formats prices for a fixed locale.

    Rounds half-up to the currency's minor unit, groups thousands and puts
    the minus sign in front of the whole formatted value.
    """

    def __init__(self, locale: str = "en-US"):
        if locale not in LOCALES:
            raise LocalizationError(errmsg.UNKNOWN_LOCALE.format(locale=locale))
        self.locale = locale
        self._spec = LOCALES[locale]

    def format_price(self, amount: Amount, currency_code: str) -> str:
        code = (currency_code or "").upper()
        symbol = CURRENCY_SYMBOLS.get(code)
        if symbol is None:
            raise LocalizationError(errmsg.UNKNOWN_CURRENCY.format(code=currency_code))

        value = self._to_decimal(amount)
        digits = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
        quantum = Decimal(1).scaleb(-digits)
        value = value.quantize(quantum, rounding=ROUND_HALF_UP)

        number = self._format_number(abs(value), digits)
        formatted = self._spec.pattern.format(symbol=symbol, number=number)
        return f"-{formatted}" if value < 0 else formatted

    def _to_decimal(self, amount: Amount) -> Decimal:
        if isinstance(amount, bool):
            raise LocalizationError(errmsg.INVALID_AMOUNT.format(amount=amount))
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as e:
            raise LocalizationError(errmsg.INVALID_AMOUNT.format(amount=amount), e) from e
        if not value.is_finite():
            raise LocalizationError(errmsg.INVALID_AMOUNT.format(amount=amount))
        return value

    def _format_number(self, value: Decimal, digits: int) -> str:
        integer, _, fraction = f"{value:.{digits}f}".partition(".")

        groups = []
        while len(integer) > 3:
            groups.insert(0, integer[-3:])
            integer = integer[:-3]
        groups.insert(0, integer)

        number = self._spec.group_separator.join(groups)
        if digits:
            number += self._spec.decimal_separator + fraction
        return number
