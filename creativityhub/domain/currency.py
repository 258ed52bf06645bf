"""Currencies supported for budgets, estimates and expenses"""
from decimal import Decimal
from enum import Enum


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    KZT = "KZT"
    RUB = "RUB"
    UAH = "UAH"
    TRY = "TRY"
    AED = "AED"
    SAR = "SAR"
    JPY = "JPY"
    BYN = "BYN"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def format(self, amount: Decimal) -> str:
        return f"{self.symbol}{amount}"


_SYMBOLS = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
    Currency.KZT: "₸",
    Currency.RUB: "₽",
    Currency.UAH: "₴",
    Currency.TRY: "₺",
    Currency.AED: "Dh",
    Currency.SAR: "SR",
    Currency.JPY: "¥",
    Currency.BYN: "Br",
}

DEFAULT_CURRENCY = Currency.USD
