from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .errors import AmountFormatError


@dataclass(frozen=True, slots=True)
class Money:
    currency: str
    amount: Decimal

    def __post_init__(self) -> None:
        # Loads are non-negative by domain rule.
        if self.amount < 0:
            raise ValueError("Money amount must be non-negative")

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValueError("Cannot add Money in different currencies")
        return Money(currency=self.currency, amount=self.amount + other.amount)


ZERO_USD = Money(currency="USD", amount=Decimal("0"))

# Only the dollar-prefixed literal is accepted: "$<digits>" or "$<digits>.<digits>".
CURRENCY_PREFIX = "$"
_AMOUNT_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def parse_money(raw: str, *, currency: str = "USD") -> Money:
    if not isinstance(raw, str):
        raise AmountFormatError(f"load_amount must be a string, got {type(raw).__name__}")

    if not raw.startswith(CURRENCY_PREFIX):
        raise AmountFormatError(f"load_amount {raw!r} lacks the {CURRENCY_PREFIX!r} prefix")

    text = raw[len(CURRENCY_PREFIX):]
    if not _AMOUNT_PATTERN.fullmatch(text):
        raise AmountFormatError(f"load_amount {raw!r} is not a decimal amount")

    try:
        amount = Decimal(text)
    except InvalidOperation as exc:
        raise AmountFormatError(f"load_amount {raw!r} is not a decimal amount") from exc

    return Money(currency=currency, amount=amount)
