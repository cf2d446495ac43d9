from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .money import Money


@dataclass(frozen=True, slots=True)
class RawLine:
    # line_no is 1-based and preserves input order for error reporting.
    line_no: int
    raw_text: str


@dataclass(frozen=True, slots=True)
class LoadAttempt:
    # Immutable once decoded; history stores these instances as-is.
    line_no: int
    id: str
    customer_id: str
    amount: Money
    ts: datetime

    @property
    def identity(self) -> tuple[str, str]:
        # Load ids are unique only per customer.
        return (self.id, self.customer_id)


@dataclass(frozen=True, slots=True)
class Decision:
    line_no: int
    id: str
    customer_id: str
    accepted: bool
