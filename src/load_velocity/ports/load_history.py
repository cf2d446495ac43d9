from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from load_velocity.domain.messages import LoadAttempt
from load_velocity.domain.money import Money
from load_velocity.domain.windows import ValidationWindows


@dataclass(frozen=True, slots=True)
class WindowSnapshot:
    # Aggregates over previously accepted loads only.
    day_count: int
    day_sum: Money
    week_sum: Money


# LoadHistory ports isolate per-customer accepted history.
@runtime_checkable
class LoadHistoryReadPort(Protocol):
    def read_snapshot(self, *, customer_id: str, windows: ValidationWindows) -> WindowSnapshot:
        """Return day/week aggregates for the customer within the given windows."""
        raise NotImplementedError("LoadHistoryReadPort is a port; use a concrete adapter.")


@runtime_checkable
class LoadHistoryWritePort(Protocol):
    def append(self, attempt: LoadAttempt) -> None:
        """Record an accepted load in its customer's history."""
        raise NotImplementedError("LoadHistoryWritePort is a port; use a concrete adapter.")
