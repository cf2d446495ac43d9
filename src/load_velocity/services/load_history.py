from __future__ import annotations

from dataclasses import dataclass, field

from load_velocity.domain.messages import LoadAttempt
from load_velocity.domain.money import ZERO_USD
from load_velocity.domain.windows import ValidationWindows
from load_velocity.ports.load_history import LoadHistoryReadPort, LoadHistoryWritePort, WindowSnapshot


@dataclass
class InMemoryLoadHistory(LoadHistoryReadPort, LoadHistoryWritePort):
    # Accepted loads per customer, in arrival order. Never pruned within a run.
    _loads: dict[str, list[LoadAttempt]] = field(default_factory=dict)

    def read_snapshot(self, *, customer_id: str, windows: ValidationWindows) -> WindowSnapshot:
        # Linear scan over the customer's history; arrival order is irrelevant here.
        day_count = 0
        day_sum = ZERO_USD
        week_sum = ZERO_USD
        for stored in self._loads.get(customer_id, ()):
            if windows.in_day(stored.ts):
                day_count += 1
                day_sum = day_sum + stored.amount
            if windows.in_week(stored.ts):
                week_sum = week_sum + stored.amount
        return WindowSnapshot(day_count=day_count, day_sum=day_sum, week_sum=week_sum)

    def append(self, attempt: LoadAttempt) -> None:
        # Customer entry is created lazily on the first accepted load.
        self._loads.setdefault(attempt.customer_id, []).append(attempt)

    # Read-only view for reporting and inspection; snapshots are the validation path.
    def loads_for(self, customer_id: str) -> tuple[LoadAttempt, ...]:
        return tuple(self._loads.get(customer_id, ()))

    def customer_count(self) -> int:
        return len(self._loads)
