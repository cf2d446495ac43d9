from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from load_velocity.ports.load_history import LoadHistoryReadPort
from load_velocity.usecases.messages import AttemptWithWindows, EvaluatedAttempt


@dataclass(frozen=True, slots=True)
class EvaluateLimits:
    """Apply the three velocity limits to one attempt.

    All rules must pass for acceptance; only the combined outcome is reported.
    The count rule compares the number of *prior* accepted loads that day, so
    with ``daily_attempt_limit=3`` the third load of a day can still pass.
    """

    history: LoadHistoryReadPort
    daily_amount_limit: Decimal = Decimal("5000")
    daily_attempt_limit: int = 3
    weekly_amount_limit: Decimal = Decimal("20000")

    def __call__(self, msg: AttemptWithWindows) -> list[EvaluatedAttempt]:
        attempt = msg.attempt
        snapshot = self.history.read_snapshot(customer_id=attempt.customer_id, windows=msg.windows)
        amount = attempt.amount.amount

        accepted = (
            snapshot.day_sum.amount + amount <= self.daily_amount_limit
            and snapshot.day_count < self.daily_attempt_limit
            and snapshot.week_sum.amount + amount <= self.weekly_amount_limit
        )
        return [EvaluatedAttempt(attempt=attempt, accepted=accepted)]
