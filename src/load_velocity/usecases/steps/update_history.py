from __future__ import annotations

from dataclasses import dataclass

from load_velocity.domain.messages import Decision
from load_velocity.ports.load_history import LoadHistoryWritePort
from load_velocity.usecases.messages import EvaluatedAttempt


@dataclass(frozen=True, slots=True)
class UpdateHistory:
    # Only accepted loads are stored; rejected ones never count toward later windows.
    history: LoadHistoryWritePort

    def __call__(self, msg: EvaluatedAttempt) -> list[Decision]:
        if msg.accepted:
            self.history.append(msg.attempt)
        attempt = msg.attempt
        return [
            Decision(
                line_no=attempt.line_no,
                id=attempt.id,
                customer_id=attempt.customer_id,
                accepted=msg.accepted,
            )
        ]
