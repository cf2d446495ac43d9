from __future__ import annotations

from dataclasses import dataclass, field

from load_velocity.domain.messages import LoadAttempt


@dataclass
class IdempotencyGate:
    # Treated set of (id, customer_id) pairs; entries are never removed.
    _treated: set[tuple[str, str]] = field(default_factory=set)

    def __call__(self, msg: LoadAttempt) -> list[LoadAttempt]:
        key = msg.identity
        if key in self._treated:
            # Replays are dropped silently: no decision, no error, no history change.
            return []
        # Registered before evaluation so the outcome cannot affect deduplication.
        self._treated.add(key)
        return [msg]

    def __len__(self) -> int:
        return len(self._treated)
