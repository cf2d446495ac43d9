from __future__ import annotations

from dataclasses import dataclass

from load_velocity.domain.messages import LoadAttempt
from load_velocity.domain.windows import compute_windows
from load_velocity.usecases.messages import AttemptWithWindows


@dataclass(frozen=True, slots=True)
class ComputeWindows:
    # Windows are anchored on the load's own timestamp, never on wall-clock now.
    def __call__(self, msg: LoadAttempt) -> list[AttemptWithWindows]:
        return [AttemptWithWindows(attempt=msg, windows=compute_windows(msg.ts))]
