from __future__ import annotations

from dataclasses import dataclass

from load_velocity.domain.messages import Decision, LoadAttempt
from load_velocity.domain.windows import ValidationWindows


# Step-to-step messages live in usecases to keep the domain package minimal.
@dataclass(frozen=True, slots=True)
class AttemptWithWindows:
    # Produced by ComputeWindows: the attempt plus its day/week bounds.
    attempt: LoadAttempt
    windows: ValidationWindows


@dataclass(frozen=True, slots=True)
class EvaluatedAttempt:
    # Produced by EvaluateLimits; UpdateHistory needs the full attempt to store it.
    attempt: LoadAttempt
    accepted: bool


@dataclass(frozen=True, slots=True)
class OutputLine:
    # Produced by FormatOutput.
    line_no: int
    json_text: str
    decision: Decision
