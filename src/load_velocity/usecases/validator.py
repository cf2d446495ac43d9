from __future__ import annotations

from collections.abc import Iterable
from dataclasses import InitVar, dataclass, field

from load_velocity.domain.errors import LoadError
from load_velocity.domain.messages import RawLine
from load_velocity.services.load_history import InMemoryLoadHistory
from load_velocity.usecases.messages import OutputLine
from load_velocity.usecases.steps import (
    ComputeWindows,
    DecodeLoad,
    EvaluateLimits,
    FormatOutput,
    IdempotencyGate,
    UpdateHistory,
)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    outputs: list[OutputLine]
    errors: list[LoadError]

    @property
    def lines(self) -> list[str]:
        return [item.json_text for item in self.outputs]


@dataclass
class VelocityValidator:
    """Single-pass velocity-limit validator over a stream of raw load lines.

    Owns the accepted-load history and the treated-identity set for one run.
    Instances are not safe for concurrent use; build a fresh one per batch.
    """

    history: InMemoryLoadHistory = field(default_factory=InMemoryLoadHistory)
    gate: IdempotencyGate = field(default_factory=IdempotencyGate)
    evaluate: InitVar[EvaluateLimits | None] = None
    decode: DecodeLoad = field(default_factory=DecodeLoad)
    windows: ComputeWindows = field(default_factory=ComputeWindows)
    fmt: FormatOutput = field(default_factory=FormatOutput)
    limits: EvaluateLimits = field(init=False)

    def __post_init__(self, evaluate: EvaluateLimits | None) -> None:
        # Default limits read from this validator's own history.
        self.limits = evaluate if evaluate is not None else EvaluateLimits(history=self.history)
        self._update = UpdateHistory(history=self.history)

    def process(self, lines: Iterable[RawLine | str]) -> ValidationResult:
        # Errors are collected, never raised: one bad record cannot poison the batch.
        outputs: list[OutputLine] = []
        errors: list[LoadError] = []
        for line_no, item in enumerate(lines, start=1):
            raw = item if isinstance(item, RawLine) else RawLine(line_no=line_no, raw_text=item)
            try:
                outputs.extend(self.process_line(raw))
            except LoadError as exc:
                errors.append(exc)
        return ValidationResult(outputs=outputs, errors=errors)

    def process_line(self, msg: RawLine) -> list[OutputLine]:
        # Depth-first through the steps; an empty list from any step ends the line.
        work: list[object] = [msg]
        for step in (self.decode, self.gate, self.windows, self.limits, self._update, self.fmt):
            next_work: list[object] = []
            for item in work:
                next_work.extend(step(item))
            work = next_work
            if not work:
                return []
        return [item for item in work if isinstance(item, OutputLine)]
