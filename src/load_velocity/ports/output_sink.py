from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable


# OutputSink receives every encoded decision of a run at once.
@runtime_checkable
class OutputSink(Protocol):
    def write_lines(self, lines: Iterable[str]) -> None:
        """Persist the already formatted JSON lines, replacing earlier output."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")
