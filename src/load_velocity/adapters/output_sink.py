from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from load_velocity.ports.output_sink import OutputSink


@dataclass(frozen=True, slots=True)
class FileOutputSink(OutputSink):
    """NDJSON decision file written in one call.

    With ``atomic_replace`` the lines are staged in ``<name>.tmp`` beside the
    target and renamed over it once complete. A failed write removes the
    staging file, so the target keeps its previous content.
    """

    path: Path
    atomic_replace: bool = True
    encoding: str = "utf-8"

    def write_lines(self, lines: Iterable[str]) -> None:
        with self._target() as handle:
            for line in lines:
                handle.write(line + "\n")

    @property
    def staging_path(self) -> Path:
        return self.path.with_name(self.path.name + ".tmp")

    @contextmanager
    def _target(self) -> Iterator[TextIO]:
        if not self.atomic_replace:
            with self.path.open("w", encoding=self.encoding) as handle:
                yield handle
            return

        staging = self.staging_path
        try:
            with staging.open("w", encoding=self.encoding) as handle:
                yield handle
            staging.replace(self.path)
        except BaseException:
            staging.unlink(missing_ok=True)
            raise
