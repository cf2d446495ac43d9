from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from load_velocity.domain.messages import RawLine
from load_velocity.ports.input_source import InputSource


@dataclass(frozen=True, slots=True)
class FileInputSource(InputSource):
    # File-based InputSource adapter.
    path: Path
    encoding: str = "utf-8"

    def read(self) -> Iterable[RawLine]:
        # File is streamed line-by-line to avoid loading the whole file.
        with self.path.open("r", encoding=self.encoding) as handle:
            for idx, line in enumerate(handle, start=1):
                yield RawLine(line_no=idx, raw_text=line.rstrip("\r\n"))
