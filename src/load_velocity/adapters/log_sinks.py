from __future__ import annotations

import json
import sys
from pathlib import Path

from load_velocity.observability.logging import LogMessage
from load_velocity.ports.log_sink import LogSink


class StdoutLogSink(LogSink):
    # Prints one compact JSON object per log message.
    def emit(self, message: LogMessage) -> None:
        sys.stdout.write(_encode(message) + "\n")

    def close(self) -> None:
        sys.stdout.flush()


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends so reruns keep earlier history.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_encode(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def build_log_sink(sink: str, path: str | None = None) -> LogSink:
    if sink == "stdout":
        return StdoutLogSink()
    if sink == "jsonl":
        if not path:
            raise ValueError("jsonl log sink requires a path")
        return JsonlLogSink(Path(path))
    raise ValueError(f"Unknown log sink: {sink}")


def _encode(message: LogMessage) -> str:
    return json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }

