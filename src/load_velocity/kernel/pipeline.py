from __future__ import annotations

import threading
from dataclasses import dataclass, field

from load_velocity.domain.messages import RawLine
from load_velocity.kernel.channel import LineChannel
from load_velocity.ports.input_source import InputSource
from load_velocity.usecases.validator import ValidationResult, VelocityValidator


def pump(source: InputSource, channel: LineChannel[RawLine]) -> None:
    # The channel is closed even when reading fails so the consumer never waits forever.
    try:
        for line in source.read():
            channel.send(line)
    finally:
        channel.close()


@dataclass
class _Producer:
    source: InputSource
    channel: LineChannel[RawLine]
    failure: BaseException | None = field(default=None, init=False)

    def __call__(self) -> None:
        try:
            pump(self.source, self.channel)
        except Exception as exc:
            # Surfaced by run_pipeline on the consumer thread.
            self.failure = exc


def run_pipeline(
    source: InputSource,
    validator: VelocityValidator,
    *,
    max_size: int = 0,
) -> ValidationResult:
    """Read ``source`` on a background thread and validate lines as they arrive.

    The validator itself only ever runs on the calling thread. Read failures
    (missing file, bad encoding) are re-raised here after the channel drains.
    """
    channel: LineChannel[RawLine] = LineChannel(max_size=max_size)
    producer = _Producer(source=source, channel=channel)
    thread = threading.Thread(target=producer, name="load-velocity-reader", daemon=True)
    thread.start()
    result = validator.process(channel)
    thread.join()
    if producer.failure is not None:
        raise producer.failure
    return result
