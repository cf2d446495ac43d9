from .input_source import InputSource
from .load_history import LoadHistoryReadPort, LoadHistoryWritePort, WindowSnapshot
from .log_sink import LogSink
from .output_sink import OutputSink

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "InputSource",
    "LoadHistoryReadPort",
    "LoadHistoryWritePort",
    "LogSink",
    "OutputSink",
    "WindowSnapshot",
]
