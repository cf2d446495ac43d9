from .errors import AmountFormatError, DecodeError, EncodeError, LoadError
from .messages import Decision, LoadAttempt, RawLine
from .money import ZERO_USD, Money, parse_money
from .reasons import ReasonCode
from .windows import TICK, ValidationWindows, compute_windows

# Public domain exports keep imports explicit across layers.
__all__ = [
    "AmountFormatError",
    "DecodeError",
    "Decision",
    "EncodeError",
    "LoadAttempt",
    "LoadError",
    "Money",
    "RawLine",
    "ReasonCode",
    "TICK",
    "ValidationWindows",
    "ZERO_USD",
    "compute_windows",
    "parse_money",
]
