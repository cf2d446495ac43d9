from __future__ import annotations

from enum import Enum


# Stable reason codes attached to every collected LoadError.
class ReasonCode(str, Enum):
    INPUT_PARSE_ERROR = "INPUT_PARSE_ERROR"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"
    INVALID_AMOUNT_FORMAT = "INVALID_AMOUNT_FORMAT"
    OUTPUT_ENCODE_ERROR = "OUTPUT_ENCODE_ERROR"
