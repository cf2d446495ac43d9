from .compute_windows import ComputeWindows
from .decode_load import DecodeLoad
from .evaluate_limits import EvaluateLimits
from .format_output import FormatOutput
from .idempotency_gate import IdempotencyGate
from .update_history import UpdateHistory

__all__ = [
    "ComputeWindows",
    "DecodeLoad",
    "EvaluateLimits",
    "FormatOutput",
    "IdempotencyGate",
    "UpdateHistory",
]
