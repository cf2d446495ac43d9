from .channel import ChannelClosedError, LineChannel
from .pipeline import pump, run_pipeline

# Kernel exports are minimal and runtime-focused.
__all__ = ["ChannelClosedError", "LineChannel", "pump", "run_pipeline"]
