from .logging import LogMessage, error, info

__all__ = ["LogMessage", "error", "info"]
