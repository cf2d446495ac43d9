from .load_history import InMemoryLoadHistory

__all__ = ["InMemoryLoadHistory"]
