from __future__ import annotations

from load_velocity.config.models import AppConfig
from load_velocity.services.load_history import InMemoryLoadHistory
from load_velocity.usecases.steps import EvaluateLimits
from load_velocity.usecases.validator import VelocityValidator


def build_validator(config: AppConfig | None = None) -> VelocityValidator:
    # Fresh history and treated set per call; limits come from config.limits.
    config = config or AppConfig()
    history = InMemoryLoadHistory()
    limits = config.limits
    evaluate = EvaluateLimits(
        history=history,
        daily_amount_limit=limits.daily_amount,
        daily_attempt_limit=limits.daily_attempts,
        weekly_amount_limit=limits.weekly_amount,
    )
    return VelocityValidator(history=history, evaluate=evaluate)
