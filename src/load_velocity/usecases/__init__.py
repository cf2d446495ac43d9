from .validator import ValidationResult, VelocityValidator
from .wiring import build_validator

__all__ = ["ValidationResult", "VelocityValidator", "build_validator"]
