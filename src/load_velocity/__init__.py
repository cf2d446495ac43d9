from load_velocity.usecases import ValidationResult, VelocityValidator, build_validator

__all__ = ["ValidationResult", "VelocityValidator", "build_validator"]
