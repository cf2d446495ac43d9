from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures; every section has defaults.


class LimitsConfig(BaseModel):
    # Velocity limits applied per customer.
    model_config = ConfigDict(extra="forbid")
    daily_amount: Decimal = Field(default=Decimal("5000"), ge=0)
    daily_attempts: int = Field(default=3, ge=0)
    weekly_amount: Decimal = Field(default=Decimal("20000"), ge=0)


class ChannelConfig(BaseModel):
    # Hand-off queue between the line reader thread and the validator; 0 means unbounded.
    model_config = ConfigDict(extra="forbid")
    max_size: int = Field(default=1024, ge=0)


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    atomic_replace: bool = True


class LoggingConfig(BaseModel):
    # Structured log sink selector: only one sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "jsonl"] = "stdout"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    channel: ChannelConfig = Field(default_factory=ChannelConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
