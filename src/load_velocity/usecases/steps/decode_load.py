from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from load_velocity.domain.errors import DecodeError, LoadError
from load_velocity.domain.messages import LoadAttempt, RawLine
from load_velocity.domain.money import parse_money
from load_velocity.domain.reasons import ReasonCode
from load_velocity.domain.windows import compute_windows


class _RawLoad(BaseModel):
    # Identities must be JSON strings; load_amount is checked by parse_money.
    id: str
    customer_id: str
    load_amount: Any
    time: str

    model_config = ConfigDict(extra="ignore", strict=True)


class DecodeLoad:
    """Turn one raw NDJSON line into a LoadAttempt.

    Raises DecodeError (or its AmountFormatError subtype) for anything that is
    not a well-formed load record. The error carries the input line number.
    """

    def __call__(self, msg: RawLine) -> list[LoadAttempt]:
        try:
            return [self._decode(msg)]
        except LoadError as exc:
            exc.at_line(msg.line_no)
            raise

    def _decode(self, msg: RawLine) -> LoadAttempt:
        try:
            payload = json.loads(msg.raw_text)
        except json.JSONDecodeError as exc:
            raise DecodeError(ReasonCode.INPUT_PARSE_ERROR, f"invalid JSON: {exc.msg}") from exc
        except RecursionError as exc:
            raise DecodeError(ReasonCode.INPUT_PARSE_ERROR, "JSON nested too deeply") from exc

        if not isinstance(payload, dict):
            raise DecodeError(ReasonCode.INPUT_PARSE_ERROR, "record must be a JSON object")

        try:
            raw = _RawLoad.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(ReasonCode.INPUT_PARSE_ERROR, _summarize(exc)) from exc

        ts = _parse_timestamp(raw.time)
        amount = parse_money(raw.load_amount, currency="USD")

        return LoadAttempt(
            line_no=msg.line_no,
            id=raw.id,
            customer_id=raw.customer_id,
            amount=amount,
            ts=ts,
        )


def _parse_timestamp(value: str) -> datetime:
    # ISO-8601 with an explicit offset, normalized to UTC.
    text = value.strip()
    try:
        ts = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except (ValueError, OverflowError) as exc:
        raise DecodeError(ReasonCode.INVALID_TIMESTAMP, f"invalid timestamp {value!r}") from exc

    if ts.tzinfo is None:
        raise DecodeError(ReasonCode.INVALID_TIMESTAMP, f"timestamp {value!r} has no timezone")

    try:
        utc = ts.astimezone(UTC)
        # Day and week bounds must be representable too, or the load cannot be windowed.
        compute_windows(utc)
    except OverflowError as exc:
        raise DecodeError(ReasonCode.INVALID_TIMESTAMP, f"timestamp {value!r} is out of range") from exc
    return utc


def _summarize(exc: ValidationError) -> str:
    # One "field: problem" pair per schema violation, in pydantic's order.
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "record"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
