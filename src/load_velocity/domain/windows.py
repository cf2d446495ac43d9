from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, time, timedelta

# Smallest representable step of a Python datetime.
TICK = timedelta(microseconds=1)

# Calendar weeks start on Monday (datetime.weekday() == 0) regardless of locale.
WEEK_START_WEEKDAY = 0


@dataclass(frozen=True, slots=True)
class ValidationWindows:
    """Calendar day and week bounds anchored on one load's timestamp.

    Both windows use exclusive bounds on each side. The lower bounds sit one
    tick before the calendar start so that a load stamped exactly at midnight
    (or Monday midnight) belongs to the period it opens. The upper bounds are
    the first instant of the following day/week.
    """

    day_lower: datetime
    day_upper: datetime
    week_lower: datetime
    week_upper: datetime

    def in_day(self, ts: datetime) -> bool:
        return self.day_lower < ts < self.day_upper

    def in_week(self, ts: datetime) -> bool:
        return self.week_lower < ts < self.week_upper


def start_of_day(ts: datetime) -> datetime:
    utc = ts.astimezone(UTC)
    return datetime.combine(utc.date(), time.min, tzinfo=UTC)


def start_of_week(ts: datetime) -> datetime:
    day = start_of_day(ts)
    delta = (day.weekday() - WEEK_START_WEEKDAY) % 7
    return day - timedelta(days=delta)


def compute_windows(ts: datetime) -> ValidationWindows:
    if ts.tzinfo is None:
        raise ValueError("timestamp must be timezone-aware")
    day_start = start_of_day(ts)
    week_start = start_of_week(ts)
    return ValidationWindows(
        day_lower=day_start - TICK,
        day_upper=day_start + timedelta(days=1),
        week_lower=week_start - TICK,
        week_upper=week_start + timedelta(days=7),
    )
