"""
TimeWindowResolver -- calendar days as inclusive instant windows.

Responsibility:
    Maps calendar days to the ``[start, end]`` pair of instants that bound
    them at a fixed UTC offset, and enumerates the days of a date range.
    Every reconciliation query is filtered with ``start <= date <= end``
    (inclusive on both bounds).

Architecture position:
    Kernel > Domain -- pure, zero I/O.  The offset is injected (from
    configuration) rather than read from the host timezone, so results do
    not depend on where the process runs or on the timezone the caller's
    values carry.

Invariants enforced:
    - ``end`` is the last representable microsecond before the next day's
      ``start``; an instant at the next day's midnight is never inside.
    - ``day_sequence`` is strictly ascending, duplicate-free and empty when
      the end precedes the start (no implicit swap).
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone
from typing import NamedTuple

DEFAULT_UTC_OFFSET = "+05:30"

DETAIL_LABEL_FORMAT = "%d/%m/%Y"
SUMMARY_LABEL_FORMAT = "%d %b %Y"

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")
_ONE_DAY = timedelta(days=1)
_ONE_MICROSECOND = timedelta(microseconds=1)


def parse_utc_offset(value: str) -> timedelta:
    """
    Parse an offset such as ``+05:30``, ``-0800`` or ``Z``.

    Raises:
        ValueError: if the string is not an offset within +/-14:00.
    """
    if value in ("Z", "z"):
        return timedelta(0)
    match = _OFFSET_RE.match(value.strip())
    if match is None:
        raise ValueError(f"Invalid UTC offset: {value!r}")
    sign, hours, minutes = match.groups()
    if int(minutes) >= 60:
        raise ValueError(f"Invalid UTC offset minutes: {value!r}")
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    if delta > timedelta(hours=14):
        raise ValueError(f"UTC offset out of range: {value!r}")
    return -delta if sign == "-" else delta


class DayWindow(NamedTuple):
    """Inclusive instant bounds of one calendar day."""

    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end


class TimeWindowResolver:
    """
    Resolves calendar days at a fixed UTC offset.

    Contract:
        Accepts ``date`` objects, aware or naive ``datetime`` objects (naive
        values are taken as UTC) and ``YYYY-MM-DD`` strings wherever a day
        is expected.

    Guarantees:
        - Returned instants are timezone-aware at the resolver's offset.
    """

    def __init__(self, utc_offset: timedelta | str = DEFAULT_UTC_OFFSET):
        if isinstance(utc_offset, str):
            utc_offset = parse_utc_offset(utc_offset)
        self._tz = timezone(utc_offset)

    @property
    def tz(self) -> timezone:
        return self._tz

    @property
    def utc_offset(self) -> timedelta:
        return self._tz.utcoffset(None)

    def calendar_day(self, value: date | datetime | str) -> date:
        """Calendar day of ``value`` as observed at the resolver's offset."""
        if isinstance(value, str):
            if len(value) == 10:
                return date.fromisoformat(value)
            value = datetime.fromisoformat(value)
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value.astimezone(self._tz).date()
        return value

    def day_window(self, value: date | datetime | str) -> DayWindow:
        """First and last instant of the calendar day containing ``value``."""
        day = self.calendar_day(value)
        start = datetime.combine(day, time.min, tzinfo=self._tz)
        return DayWindow(start, start + _ONE_DAY - _ONE_MICROSECOND)

    def span_window(
        self,
        first: date | datetime | str,
        last: date | datetime | str,
    ) -> DayWindow:
        """Window from the start of ``first`` to the end of ``last``."""
        return DayWindow(self.day_window(first).start, self.day_window(last).end)

    def day_sequence(
        self,
        start: date | datetime | str,
        end: date | datetime | str,
    ) -> list[date]:
        """Every calendar day from ``start`` to ``end`` inclusive."""
        current = self.calendar_day(start)
        last = self.calendar_day(end)
        days: list[date] = []
        while current <= last:
            days.append(current)
            current += _ONE_DAY
        return days

    def format_label(
        self,
        value: date | datetime | str,
        pattern: str = DETAIL_LABEL_FORMAT,
    ) -> str:
        return self.calendar_day(value).strftime(pattern)


def last_day_of_month(day: date) -> date:
    if day.month == 12:
        return date(day.year, 12, 31)
    return date(day.year, day.month + 1, 1) - _ONE_DAY


def add_months(day: date, months: int) -> date:
    """First day of the month ``months`` away from ``day``'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)
