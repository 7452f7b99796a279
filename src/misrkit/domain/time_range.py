# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Path and date range normalization for orbit catalog queries.

A query names two paths and two calendar dates in any order. normalize_range()
validates all four values first and only then orders them, clamps the start
date to the MISR mission epoch and produces the day-bounded timestamps the
orbit catalog expects (YYYY-MM-DDT00:00:00Z .. YYYY-MM-DDT23:59:59Z).

Clamping is a defined normalization, not an error: the returned DateRange
has clamped=True and an INFO record is logged.
"""
import logging
import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import Iterator

from .codec import decode_path
from .errors import DecodeError, MalformedDate, MissingArgument
from .identifiers import PathId, validate_path

_log = logging.getLogger(__name__)

MISSION_EPOCH = date(2000, 2, 24)
"""First day of MISR operational data acquisition."""

START_OF_DAY = time(0, 0, 0)
END_OF_DAY = time(23, 59, 59)

_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_date(text) -> date:
    """
    Parse a YYYY-MM-DD calendar date.

    datetime.date instances are returned unchanged (datetimes are reduced to
    their date). Surrounding whitespace is ignored.

    Raises:
        MalformedDate: If the text does not match YYYY-MM-DD or names a
            day that does not exist.
    """
    if isinstance(text, datetime):
        return text.date()
    if isinstance(text, date):
        return text
    if not isinstance(text, str):
        raise MalformedDate(text, f"expected a string, got {type(text).__name__}")

    match = _DATE_PATTERN.fullmatch(text.strip())
    if match is None:
        raise MalformedDate(text, "expected YYYY-MM-DD")

    year, month, day = (int(g) for g in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise MalformedDate(text, str(e)) from e


def julian_day_number(d: date) -> int:
    """
    Julian Day Number of a calendar date (the JD at noon of that day).

    Gregorian calendar, Meeus, Astronomical Algorithms, Ch. 7.
    julian_day_number(date(2000, 1, 1)) == 2451545.
    """
    y = d.year
    m = d.month
    if m <= 2:
        y -= 1
        m += 12

    a = y // 100
    b = 2 - a + a // 4

    return (math.floor(365.25 * (y + 4716))
            + math.floor(30.6001 * (m + 1))
            + d.day + b - 1524)


def format_timestamp(d: date, t: time) -> str:
    """Catalog timestamp grammar: YYYY-MM-DDTHH:MM:SSZ."""
    return f"{d.isoformat()}T{t.strftime('%H:%M:%S')}Z"


@dataclass(frozen=True)
class PathRange:
    """Ascending, inclusive range of paths."""
    first: PathId
    last: PathId

    def __post_init__(self):
        if self.first > self.last:
            raise ValueError(
                f"PathRange must be ascending, got {self.first.value} > {self.last.value}"
            )

    def __iter__(self) -> Iterator[PathId]:
        for number in range(self.first.value, self.last.value + 1):
            yield PathId.trusted(number)

    def __len__(self) -> int:
        return self.last.value - self.first.value + 1

    def __contains__(self, path) -> bool:
        """Ints, PathId values and any spelling decode_path() accepts."""
        if isinstance(path, str):
            try:
                path = decode_path(path)
            except DecodeError:
                return False
        return self.first.value <= int(path) <= self.last.value


@dataclass(frozen=True)
class DateRange:
    """
    Ascending, inclusive range of whole days on or after the mission epoch.

    clamped records whether the requested start was moved to MISSION_EPOCH.
    The end is only ever moved when the start was too, so clamped also
    covers a range lying entirely before the epoch.
    """
    start: date
    end: date
    clamped: bool = field(default=False)

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(
                f"DateRange must be ascending, got {self.start} > {self.end}"
            )
        if self.start < MISSION_EPOCH:
            raise ValueError(
                f"DateRange start {self.start} precedes mission epoch {MISSION_EPOCH}"
            )

    @property
    def start_time(self) -> datetime:
        return datetime.combine(self.start, START_OF_DAY, tzinfo=timezone.utc)

    @property
    def end_time(self) -> datetime:
        return datetime.combine(self.end, END_OF_DAY, tzinfo=timezone.utc)

    @property
    def start_timestamp(self) -> str:
        return format_timestamp(self.start, START_OF_DAY)

    @property
    def end_timestamp(self) -> str:
        return format_timestamp(self.end, END_OF_DAY)

    @property
    def num_days(self) -> int:
        return julian_day_number(self.end) - julian_day_number(self.start) + 1


def _coerce_path(value) -> PathId:
    if isinstance(value, str):
        return decode_path(value)
    return validate_path(value)


def normalize_range(path_1, path_2, date_1, date_2) -> tuple[PathRange, DateRange]:
    """
    Order, clamp and format a path/date query.

    Paths may be ints, PathId values or any spelling decode_path() accepts.
    Dates may be YYYY-MM-DD strings or datetime.date values.

    Steps:
        1. Validate both paths and parse both dates (nothing is reordered
           until all four values are known to be valid).
        2. Swap the paths if path_1 > path_2.
        3. Swap the dates if date_1 is after date_2 (by Julian Day Number).
        4. Clamp dates preceding MISSION_EPOCH to the epoch.

    Returns:
        (PathRange, DateRange)

    Raises:
        MissingArgument: If any argument is None.
        InvalidRange, DecodeError: If a path is invalid.
        MalformedDate: If a date is not YYYY-MM-DD.
    """
    for name, value in (("path_1", path_1), ("path_2", path_2),
                        ("date_1", date_1), ("date_2", date_2)):
        if value is None:
            raise MissingArgument(name)

    first_path = _coerce_path(path_1)
    last_path = _coerce_path(path_2)
    start = parse_date(date_1)
    end = parse_date(date_2)

    if first_path > last_path:
        first_path, last_path = last_path, first_path

    if julian_day_number(start) > julian_day_number(end):
        start, end = end, start

    clamped = False
    if start < MISSION_EPOCH:
        _log.info(
            "Start date %s precedes mission epoch; clamped to %s",
            start.isoformat(), MISSION_EPOCH.isoformat(),
        )
        start = MISSION_EPOCH
        clamped = True
    if end < MISSION_EPOCH:
        _log.info(
            "End date %s precedes mission epoch; clamped to %s",
            end.isoformat(), MISSION_EPOCH.isoformat(),
        )
        end = MISSION_EPOCH

    return (
        PathRange(first=first_path, last=last_path),
        DateRange(start=start, end=end, clamped=clamped),
    )
