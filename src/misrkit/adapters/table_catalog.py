# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Table-backed orbit catalog: answers queries from a list of orbit records.

Useful offline and in tests. Each record names an orbit, its path and the
UTC time the orbit starts; an optional end time defaults to one nominal
Terra orbit period after the start. Records are held as numpy arrays and
filtered with boolean masks.

Record format (JSON):
    {"orbit": 53000, "path": 168, "start_time": "2010-01-02T10:11:12Z"}
"""
import re
from datetime import datetime, timezone
from typing import Any, Iterable

import numpy as np

from misrkit.adapters.json_io import JsonCatalogReader
from misrkit.domain.errors import AdapterError
from misrkit.domain.identifiers import validate_orbit, validate_path
from misrkit.ports.orbit_catalog import OrbitCatalog

TERRA_ORBIT_PERIOD_MINUTES = 98.88

_QUERY_TIMESTAMP = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}Z")


def _normalize_epoch(epoch_str: str) -> str:
    """Normalize ISO epoch string: replace trailing 'Z' with '+00:00'."""
    if epoch_str.endswith("Z"):
        return epoch_str[:-1] + "+00:00"
    return epoch_str


def _to_datetime64(text: str) -> np.datetime64:
    """ISO-8601 UTC timestamp to numpy seconds (naive input is treated as UTC)."""
    if not isinstance(text, str):
        raise TypeError(f"expected an ISO-8601 string, got {type(text).__name__}")
    dt = datetime.fromisoformat(_normalize_epoch(text.strip()))
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return np.datetime64(dt, "s")


class TableOrbitCatalog(OrbitCatalog):
    """
    Orbit catalog over an in-memory table of orbit records.

    Args:
        records: Iterable of dicts with orbit, path, start_time and an
            optional end_time.
        orbit_period_minutes: Span assumed for records without end_time.

    Raises:
        ValueError: If a record is missing a field, names an invalid orbit
            or path, or ends before it starts. The message gives the row index.
    """

    def __init__(
        self,
        records: Iterable[dict[str, Any]] = (),
        orbit_period_minutes: float = TERRA_ORBIT_PERIOD_MINUTES,
    ):
        if orbit_period_minutes <= 0:
            raise ValueError(
                f"orbit_period_minutes must be positive, got {orbit_period_minutes}"
            )
        self._period = np.timedelta64(int(round(orbit_period_minutes * 60.0)), "s")

        orbits: list[int] = []
        paths: list[int] = []
        starts: list[np.datetime64] = []
        ends: list[np.datetime64] = []

        for row, record in enumerate(records):
            try:
                orbit = validate_orbit(record["orbit"]).value
                path = validate_path(record["path"]).value
                start = _to_datetime64(record["start_time"])
                end_text = record.get("end_time")
                end = _to_datetime64(end_text) if end_text else start + self._period
            except KeyError as e:
                raise ValueError(f"Orbit record {row}: missing field {e}") from e
            except (TypeError, ValueError) as e:
                raise ValueError(f"Orbit record {row}: {e}") from e
            if end < start:
                raise ValueError(f"Orbit record {row}: end_time precedes start_time")

            orbits.append(orbit)
            paths.append(path)
            starts.append(start)
            ends.append(end)

        self._orbits = np.asarray(orbits, dtype=np.int64)
        self._paths = np.asarray(paths, dtype=np.int64)
        self._starts = np.asarray(starts, dtype="datetime64[s]")
        self._ends = np.asarray(ends, dtype="datetime64[s]")

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]], **kwargs) -> "TableOrbitCatalog":
        return cls(records, **kwargs)

    @classmethod
    def from_json(cls, path: str, **kwargs) -> "TableOrbitCatalog":
        """Load records from a JSON list or an object with an "orbits" list."""
        return cls(JsonCatalogReader().read_records(path), **kwargs)

    def __len__(self) -> int:
        return int(self._orbits.size)

    def list_orbits(self, path: int, start: str, end: str) -> list[int]:
        t_start = self._parse_query_time(start, path)
        t_end = self._parse_query_time(end, path)

        mask = (
            (self._paths == int(path))
            & (self._starts <= t_end)
            & (self._ends >= t_start)
        )
        idx = np.flatnonzero(mask)
        idx = idx[np.argsort(self._starts[idx], kind="stable")]
        return [int(o) for o in self._orbits[idx]]

    @staticmethod
    def _parse_query_time(text: str, path: int) -> np.datetime64:
        if not isinstance(text, str) or not _QUERY_TIMESTAMP.fullmatch(text):
            raise AdapterError(
                f"timestamp {text!r} is not YYYY-MM-DDTHH:MM:SSZ",
                path=int(path),
                status="BadTimestamp",
            )
        try:
            return _to_datetime64(text)
        except ValueError as e:
            raise AdapterError(str(e), path=int(path), status="BadTimestamp") from e
