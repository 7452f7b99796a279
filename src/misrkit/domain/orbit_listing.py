# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Per-path orbit listings assembled from an orbit catalog.

assemble_orbit_listing() normalizes the query, then asks the catalog once
per path in ascending path order. Orbit order within a path is the order
the catalog reports. A failure for any path aborts the whole listing.
"""
import logging
from dataclasses import dataclass
from typing import Any, Iterator

from misrkit.ports.orbit_catalog import OrbitCatalog

from .codec import encode_orbit, encode_path
from .errors import AdapterError, InvalidRange, MissingArgument
from .identifiers import OrbitId, PathId, validate_orbit
from .time_range import DateRange, PathRange, normalize_range

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathOrbits:
    """Orbits reported for one path."""
    path: PathId
    orbits: tuple[OrbitId, ...]

    @property
    def count(self) -> int:
        return len(self.orbits)


@dataclass(frozen=True)
class OrbitListing:
    """Orbits per path for a normalized path range and date range."""
    path_range: PathRange
    date_range: DateRange
    entries: tuple[PathOrbits, ...]

    def __getitem__(self, path) -> PathOrbits:
        number = int(path)
        for entry in self.entries:
            if entry.path.value == number:
                return entry
        raise KeyError(path)

    def __contains__(self, path) -> bool:
        return any(entry.path.value == int(path) for entry in self.entries)

    def __iter__(self) -> Iterator[PathId]:
        return (entry.path for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def counts(self) -> dict[int, int]:
        """Orbit count per path number."""
        return {entry.path.value: entry.count for entry in self.entries}

    @property
    def total_count(self) -> int:
        return sum(entry.count for entry in self.entries)

    def as_dict(self) -> dict[str, Any]:
        """JSON-ready form keyed by canonical path strings."""
        return {
            "start_time": self.date_range.start_timestamp,
            "end_time": self.date_range.end_timestamp,
            "start_clamped": self.date_range.clamped,
            "paths": {
                encode_path(entry.path): {
                    "count": entry.count,
                    "orbits": [encode_orbit(o) for o in entry.orbits],
                }
                for entry in self.entries
            },
        }


def _query_path(
    catalog: OrbitCatalog,
    path: PathId,
    date_range: DateRange,
) -> PathOrbits:
    start = date_range.start_timestamp
    end = date_range.end_timestamp
    _log.debug("Listing orbits for path %d in [%s, %s]", path.value, start, end)

    try:
        reported = catalog.list_orbits(path.value, start, end)
    except AdapterError as e:
        raise e.for_path(path.value) from e
    except ConnectionError as e:
        raise AdapterError(str(e), path=path.value, status=type(e).__name__) from e

    try:
        orbits = tuple(validate_orbit(o) for o in reported)
    except (InvalidRange, TypeError) as e:
        raise AdapterError(
            f"catalog reported an invalid orbit: {e}",
            path=path.value,
        ) from e

    return PathOrbits(path=path, orbits=orbits)


def assemble_orbit_listing(
    catalog: OrbitCatalog,
    path_1,
    path_2,
    date_1,
    date_2,
) -> OrbitListing:
    """
    Normalize a path/date query and list the orbits of every path in range.

    Args:
        catalog: Orbit catalog adapter.
        path_1, path_2: Path bounds in either order (int, PathId or string).
        date_1, date_2: YYYY-MM-DD dates in either order.

    Returns:
        OrbitListing with one entry per path, ascending.

    Raises:
        MissingArgument: If catalog or any bound is None.
        InvalidRange, DecodeError, MalformedDate: On invalid input, before
            the catalog is called.
        AdapterError: If the catalog fails for any path; path names it.
    """
    if catalog is None:
        raise MissingArgument("catalog")

    path_range, date_range = normalize_range(path_1, path_2, date_1, date_2)

    entries = tuple(_query_path(catalog, path, date_range) for path in path_range)
    return OrbitListing(path_range=path_range, date_range=date_range, entries=entries)
