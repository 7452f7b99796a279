# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
MISR Toolkit adapter: orbit lookups through the MisrToolkit Python bindings.

External dependency (MisrToolkit) is confined to this layer and imported
lazily, so the rest of the package works without the toolkit installed.

Toolkit call:
    MisrToolkit.path_time_range_to_orbit_list(path, start_time, end_time)
    with times as YYYY-MM-DDThh:mm:ssZ.
"""
import logging

from misrkit.domain.errors import AdapterError
from misrkit.ports.orbit_catalog import OrbitCatalog


_log = logging.getLogger(__name__)


def _require_mtk():
    """Import MisrToolkit lazily; raise clear error if not installed."""
    try:
        import MisrToolkit
    except ImportError:
        raise ImportError(
            "MisrToolkit is required for toolkit orbit lookups. "
            "Install the MISR Toolkit Python bindings (pip install misrkit[mtk])"
        ) from None
    return MisrToolkit


class MtkOrbitCatalog(OrbitCatalog):
    """Answers orbit catalog queries with the MISR Toolkit."""

    def __init__(self, toolkit=None):
        self._toolkit = toolkit

    @property
    def toolkit(self):
        if self._toolkit is None:
            self._toolkit = _require_mtk()
        return self._toolkit

    def list_orbits(self, path: int, start: str, end: str) -> list[int]:
        toolkit = self.toolkit
        _log.debug("MtkPathTimeRangeToOrbitList(%d, %s, %s)", path, start, end)
        try:
            orbits = toolkit.path_time_range_to_orbit_list(int(path), start, end)
        except Exception as e:
            # The bindings raise plain exceptions carrying the MTK status text.
            raise AdapterError(str(e), path=int(path), status=type(e).__name__) from e
        try:
            return [int(o) for o in orbits]
        except (TypeError, ValueError) as e:
            raise AdapterError(
                f"unexpected orbit list {orbits!r}: {e}",
                path=int(path),
                status="BadResult",
            ) from e
