# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for orbit catalogs.

Adapters answer "which orbits of path P intersect [start, end]" against
the MISR Toolkit, a local table, or any other source.
"""
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class OrbitCatalog(Protocol):
    """Port for listing the orbits of one path within a time window."""

    def list_orbits(self, path: int, start: str, end: str) -> Sequence[int]:
        """
        Orbit numbers of path that intersect [start, end].

        Timestamps use YYYY-MM-DDTHH:MM:SSZ. Failures raise AdapterError.
        """
        ...
