# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON file I/O adapter.

Reads orbit catalog tables and writes orbit listings in JSON format.
"""
import json
from typing import Any

from misrkit.domain.orbit_listing import OrbitListing


class JsonCatalogReader:
    """Reads orbit records from JSON files."""

    def read_records(self, path: str) -> list[dict[str, Any]]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get('orbits')
        if not isinstance(data, list):
            raise ValueError(
                f"Catalog file {path} must hold a list of orbit records "
                f"or an object with an 'orbits' list"
            )
        return data


class JsonListingWriter:
    """Writes orbit listings to JSON files."""

    def write_listing(self, listing: OrbitListing, path: str) -> int:
        """Write listing.as_dict() to path; returns the number of orbits written."""
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(listing.as_dict(), f, indent=2, ensure_ascii=False)
        return listing.total_count
