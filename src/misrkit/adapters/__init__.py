# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for orbit catalogs and JSON I/O.

External dependencies (MisrToolkit, numpy, json, file I/O) are confined to
this layer. MisrToolkit is imported only when a toolkit query runs.
"""
from misrkit.adapters.json_io import JsonCatalogReader, JsonListingWriter
from misrkit.adapters.mtk_catalog import MtkOrbitCatalog
from misrkit.adapters.table_catalog import TableOrbitCatalog

__all__ = [
    "JsonCatalogReader",
    "JsonListingWriter",
    "MtkOrbitCatalog",
    "TableOrbitCatalog",
]
