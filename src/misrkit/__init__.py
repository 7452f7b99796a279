# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
misrkit

Identifier handling for the MISR / MISR-HR processing chain: validation and
canonical string forms for PATH, BLOCK and ORBIT numbers, path/date range
normalization against the mission epoch, and per-path orbit listings from
an orbit catalog (MISR Toolkit or a local table).
"""

from misrkit.domain.errors import (
    MissingArgument,
    InvalidRange,
    DecodeError,
    MalformedDate,
    AdapterError,
)
from misrkit.domain.identifiers import (
    IdentifierKind,
    PathId,
    BlockId,
    OrbitId,
    validate,
    validate_path,
    validate_block,
    validate_orbit,
    is_valid,
)
from misrkit.domain.codec import (
    encode,
    decode,
    encode_path,
    encode_block,
    encode_orbit,
    decode_path,
    decode_block,
    decode_orbit,
)
from misrkit.domain.time_range import (
    MISSION_EPOCH,
    PathRange,
    DateRange,
    parse_date,
    julian_day_number,
    normalize_range,
)
from misrkit.domain.orbit_listing import (
    PathOrbits,
    OrbitListing,
    assemble_orbit_listing,
)
from misrkit.ports.orbit_catalog import OrbitCatalog

__all__ = [
    "MissingArgument",
    "InvalidRange",
    "DecodeError",
    "MalformedDate",
    "AdapterError",
    "IdentifierKind",
    "PathId",
    "BlockId",
    "OrbitId",
    "validate",
    "validate_path",
    "validate_block",
    "validate_orbit",
    "is_valid",
    "encode",
    "decode",
    "encode_path",
    "encode_block",
    "encode_orbit",
    "decode_path",
    "decode_block",
    "decode_orbit",
    "MISSION_EPOCH",
    "PathRange",
    "DateRange",
    "parse_date",
    "julian_day_number",
    "normalize_range",
    "PathOrbits",
    "OrbitListing",
    "assemble_orbit_listing",
    "OrbitCatalog",
]
