# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Canonical string forms for MISR identifiers.

Canonical forms are an uppercase prefix letter followed by zero-padded
digits: P004, B111, O068050. Decoding tolerates surrounding whitespace,
a lowercase prefix, blanks between prefix and digits, and (for paths and
blocks only) a bare number without prefix. Paths also have a digits-only
canonical form (004) for callers that need it.
"""
import re

from .errors import DecodeError, InvalidRange
from .identifiers import (
    IdentifierKind,
    BlockId,
    OrbitId,
    PathId,
    validate,
)

_DIGITS = re.compile(r"[0-9]+")

# Kinds whose prefix letter may be omitted on input.
_BARE_DIGITS_ALLOWED = frozenset({IdentifierKind.PATH, IdentifierKind.BLOCK})


def encode(kind: IdentifierKind, value, prefix: bool = True) -> str:
    """Canonical string for an identifier (value type or int-like)."""
    number = validate(kind, value).value
    digits = f"{number:0{kind.width}d}"
    return f"{kind.prefix}{digits}" if prefix else digits


def decode(kind: IdentifierKind, text: str):
    """
    Parse a tolerated spelling of an identifier.

    Returns:
        PathId, BlockId or OrbitId according to kind.

    Raises:
        DecodeError: On a wrong or missing prefix, a non-numeric remainder,
            or an out-of-range number (chained from InvalidRange).
    """
    if not isinstance(text, str):
        raise DecodeError(kind, text, f"expected a string, got {type(text).__name__}")

    body = text.strip()
    if not body:
        raise DecodeError(kind, text, "empty input")

    if body[0].upper() == kind.prefix:
        body = body[1:].strip()
    elif kind not in _BARE_DIGITS_ALLOWED:
        raise DecodeError(kind, text, f"missing '{kind.prefix}' prefix")

    if not _DIGITS.fullmatch(body):
        raise DecodeError(kind, text, "expected digits after prefix")

    # Leading zeros are padding; anything wider than the canonical form
    # cannot be in range and is not handed to int().
    significant = body.lstrip("0") or "0"
    if len(significant) > kind.width:
        raise DecodeError(kind, text, f"number longer than {kind.width} digits")

    try:
        return validate(kind, int(significant))
    except InvalidRange as e:
        raise DecodeError(kind, text, str(e)) from e


def encode_path(path, prefix: bool = True) -> str:
    """P### (or ### with prefix=False)."""
    return encode(IdentifierKind.PATH, path, prefix=prefix)


def encode_block(block) -> str:
    return encode(IdentifierKind.BLOCK, block)


def encode_orbit(orbit) -> str:
    return encode(IdentifierKind.ORBIT, orbit)


def decode_path(text: str) -> PathId:
    """Accepts 'P004', ' p 4 ', '004' and '4' alike."""
    return decode(IdentifierKind.PATH, text)


def decode_block(text: str) -> BlockId:
    return decode(IdentifierKind.BLOCK, text)


def decode_orbit(text: str) -> OrbitId:
    """The 'O' prefix is mandatory: ' o 68050 ' decodes, '68050' does not."""
    return decode(IdentifierKind.ORBIT, text)
