# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
MISR identifier value types and range validation.

PATH numbers the 233 repeating ground tracks, BLOCK the 180 along-track
segments of a path and ORBIT the revolutions since launch. Instances of
PathId, BlockId and OrbitId are always within bounds: the constructor
validates, and trusted() is the only way around it.
No external dependencies: only stdlib dataclasses/enum.
"""
import operator
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .errors import InvalidRange


class IdentifierKind(Enum):
    """Identifier kinds with their prefix letter, digit width and closed bounds."""
    PATH = ("path", "P", 3, 1, 233)
    BLOCK = ("block", "B", 3, 1, 180)
    ORBIT = ("orbit", "O", 6, 995, 112000)

    def __init__(self, label: str, prefix: str, width: int, lower: int, upper: int):
        self.label = label
        self.prefix = prefix
        self.width = width
        self.lower = lower
        self.upper = upper

    @classmethod
    def from_label(cls, label: str) -> "IdentifierKind":
        """Look up a kind by its lowercase label ('path', 'block', 'orbit')."""
        for kind in cls:
            if kind.label == label.strip().lower():
                return kind
        raise ValueError(f"Unknown identifier kind {label!r}")


def _as_int(kind: IdentifierKind, value) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{kind.label} must be an integer, got bool")
    if isinstance(value, _Identifier):
        raise TypeError(
            f"{kind.label} must be an integer, got {type(value).__name__}"
        )
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{kind.label} must be an integer, got {type(value).__name__}"
        ) from None


def check_bounds(kind: IdentifierKind, value) -> int:
    """Return value as int, or raise InvalidRange if outside [lower, upper]."""
    number = _as_int(kind, value)
    if not kind.lower <= number <= kind.upper:
        raise InvalidRange(kind, number, kind.lower, kind.upper)
    return number


@dataclass(frozen=True, order=True)
class _Identifier:
    value: int

    KIND: ClassVar[IdentifierKind]

    def __post_init__(self):
        object.__setattr__(self, "value", check_bounds(self.KIND, self.value))

    @classmethod
    def trusted(cls, value: int):
        """Build from a value already known to be valid, skipping the bounds check."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", int(value))
        return instance

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class PathId(_Identifier):
    """A validated path number in [1, 233]."""
    KIND: ClassVar[IdentifierKind] = IdentifierKind.PATH


@dataclass(frozen=True, order=True)
class BlockId(_Identifier):
    """A validated block number in [1, 180]."""
    KIND: ClassVar[IdentifierKind] = IdentifierKind.BLOCK


@dataclass(frozen=True, order=True)
class OrbitId(_Identifier):
    """A validated orbit number in [995, 112000]."""
    KIND: ClassVar[IdentifierKind] = IdentifierKind.ORBIT


IDENTIFIER_TYPES: dict[IdentifierKind, type[_Identifier]] = {
    IdentifierKind.PATH: PathId,
    IdentifierKind.BLOCK: BlockId,
    IdentifierKind.ORBIT: OrbitId,
}


def validate(kind: IdentifierKind, value) -> _Identifier:
    """
    Validate an int-like value as an identifier of the given kind.

    An instance of the matching identifier type is returned unchanged.

    Raises:
        InvalidRange: If the value is outside the kind's closed bounds.
        TypeError: If the value is not an integer.
    """
    id_type = IDENTIFIER_TYPES[kind]
    if isinstance(value, id_type):
        return value
    return id_type.trusted(check_bounds(kind, value))


def validate_path(value) -> PathId:
    """Validate a path number (1-233 inclusive)."""
    return validate(IdentifierKind.PATH, value)


def validate_block(value) -> BlockId:
    """Validate a block number (1-180 inclusive)."""
    return validate(IdentifierKind.BLOCK, value)


def validate_orbit(value) -> OrbitId:
    """Validate an orbit number (995-112000 inclusive)."""
    return validate(IdentifierKind.ORBIT, value)


def is_valid(kind: IdentifierKind, value) -> bool:
    """Predicate form of validate(): False for out-of-range or non-integer input."""
    try:
        validate(kind, value)
    except (InvalidRange, TypeError):
        return False
    return True
