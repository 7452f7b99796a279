# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for PATH/BLOCK/ORBIT value types and range validation."""
import dataclasses

import numpy as np
import pytest


class TestBounds:
    """Closed bounds on every identifier kind."""

    @pytest.mark.parametrize("value", [1, 180])
    def test_block_bounds_inclusive(self, value):
        from misrkit.domain.identifiers import BlockId, validate_block

        assert validate_block(value) == BlockId(value)

    @pytest.mark.parametrize("value", [0, 181])
    def test_block_outside_bounds(self, value):
        from misrkit.domain.errors import InvalidRange
        from misrkit.domain.identifiers import validate_block

        with pytest.raises(InvalidRange):
            validate_block(value)

    @pytest.mark.parametrize("value", [1, 233])
    def test_path_bounds_inclusive(self, value):
        from misrkit.domain.identifiers import validate_path

        assert validate_path(value).value == value

    @pytest.mark.parametrize("value", [0, 234, -1])
    def test_path_outside_bounds(self, value):
        from misrkit.domain.errors import InvalidRange
        from misrkit.domain.identifiers import validate_path

        with pytest.raises(InvalidRange):
            validate_path(value)

    @pytest.mark.parametrize("value", [995, 112000])
    def test_orbit_bounds_inclusive(self, value):
        from misrkit.domain.identifiers import validate_orbit

        assert validate_orbit(value).value == value

    @pytest.mark.parametrize("value", [994, 112001])
    def test_orbit_outside_bounds(self, value):
        from misrkit.domain.errors import InvalidRange
        from misrkit.domain.identifiers import validate_orbit

        with pytest.raises(InvalidRange):
            validate_orbit(value)


class TestInvalidRangeContext:
    """InvalidRange carries kind, value and bounds."""

    def test_fields(self):
        from misrkit.domain.errors import InvalidRange
        from misrkit.domain.identifiers import IdentifierKind, validate_block

        with pytest.raises(InvalidRange) as exc_info:
            validate_block(181)

        err = exc_info.value
        assert err.kind is IdentifierKind.BLOCK
        assert err.value == 181
        assert (err.lower, err.upper) == (1, 180)

    def test_message_names_kind_value_and_bounds(self):
        from misrkit.domain.errors import InvalidRange
        from misrkit.domain.identifiers import validate_orbit

        with pytest.raises(InvalidRange) as exc_info:
            validate_orbit(5)

        assert str(exc_info.value) == "orbit 5 outside valid range [995, 112000]"

    def test_is_value_error(self):
        from misrkit.domain.errors import InvalidRange
        from misrkit.domain.identifiers import validate_path

        with pytest.raises(ValueError):
            validate_path(0)
        assert issubclass(InvalidRange, ValueError)


class TestValueTypes:
    """PathId/BlockId/OrbitId behave as immutable validated values."""

    def test_constructor_validates(self):
        from misrkit.domain.errors import InvalidRange
        from misrkit.domain.identifiers import PathId

        with pytest.raises(InvalidRange):
            PathId(234)

    def test_frozen(self):
        from misrkit.domain.identifiers import PathId

        p = PathId(4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.value = 5  # type: ignore[misc]

    def test_int_and_index(self):
        from misrkit.domain.identifiers import OrbitId

        o = OrbitId(68050)
        assert int(o) == 68050
        assert [10, 20, 30][OrbitId.trusted(1)] == 20

    def test_kinds_are_distinct(self):
        from misrkit.domain.identifiers import BlockId, PathId

        assert PathId(4) != BlockId(4)

    def test_ordering_and_hashing(self):
        from misrkit.domain.identifiers import PathId

        assert PathId(168) < PathId(169)
        assert sorted([PathId(9), PathId(2), PathId(5)]) == [PathId(2), PathId(5), PathId(9)]
        assert {PathId(4): "a"}[PathId(4)] == "a"

    def test_numpy_integer_accepted(self):
        from misrkit.domain.identifiers import PathId

        p = PathId(np.int64(17))
        assert p.value == 17
        assert type(p.value) is int

    @pytest.mark.parametrize("value", ["4", 4.0, True, None])
    def test_non_integer_rejected(self, value):
        from misrkit.domain.identifiers import validate_path

        with pytest.raises(TypeError):
            validate_path(value)

    def test_other_kind_rejected(self):
        from misrkit.domain.identifiers import PathId, validate_block

        with pytest.raises(TypeError):
            validate_block(PathId(4))

    def test_same_kind_returned_unchanged(self):
        from misrkit.domain.identifiers import PathId, validate_path

        p = PathId(12)
        assert validate_path(p) is p

    def test_trusted_skips_validation(self):
        from misrkit.domain.identifiers import PathId

        p = PathId.trusted(168)
        assert p == PathId(168)
        assert isinstance(p, PathId)

    def test_validator_does_not_mutate_input(self):
        from misrkit.domain.identifiers import validate_path

        raw = [np.int32(7)]
        validate_path(raw[0])
        assert raw[0] == 7
        assert isinstance(raw[0], np.int32)


class TestIsValidAndKinds:

    def test_is_valid_predicate(self):
        from misrkit.domain.identifiers import IdentifierKind, is_valid

        assert is_valid(IdentifierKind.ORBIT, 995)
        assert not is_valid(IdentifierKind.ORBIT, 994)
        assert not is_valid(IdentifierKind.PATH, "4")

    def test_kind_attributes(self):
        from misrkit.domain.identifiers import IdentifierKind

        assert IdentifierKind.PATH.prefix == "P"
        assert IdentifierKind.BLOCK.width == 3
        assert IdentifierKind.ORBIT.width == 6
        assert (IdentifierKind.ORBIT.lower, IdentifierKind.ORBIT.upper) == (995, 112000)

    def test_from_label(self):
        from misrkit.domain.identifiers import IdentifierKind

        assert IdentifierKind.from_label("Orbit") is IdentifierKind.ORBIT
        with pytest.raises(ValueError):
            IdentifierKind.from_label("granule")
