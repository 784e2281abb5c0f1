"""
Tests for ResourceLimits and ResourceLimitsBuilder.
"""

import dataclasses

import pytest

from feedblock.exceptions import IncompleteLimitsError, LimitOutOfRangeError
from feedblock.limits import (
    Dimension,
    ResourceLimits,
    ResourceLimitsBuilder,
    verify_limit_in_range,
    verify_resource_limits,
)


class TestResourceLimitsBuilder:
    """Builder stores values verbatim and snapshots them."""

    def test_empty_builder_builds_unset_limits(self):
        limits = ResourceLimitsBuilder().build()
        assert limits == ResourceLimits()
        assert limits.disk is None
        assert not limits.is_complete

    def test_zero_is_not_unset(self):
        builder = ResourceLimitsBuilder().set_disk_limit(0.0)
        assert builder.get_disk_limit() == 0.0
        assert builder.build().disk is not None

    def test_setters_and_getters(self):
        builder = (ResourceLimitsBuilder()
                   .set_disk_limit(0.1)
                   .set_memory_limit(0.2)
                   .set_address_space_limit(0.3)
                   .set_low_watermark_difference(0.4))
        assert builder.get_disk_limit() == 0.1
        assert builder.get_memory_limit() == 0.2
        assert builder.get_address_space_limit() == 0.3
        assert builder.get_low_watermark_difference() == 0.4
        assert builder.build().is_complete

    def test_last_write_wins(self):
        builder = ResourceLimitsBuilder().set_memory_limit(0.5).set_memory_limit(0.6)
        assert builder.build().memory == 0.6

    def test_no_validation_at_set_time(self):
        builder = ResourceLimitsBuilder().set_disk_limit(7.0)
        assert builder.build().disk == 7.0

    def test_build_is_a_snapshot(self):
        builder = ResourceLimitsBuilder().set_disk_limit(0.5)
        limits = builder.build()
        builder.set_disk_limit(0.6)
        assert limits.disk == 0.5

    def test_copy_is_independent(self):
        builder = ResourceLimitsBuilder().set_disk_limit(0.5)
        copy = builder.copy()
        copy.set_disk_limit(0.9)
        assert builder.get_disk_limit() == 0.5

    def test_from_limits(self):
        limits = ResourceLimits(disk=0.1, memory=0.2, address_space=0.3, low_watermark_difference=0.0)
        assert ResourceLimitsBuilder.from_limits(limits).build() == limits

    def test_generic_accessors_match_named_ones(self):
        builder = ResourceLimitsBuilder()
        builder.set(Dimension.ADDRESS_SPACE, 0.42)
        assert builder.get_address_space_limit() == 0.42
        assert builder.build().get(Dimension.ADDRESS_SPACE) == 0.42


class TestResourceLimits:

    def test_is_frozen(self):
        limits = ResourceLimits(disk=0.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            limits.disk = 0.6

    def test_to_dict(self):
        d = ResourceLimits(disk=0.5).to_dict()
        assert d == {"disk": 0.5, "memory": None, "address_space": None, "low_watermark_difference": None}

    def test_dimension_scale_factors(self):
        assert Dimension.DISK.scale_factor == 0.6
        assert Dimension.MEMORY.scale_factor == 0.5
        assert Dimension.ADDRESS_SPACE.scale_factor == 0.5
        assert [d.display_name for d in Dimension] == ["disk", "memory", "address space"]


class TestValidation:

    @pytest.mark.parametrize("limit", [0.0, 0.5, 1.0])
    def test_bounds_are_inclusive(self, limit):
        verify_limit_in_range(limit, "disk")

    @pytest.mark.parametrize("limit", [-0.0001, 1.0001, float("nan"), float("inf")])
    def test_out_of_range(self, limit):
        with pytest.raises(LimitOutOfRangeError):
            verify_limit_in_range(limit, "memory")

    def test_incomplete_limits(self):
        with pytest.raises(IncompleteLimitsError, match="address space"):
            verify_resource_limits(ResourceLimits(disk=0.1, memory=0.2), "content node")

    def test_complete_limits_pass(self):
        verify_resource_limits(
            ResourceLimits(disk=0.1, memory=0.2, address_space=0.3, low_watermark_difference=0.0),
            "cluster controller",
        )
