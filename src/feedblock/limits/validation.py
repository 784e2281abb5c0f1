"""
Limit Validation.

Range checks for default and derived resource limits.
"""

from ..exceptions import LimitOutOfRangeError, IncompleteLimitsError
from .resource_limits import Dimension, ResourceLimits, ResourceLimitsBuilder, LOW_WATERMARK_DIFFERENCE


def verify_limit_in_range(limit: float, limit_type: str) -> None:
    """Raise LimitOutOfRangeError unless 0.0 <= limit <= 1.0."""
    # NaN fails this comparison too
    if not 0.0 <= limit <= 1.0:
        raise LimitOutOfRangeError(limit_type, limit)


def verify_limits(
    resource_limit_disk: float,
    resource_limit_memory: float,
    resource_limit_low_watermark_difference: float,
    resource_limit_address_space: float,
) -> None:
    """Check the global defaults, in a fixed order so the first bad one is reported."""
    verify_limit_in_range(resource_limit_disk, Dimension.DISK.display_name)
    verify_limit_in_range(resource_limit_memory, Dimension.MEMORY.display_name)
    verify_limit_in_range(resource_limit_low_watermark_difference, LOW_WATERMARK_DIFFERENCE)
    verify_limit_in_range(resource_limit_address_space, Dimension.ADDRESS_SPACE.display_name)


def verify_resource_limits(limits: ResourceLimits, side: str) -> None:
    """
    Check that a finalized set of limits is complete and in range.

    Args:
        limits: Finalized limits
        side: Consumer name used in error messages

    Raises:
        IncompleteLimitsError: If a field is unset
        LimitOutOfRangeError: If a field is outside [0.0, 1.0]
    """
    checks = [(dimension.display_name, limits.get(dimension)) for dimension in Dimension]
    checks.append((LOW_WATERMARK_DIFFERENCE, limits.low_watermark_difference))

    for limit_type, value in checks:
        if value is None:
            raise IncompleteLimitsError(side, limit_type)
        verify_limit_in_range(value, limit_type)


def verify_explicit_limits(builder: ResourceLimitsBuilder) -> None:
    """Range check the limits that were explicitly set on a builder."""
    for dimension in Dimension:
        value = builder.get(dimension)
        if value is not None:
            verify_limit_in_range(value, dimension.display_name)
