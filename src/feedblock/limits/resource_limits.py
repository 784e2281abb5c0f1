"""
Resource Limits.

Feed block thresholds for one consumer (cluster controller or content node),
expressed as fractions of the resource in [0.0, 1.0].
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional, Dict, Any


class Dimension(Enum):
    """Resource dimensions that are derived between controller and node."""

    DISK = ("disk", "disk", 0.6)
    MEMORY = ("memory", "memory", 0.5)
    ADDRESS_SPACE = ("address_space", "address space", 0.5)

    def __init__(self, field_name: str, display_name: str, scale_factor: float):
        self.field_name = field_name
        self.display_name = display_name
        # Share of the remaining headroom added on top of the controller limit
        self.scale_factor = scale_factor


LOW_WATERMARK_DIFFERENCE = "low watermark difference"


@dataclass(frozen=True)
class ResourceLimits:
    """
    Immutable snapshot of resource limits.

    A field set to None is unset, which is not the same as 0.0.
    """

    disk: Optional[float] = None
    memory: Optional[float] = None
    address_space: Optional[float] = None
    low_watermark_difference: Optional[float] = None

    def get(self, dimension: Dimension) -> Optional[float]:
        return getattr(self, dimension.field_name)

    @property
    def is_complete(self) -> bool:
        """True when every field has a value."""
        return all(getattr(self, f.name) is not None for f in fields(self))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "disk": self.disk,
            "memory": self.memory,
            "address_space": self.address_space,
            "low_watermark_difference": self.low_watermark_difference,
        }


class ResourceLimitsBuilder:
    """
    Accumulates explicitly configured limits.

    Values are stored verbatim; range checks happen when limits are derived.
    """

    def __init__(self):
        self._values: Dict[str, Optional[float]] = {
            "disk": None,
            "memory": None,
            "address_space": None,
            "low_watermark_difference": None,
        }

    @classmethod
    def from_limits(cls, limits: ResourceLimits) -> "ResourceLimitsBuilder":
        """Create a builder pre-filled with the values of a snapshot."""
        builder = cls()
        builder._values.update(limits.to_dict())
        return builder

    def copy(self) -> "ResourceLimitsBuilder":
        builder = ResourceLimitsBuilder()
        builder._values = dict(self._values)
        return builder

    def get(self, dimension: Dimension) -> Optional[float]:
        return self._values[dimension.field_name]

    def set(self, dimension: Dimension, limit: float) -> "ResourceLimitsBuilder":
        self._values[dimension.field_name] = limit
        return self

    def get_disk_limit(self) -> Optional[float]:
        return self.get(Dimension.DISK)

    def set_disk_limit(self, limit: float) -> "ResourceLimitsBuilder":
        return self.set(Dimension.DISK, limit)

    def get_memory_limit(self) -> Optional[float]:
        return self.get(Dimension.MEMORY)

    def set_memory_limit(self, limit: float) -> "ResourceLimitsBuilder":
        return self.set(Dimension.MEMORY, limit)

    def get_address_space_limit(self) -> Optional[float]:
        return self.get(Dimension.ADDRESS_SPACE)

    def set_address_space_limit(self, limit: float) -> "ResourceLimitsBuilder":
        return self.set(Dimension.ADDRESS_SPACE, limit)

    def get_low_watermark_difference(self) -> Optional[float]:
        return self._values["low_watermark_difference"]

    def set_low_watermark_difference(self, difference: float) -> "ResourceLimitsBuilder":
        self._values["low_watermark_difference"] = difference
        return self

    def build(self) -> ResourceLimits:
        return ResourceLimits(**self._values)

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v}" for k, v in self._values.items() if v is not None)
        return f"ResourceLimitsBuilder({values})"
