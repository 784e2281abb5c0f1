"""
feedblock - Feed block resource limits for content clusters

Derives consistent disk, memory and address space limits for the
cluster controller and the content nodes.
"""

__version__ = "1.0.0"

from feedblock.limits import (
    ClusterResourceLimits,
    ClusterResourceLimitsBuilder,
    LimitDefaults,
    ResourceLimits,
    ResourceLimitsBuilder,
    derive_limits,
)
from feedblock.exceptions import FeedBlockError, LimitOutOfRangeError

__all__ = [
    "__version__",
    "ClusterResourceLimits",
    "ClusterResourceLimitsBuilder",
    "LimitDefaults",
    "ResourceLimits",
    "ResourceLimitsBuilder",
    "derive_limits",
    "FeedBlockError",
    "LimitOutOfRangeError",
]
