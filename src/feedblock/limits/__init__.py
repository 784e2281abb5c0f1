"""
Resource Limits Package.

Feed block resource limits for content clusters.

Components:
- resource_limits: ResourceLimits snapshot and its builder
- derivation: Derives complete controller and node limits
- validation: Range checks
- config: Default limits with env var support
- xml_builder: Explicit limits from cluster XML

Usage:
    from feedblock.limits import ClusterResourceLimitsBuilder, ResourceLimitsBuilder

    builder = ClusterResourceLimitsBuilder.from_config()
    builder.set_cluster_controller_builder(ResourceLimitsBuilder().set_disk_limit(0.8))
    limits = builder.build()

Default limits:
    - disk: 0.75
    - memory: 0.8
    - address space: 0.89
    - low watermark difference: 0.0

Override via environment:
    FEEDBLOCK_RESOURCE_LIMIT_DISK=0.85 feedblock derive
"""

from .resource_limits import (
    Dimension,
    ResourceLimits,
    ResourceLimitsBuilder,
)

from .derivation import (
    ClusterResourceLimits,
    ClusterResourceLimitsBuilder,
    LimitDefaults,
    derive_limits,
)

from .validation import (
    verify_limit_in_range,
    verify_limits,
    verify_resource_limits,
    verify_explicit_limits,
)

from .config import (
    ResourceLimitsConfig,
    get_limits_config,
    reset_limits_config,
    DEFAULT_RESOURCE_LIMIT_DISK,
    DEFAULT_RESOURCE_LIMIT_MEMORY,
    DEFAULT_RESOURCE_LIMIT_ADDRESS_SPACE,
    DEFAULT_RESOURCE_LIMIT_LOW_WATERMARK_DIFFERENCE,
)

from .xml_builder import (
    create_builder,
    create_builders,
    parse_cluster_xml,
    load_cluster_xml,
)

__all__ = [
    # Resource limits
    "Dimension",
    "ResourceLimits",
    "ResourceLimitsBuilder",
    # Derivation
    "ClusterResourceLimits",
    "ClusterResourceLimitsBuilder",
    "LimitDefaults",
    "derive_limits",
    # Validation
    "verify_limit_in_range",
    "verify_limits",
    "verify_resource_limits",
    "verify_explicit_limits",
    # Config
    "ResourceLimitsConfig",
    "get_limits_config",
    "reset_limits_config",
    "DEFAULT_RESOURCE_LIMIT_DISK",
    "DEFAULT_RESOURCE_LIMIT_MEMORY",
    "DEFAULT_RESOURCE_LIMIT_ADDRESS_SPACE",
    "DEFAULT_RESOURCE_LIMIT_LOW_WATERMARK_DIFFERENCE",
    # XML
    "create_builder",
    "create_builders",
    "parse_cluster_xml",
    "load_cluster_xml",
]
