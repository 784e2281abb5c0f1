"""
Cluster Resource Limit Derivation.

Computes the feed block limits used by the cluster controller and the
content nodes of a content cluster from partially specified configuration
and global defaults.

The content node limit for a resource is always looser than the cluster
controller limit, so the controller blocks feed before a node hits its
own hard stop:
- If neither side is set, the controller gets the global default.
- If only the node is set, the controller is pinned one percentage point below it.
- If the node is unset, it is placed between the controller limit and 1.0,
  using a per-resource share of the remaining headroom.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Any, Optional
from xml.etree.ElementTree import Element

from loguru import logger

from .resource_limits import Dimension, ResourceLimits, ResourceLimitsBuilder
from .validation import verify_explicit_limits, verify_limits, verify_resource_limits
from .xml_builder import create_builders

if TYPE_CHECKING:
    from .config import ResourceLimitsConfig


CONTROLLER_MARGIN = 0.01

CLUSTER_CONTROLLER = "cluster controller"
CONTENT_NODE = "content node"


@dataclass(frozen=True)
class LimitDefaults:
    """Global default limits supplied once per build."""

    disk: float
    memory: float
    address_space: float
    low_watermark_difference: float

    def get(self, dimension: Dimension) -> float:
        return getattr(self, dimension.field_name)


@dataclass(frozen=True)
class ClusterResourceLimits:
    """Finalized limits for the cluster controller and the content nodes."""

    cluster_controller_limits: ResourceLimits
    content_node_limits: ResourceLimits

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cluster_controller": self.cluster_controller_limits.to_dict(),
            "content_node": self.content_node_limits.to_dict(),
        }


def calc_content_node_limit(cluster_controller_limit: float, scale_factor: float) -> float:
    return cluster_controller_limit + ((1.0 - cluster_controller_limit) * scale_factor)


def calc_cluster_controller_limit(content_node_limit: float) -> float:
    return max(0.0, content_node_limit - CONTROLLER_MARGIN)


def _consider_setting_default_controller_limit(
    ctrl: ResourceLimitsBuilder,
    node: ResourceLimitsBuilder,
    dimension: Dimension,
    default: float,
) -> None:
    # Only the controller is defaulted; the node limit is derived from it later
    if ctrl.get(dimension) is None and node.get(dimension) is None:
        ctrl.set(dimension, default)


def _derive_controller_limit(
    ctrl: ResourceLimitsBuilder,
    node: ResourceLimitsBuilder,
    dimension: Dimension,
) -> None:
    node_limit = node.get(dimension)
    if ctrl.get(dimension) is None and node_limit is not None:
        ctrl.set(dimension, calc_cluster_controller_limit(node_limit))


def _derive_content_node_limit(
    ctrl: ResourceLimitsBuilder,
    node: ResourceLimitsBuilder,
    dimension: Dimension,
) -> None:
    ctrl_limit = ctrl.get(dimension)
    if node.get(dimension) is None and ctrl_limit is not None:
        node.set(dimension, calc_content_node_limit(ctrl_limit, dimension.scale_factor))


def derive_limits(
    ctrl_builder: ResourceLimitsBuilder,
    node_builder: ResourceLimitsBuilder,
    defaults: LimitDefaults,
) -> ClusterResourceLimits:
    """
    Fill in and validate the limits for both consumers.

    The input builders are not modified.

    Args:
        ctrl_builder: Limits explicitly configured for the cluster controller
        node_builder: Limits explicitly configured for the content nodes
        defaults: Global default limits

    Returns:
        ClusterResourceLimits with every field set

    Raises:
        LimitOutOfRangeError: If an explicit or resulting limit is outside [0.0, 1.0]
    """
    verify_explicit_limits(ctrl_builder)
    verify_explicit_limits(node_builder)

    ctrl = ctrl_builder.copy()
    node = node_builder.copy()

    for dimension in Dimension:
        _consider_setting_default_controller_limit(ctrl, node, dimension, defaults.get(dimension))
    for dimension in Dimension:
        _derive_controller_limit(ctrl, node, dimension)
    for dimension in Dimension:
        _derive_content_node_limit(ctrl, node, dimension)

    ctrl.set_low_watermark_difference(defaults.low_watermark_difference)
    node.set_low_watermark_difference(defaults.low_watermark_difference)

    limits = ClusterResourceLimits(
        cluster_controller_limits=ctrl.build(),
        content_node_limits=node.build(),
    )
    verify_resource_limits(limits.cluster_controller_limits, CLUSTER_CONTROLLER)
    verify_resource_limits(limits.content_node_limits, CONTENT_NODE)

    logger.debug(f"Derived resource limits: {limits.to_dict()}")
    return limits


class ClusterResourceLimitsBuilder:
    """
    Builds ClusterResourceLimits for one content cluster.

    The global defaults are range checked on construction, before any
    explicit limits are looked at.
    """

    def __init__(
        self,
        hosted: bool,
        resource_limit_disk: float,
        resource_limit_memory: float,
        resource_limit_low_watermark_difference: float,
        resource_limit_address_space: float,
    ):
        verify_limits(
            resource_limit_disk,
            resource_limit_memory,
            resource_limit_low_watermark_difference,
            resource_limit_address_space,
        )
        self.hosted = hosted
        self.defaults = LimitDefaults(
            disk=resource_limit_disk,
            memory=resource_limit_memory,
            address_space=resource_limit_address_space,
            low_watermark_difference=resource_limit_low_watermark_difference,
        )
        self.ctrl_builder = ResourceLimitsBuilder()
        self.node_builder = ResourceLimitsBuilder()

    @classmethod
    def from_defaults(cls, defaults: LimitDefaults, hosted: bool = False) -> "ClusterResourceLimitsBuilder":
        return cls(
            hosted,
            defaults.disk,
            defaults.memory,
            defaults.low_watermark_difference,
            defaults.address_space,
        )

    @classmethod
    def from_config(cls, config: Optional["ResourceLimitsConfig"] = None) -> "ClusterResourceLimitsBuilder":
        """Create from a ResourceLimitsConfig (the global one if None)."""
        if config is None:
            from .config import get_limits_config
            config = get_limits_config()
        return cls.from_defaults(config.to_defaults(), hosted=config.hosted)

    def set_cluster_controller_builder(self, builder: ResourceLimitsBuilder) -> None:
        self.ctrl_builder = builder

    def set_content_node_builder(self, builder: ResourceLimitsBuilder) -> None:
        self.node_builder = builder

    def build(self) -> ClusterResourceLimits:
        return derive_limits(self.ctrl_builder, self.node_builder, self.defaults)

    def build_from_element(self, cluster_element: Optional[Element]) -> ClusterResourceLimits:
        """Read explicit limits from a content cluster element, then derive."""
        self.ctrl_builder, self.node_builder = create_builders(cluster_element, self.hosted)
        return self.build()
