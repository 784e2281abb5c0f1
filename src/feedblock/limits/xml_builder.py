"""
Resource limits from cluster configuration XML.

Reads <resource-limits> elements of a content cluster:

    <content id="music">
      <tuning>
        <resource-limits>
          <disk>0.8</disk>
          <memory>0.75</memory>
          <address-space>0.9</address-space>
        </resource-limits>
      </tuning>
      <engine>
        <proton>
          <resource-limits>...</resource-limits>
        </proton>
      </engine>
    </content>

Limits under <tuning> apply to the cluster controller, limits under
<engine><proton> to the content nodes.
"""

from pathlib import Path
from typing import Optional, Tuple, Union
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from loguru import logger

from ..exceptions import ConfigError, ResourceLimitsNotAllowedError
from .resource_limits import Dimension, ResourceLimitsBuilder


RESOURCE_LIMITS_ELEMENT = "resource-limits"
CLUSTER_CONTROLLER_PATH = "tuning"
CONTENT_NODE_PATH = "engine/proton"

# Child element name per dimension
DIMENSION_ELEMENTS = {
    Dimension.DISK: "disk",
    Dimension.MEMORY: "memory",
    Dimension.ADDRESS_SPACE: "address-space",
}

CONTENT_NODE_LIMITS_WARNING = (
    "Setting proton resource limits in <engine><proton> should not be done directly. "
    "Set limits for cluster in <tuning><resource-limits> instead."
)


def _child_as_float(element: Element, name: str) -> float:
    text = (element.text or "").strip()
    try:
        return float(text)
    except ValueError:
        raise ConfigError(f"Element '{name}' must be a number, got '{text}'")


def create_builder(element: Optional[Element], hosted: bool) -> ResourceLimitsBuilder:
    """
    Create a builder from the element holding <resource-limits>.

    Args:
        element: Parent element (<tuning> or <proton>), may be None
        hosted: Whether explicit limits are forbidden

    Returns:
        Builder with the explicitly configured limits

    Raises:
        ResourceLimitsNotAllowedError: If limits are set in hosted mode
        ConfigError: If a limit is not a number
    """
    builder = ResourceLimitsBuilder()
    if element is None:
        return builder

    resource_limits = element.find(RESOURCE_LIMITS_ELEMENT)
    if resource_limits is None:
        return builder

    if hosted:
        raise ResourceLimitsNotAllowedError(RESOURCE_LIMITS_ELEMENT)

    for dimension, name in DIMENSION_ELEMENTS.items():
        child = resource_limits.find(name)
        if child is not None:
            builder.set(dimension, _child_as_float(child, name))

    return builder


def create_builders(
    cluster_element: Optional[Element],
    hosted: bool,
) -> Tuple[ResourceLimitsBuilder, ResourceLimitsBuilder]:
    """Return (cluster controller builder, content node builder) for a cluster element."""
    if cluster_element is None:
        return ResourceLimitsBuilder(), ResourceLimitsBuilder()

    ctrl_builder = create_builder(cluster_element.find(CLUSTER_CONTROLLER_PATH), hosted)
    node_builder = create_builder(cluster_element.find(CONTENT_NODE_PATH), hosted)

    if node_builder.get_disk_limit() is not None or node_builder.get_memory_limit() is not None:
        logger.warning(CONTENT_NODE_LIMITS_WARNING)

    logger.debug(f"Explicit limits: controller={ctrl_builder}, node={node_builder}")
    return ctrl_builder, node_builder


def parse_cluster_xml(text: Union[str, bytes]) -> Element:
    """Parse a content cluster XML document and return its root element."""
    try:
        return ElementTree.fromstring(text)
    except ElementTree.ParseError as e:
        raise ConfigError(f"Invalid cluster XML: {e}")


def load_cluster_xml(path: Path) -> Element:
    """Read and parse a content cluster XML file."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Cluster config not found: {path}")
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ConfigError(f"Cannot read cluster config {path}: {e}")
    return parse_cluster_xml(content)
