from pydantic import BaseModel, Field

from feedblock.limits import ClusterResourceLimits, ResourceLimits


class ResourceLimitsModel(BaseModel):
    """
    Finalized limits for one consumer, as handed to downstream config.
    """
    disk: float = Field(ge=0.0, le=1.0)
    memory: float = Field(ge=0.0, le=1.0)
    address_space: float = Field(ge=0.0, le=1.0)
    low_watermark_difference: float = Field(ge=0.0, le=1.0)

    @classmethod
    def from_limits(cls, limits: ResourceLimits) -> "ResourceLimitsModel":
        return cls(**limits.to_dict())


class ClusterResourceLimitsModel(BaseModel):
    """
    Limits for the cluster controller and the content nodes of one cluster.
    """
    cluster_controller: ResourceLimitsModel
    content_node: ResourceLimitsModel

    @classmethod
    def from_limits(cls, limits: ClusterResourceLimits) -> "ClusterResourceLimitsModel":
        return cls(
            cluster_controller=ResourceLimitsModel.from_limits(limits.cluster_controller_limits),
            content_node=ResourceLimitsModel.from_limits(limits.content_node_limits),
        )
