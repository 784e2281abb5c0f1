import pytest
from pydantic import ValidationError

from feedblock.limits import LimitDefaults, ResourceLimits, ResourceLimitsBuilder, derive_limits
from feedblock.schemas import ClusterResourceLimitsModel, ResourceLimitsModel


def test_cluster_model_from_limits():
    limits = derive_limits(
        ResourceLimitsBuilder().set_disk_limit(0.4),
        ResourceLimitsBuilder(),
        LimitDefaults(disk=0.75, memory=0.8, address_space=0.89, low_watermark_difference=0.05),
    )
    model = ClusterResourceLimitsModel.from_limits(limits)
    assert model.cluster_controller.disk == 0.4
    assert model.content_node.low_watermark_difference == 0.05
    assert model.model_dump() == limits.to_dict()


def test_incomplete_limits_are_rejected():
    with pytest.raises(ValidationError):
        ResourceLimitsModel.from_limits(ResourceLimits(disk=0.5))


def test_out_of_range_values_are_rejected():
    with pytest.raises(ValidationError):
        ResourceLimitsModel(disk=1.2, memory=0.5, address_space=0.5, low_watermark_difference=0.0)
