"""
Resource Limit Defaults Configuration.

Process-wide defaults for feed block resource limits.
All values configurable via FEEDBLOCK_* environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from .derivation import LimitDefaults


DEFAULT_RESOURCE_LIMIT_DISK = 0.75
DEFAULT_RESOURCE_LIMIT_MEMORY = 0.8
DEFAULT_RESOURCE_LIMIT_ADDRESS_SPACE = 0.89
DEFAULT_RESOURCE_LIMIT_LOW_WATERMARK_DIFFERENCE = 0.0


def _env_float(key: str, default: float) -> float:
    """Read float from environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    """Read boolean from environment variable."""
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    return default


@dataclass
class ResourceLimitsConfig:
    """
    Default resource limits for a deployment.

    Environment Variables:
        FEEDBLOCK_RESOURCE_LIMIT_DISK: Default disk limit (default: 0.75)
        FEEDBLOCK_RESOURCE_LIMIT_MEMORY: Default memory limit (default: 0.8)
        FEEDBLOCK_RESOURCE_LIMIT_ADDRESS_SPACE: Default address space limit (default: 0.89)
        FEEDBLOCK_RESOURCE_LIMIT_LOW_WATERMARK_DIFFERENCE: Low watermark difference (default: 0.0)
        FEEDBLOCK_HOSTED: If "true", explicit limits in cluster config are rejected

    Values are not range checked here. A bad value is reported when a
    ClusterResourceLimitsBuilder is created from this config.
    """

    resource_limit_disk: float = field(default_factory=lambda: _env_float(
        "FEEDBLOCK_RESOURCE_LIMIT_DISK", DEFAULT_RESOURCE_LIMIT_DISK
    ))
    resource_limit_memory: float = field(default_factory=lambda: _env_float(
        "FEEDBLOCK_RESOURCE_LIMIT_MEMORY", DEFAULT_RESOURCE_LIMIT_MEMORY
    ))
    resource_limit_address_space: float = field(default_factory=lambda: _env_float(
        "FEEDBLOCK_RESOURCE_LIMIT_ADDRESS_SPACE", DEFAULT_RESOURCE_LIMIT_ADDRESS_SPACE
    ))
    resource_limit_low_watermark_difference: float = field(default_factory=lambda: _env_float(
        "FEEDBLOCK_RESOURCE_LIMIT_LOW_WATERMARK_DIFFERENCE",
        DEFAULT_RESOURCE_LIMIT_LOW_WATERMARK_DIFFERENCE,
    ))

    hosted: bool = field(default_factory=lambda: _env_bool(
        "FEEDBLOCK_HOSTED", False
    ))

    def to_defaults(self) -> LimitDefaults:
        return LimitDefaults(
            disk=self.resource_limit_disk,
            memory=self.resource_limit_memory,
            address_space=self.resource_limit_address_space,
            low_watermark_difference=self.resource_limit_low_watermark_difference,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary (for JSON output)."""
        return {
            "resource_limit_disk": self.resource_limit_disk,
            "resource_limit_memory": self.resource_limit_memory,
            "resource_limit_address_space": self.resource_limit_address_space,
            "resource_limit_low_watermark_difference": self.resource_limit_low_watermark_difference,
            "hosted": self.hosted,
        }


# Global instance for convenience
_default_config: Optional[ResourceLimitsConfig] = None


def get_limits_config() -> ResourceLimitsConfig:
    """Get the global limits configuration."""
    global _default_config
    if _default_config is None:
        _default_config = ResourceLimitsConfig()
    return _default_config


def reset_limits_config() -> None:
    """Reset global config (useful after env var changes or for testing)."""
    global _default_config
    _default_config = None
