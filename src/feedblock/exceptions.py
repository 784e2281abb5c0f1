# Custom exceptions for feedblock

class FeedBlockError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(FeedBlockError):
    """Raised for configuration-related problems."""
    pass


class LimitOutOfRangeError(FeedBlockError, ValueError):
    """Raised when a resource limit lies outside [0.0, 1.0]."""

    def __init__(self, limit_type: str, value: float):
        self.limit_type = limit_type
        self.value = value
        super().__init__(
            f"Resource limit for {limit_type} is set to illegal value {value}, "
            f"but must be in the range [0.0, 1.0]"
        )


class IncompleteLimitsError(FeedBlockError):
    """Raised if a finalized set of limits still has an unset field."""

    def __init__(self, side: str, limit_type: str):
        self.side = side
        self.limit_type = limit_type
        super().__init__(f"Resource limit for {limit_type} is not set for {side}")


class ResourceLimitsNotAllowedError(FeedBlockError, ValueError):
    """Raised when explicit resource limits are given in hosted mode."""

    def __init__(self, element: str = "resource-limits"):
        self.element = element
        super().__init__(f"Element '{element}' is not allowed to be set")
