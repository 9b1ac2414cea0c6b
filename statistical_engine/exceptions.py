"""Project-wide exception types."""


class StatisticalEngineError(Exception):
    """Base exception for all engine errors."""


class InvalidParameterError(StatisticalEngineError, ValueError):
    """Raised when a distribution or test parameter violates its domain."""


class InvalidRangeError(StatisticalEngineError, ValueError):
    """Raised when a plotting range or grid size is malformed."""


class UnsupportedDistributionError(StatisticalEngineError):
    """Raised when a distribution kind is unknown."""


class UnsupportedOperationError(StatisticalEngineError):
    """Raised when an operation is not defined for a distribution kind."""


class InsufficientDataError(StatisticalEngineError):
    """Raised when data does not meet minimum sample requirements."""


class LengthMismatchError(StatisticalEngineError):
    """Raised when paired sequences have different lengths."""


class DegenerateInputError(StatisticalEngineError):
    """Raised when a statistic would divide by a zero variance term."""


class DomainError(StatisticalEngineError, ValueError):
    """Raised when a probability argument lies outside (0, 1)."""


class ResourceLimitError(StatisticalEngineError):
    """Raised when a request would exceed configured resource limits."""


class ConfigError(StatisticalEngineError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""
