"""Project-wide exception types."""

class CircularSamplingError(Exception):
    """Base exception for all sampling errors."""


class MomentDomainError(CircularSamplingError):
    """Raised when moments are requested for empty or degenerate input."""

    def __init__(self, message: str, *, mean: float | None = None, variance: float | None = None) -> None:
        super().__init__(message)
        self.mean = mean
        self.variance = variance


class ValidationNotConvergedError(CircularSamplingError):
    """Raised when rejection sampling exhausts its iteration budget."""

    def __init__(self, message: str, *, iterations: int) -> None:
        super().__init__(message)
        self.iterations = iterations


class CacheNotInitializedError(CircularSamplingError):
    """Raised when a distribution is requested from an empty cache."""


class ExportError(CircularSamplingError):
    """Raised when a distribution dump cannot be written."""


class ConfigError(CircularSamplingError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""
