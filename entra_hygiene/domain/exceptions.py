"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidThresholdsError(DomainError, ValueError):
    """Raised when thresholds or cutoffs are invalid."""
