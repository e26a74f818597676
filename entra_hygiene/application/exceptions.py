"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class DirectorySetupError(ApplicationError):
    """Raised when authentication or the capability probe fails."""


class DirectoryReadError(ApplicationError):
    """Raised when fetching a directory collection fails."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""
