"""Exceptions raised by the Parameter Store configuration provider."""

from typing import Optional


class ParameterStoreConfigError(Exception):
    """Base class for all errors raised by this package."""
    pass


class InvalidArgumentError(ParameterStoreConfigError, ValueError):
    """Raised when a source, provider or settings object is built with bad arguments."""
    pass


class RemoteFetchError(ParameterStoreConfigError):
    """Raised when parameters cannot be loaded and the provider is set to fail fast."""

    def __init__(self, message: str, root_path: Optional[str] = None):
        super().__init__(message)
        self.root_path = root_path


class ConfigMergeError(ParameterStoreConfigError):
    """Exception raised when configuration merge fails."""
    pass
