"""Configuration sources, providers and the builder that composes them."""

from .interfaces import ConfigurationProvider, ConfigurationSource, KEY_DELIMITER
from .builder import (
    Configuration,
    ConfigurationBuilder,
    MemoryConfigurationProvider,
    MemoryConfigurationSource,
)

__all__ = [
    "Configuration",
    "ConfigurationBuilder",
    "ConfigurationProvider",
    "ConfigurationSource",
    "KEY_DELIMITER",
    "MemoryConfigurationProvider",
    "MemoryConfigurationSource",
]
