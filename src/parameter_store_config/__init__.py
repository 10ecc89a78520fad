"""Configuration provider for AWS Systems Manager Parameter Store."""

__version__ = "0.1.0"

from .configuration import (
    Configuration,
    ConfigurationBuilder,
    ConfigurationProvider,
    ConfigurationSource,
    MemoryConfigurationSource,
)
from .errors import (
    ConfigMergeError,
    InvalidArgumentError,
    ParameterStoreConfigError,
    RemoteFetchError,
)
from .log import null_logger_factory
from .parameter_store import (
    AWSCredentials,
    ParameterStoreProvider,
    ParameterStoreSource,
    ParameterType,
    add_parameter_store,
    flatten_name,
)
from .settings import ParameterStoreSettings, load_settings

__all__ = [
    "AWSCredentials",
    "ConfigMergeError",
    "Configuration",
    "ConfigurationBuilder",
    "ConfigurationProvider",
    "ConfigurationSource",
    "InvalidArgumentError",
    "MemoryConfigurationSource",
    "ParameterStoreConfigError",
    "ParameterStoreProvider",
    "ParameterStoreSettings",
    "ParameterStoreSource",
    "ParameterType",
    "RemoteFetchError",
    "add_parameter_store",
    "flatten_name",
    "load_settings",
    "null_logger_factory",
]
