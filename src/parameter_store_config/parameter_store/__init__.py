"""AWS Systems Manager Parameter Store configuration source."""

from .client import AWSCredentials, build_client_config, create_ssm_client
from .extensions import add_parameter_store
from .keys import flatten_name, list_item_key
from .models import Parameter, ParameterPage, ParameterType
from .provider import PAGE_SIZE, ParameterStoreProvider
from .source import ParameterStoreSource

__all__ = [
    "AWSCredentials",
    "PAGE_SIZE",
    "Parameter",
    "ParameterPage",
    "ParameterStoreProvider",
    "ParameterStoreSource",
    "ParameterType",
    "add_parameter_store",
    "build_client_config",
    "create_ssm_client",
    "flatten_name",
    "list_item_key",
]
