"""Builder helpers for registering Parameter Store sources."""

from typing import Optional

from botocore.config import Config

from ..configuration.builder import ConfigurationBuilder
from ..log import LoggerFactory
from .client import AWSCredentials
from .source import ParameterStoreSource


def add_parameter_store(
    builder: ConfigurationBuilder,
    root_path: str,
    region: Optional[str] = None,
    logger_factory: Optional[LoggerFactory] = None,
    credentials: Optional[AWSCredentials] = None,
    parse_string_list_as_list: bool = False,
    fail_if_cant_load: bool = False,
    client=None,
    profile: Optional[str] = None,
    client_config: Optional[Config] = None
) -> ConfigurationBuilder:
    """Add a source that reads configuration values from Parameter Store.

    SecureString parameters are decrypted with KMS while loading.

    Args:
        builder: The builder to add to
        root_path: Parameters directory to load from
        region: Parameters AWS region
        logger_factory: Logger factory passed to the provider
        credentials: AWS credentials; the default chain is used when None
        parse_string_list_as_list: Split comma-delimited StringList values so they map to lists
        fail_if_cant_load: Raise if the parameters fail to load
        client: Pre-built SSM client to use instead of creating one
        profile: AWS profile name
        client_config: botocore Config for the created client

    Returns:
        The same builder, for chaining
    """
    source = ParameterStoreSource(
        root_path,
        region=region,
        credentials=credentials,
        client=client,
        profile=profile,
        parse_string_list_as_list=parse_string_list_as_list,
        fail_if_cant_load=fail_if_cant_load,
        logger_factory=logger_factory,
        client_config=client_config,
    )
    return builder.add(source)
