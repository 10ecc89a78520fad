"""Configuration source for AWS Systems Manager Parameter Store."""

from typing import Optional
import logging

from botocore.config import Config

from ..configuration.interfaces import ConfigurationSource
from ..errors import InvalidArgumentError
from ..log import LoggerFactory
from .client import AWSCredentials, create_ssm_client
from .provider import ParameterStoreProvider

logger = logging.getLogger(__name__)


class ParameterStoreSource(ConfigurationSource):
    """Holds everything needed to build a ParameterStoreProvider.

    All providers built from one source share its SSM client. Nothing here
    talks to AWS; requests are only made by ``ParameterStoreProvider.load``.
    """

    def __init__(
        self,
        root_path: str,
        region: Optional[str] = None,
        credentials: Optional[AWSCredentials] = None,
        client=None,
        profile: Optional[str] = None,
        parse_string_list_as_list: bool = False,
        fail_if_cant_load: bool = False,
        logger_factory: Optional[LoggerFactory] = None,
        client_config: Optional[Config] = None
    ):
        """
        Initialize the source.

        Args:
            root_path: Parameter hierarchy to load, e.g. '/app'
            region: AWS region, used when no client is given
            credentials: Explicit credentials, used when no client is given
            client: Pre-built SSM client; region, credentials and profile are ignored if set
            profile: AWS profile name, used when no client is given
            parse_string_list_as_list: Expand StringList values into indexed keys
            fail_if_cant_load: Propagate load failures instead of swallowing them
            logger_factory: Passed to every provider
            client_config: botocore Config for an implicitly created client

        Raises:
            InvalidArgumentError: If root_path is empty or no client can be created
        """
        if not root_path:
            raise InvalidArgumentError("root_path is required")

        if client is None:
            client = create_ssm_client(
                region=region,
                credentials=credentials,
                profile=profile,
                client_config=client_config,
            )

        self.root_path = root_path
        self.client = client
        self.parse_string_list_as_list = parse_string_list_as_list
        self.fail_if_cant_load = fail_if_cant_load
        self.logger_factory = logger_factory

    @classmethod
    def from_settings(cls, settings, **kwargs) -> 'ParameterStoreSource':
        """
        Create a source from validated ParameterStoreSettings.

        Args:
            settings: ParameterStoreSettings instance
            **kwargs: Extra constructor arguments (client, credentials, logger_factory)
        """
        kwargs.setdefault('client_config', settings.client_config())
        return cls(
            root_path=settings.root_path,
            region=settings.region,
            profile=settings.profile,
            parse_string_list_as_list=settings.parse_string_list_as_list,
            fail_if_cant_load=settings.fail_if_cant_load,
            **kwargs
        )

    def build(self, builder=None) -> ParameterStoreProvider:
        """Build a new provider for this source."""
        logger.debug(f"Building Parameter Store provider for '{self.root_path}'")
        return ParameterStoreProvider(
            self.client,
            self.root_path,
            parse_string_list_as_list=self.parse_string_list_as_list,
            fail_if_cant_load=self.fail_if_cant_load,
            logger_factory=self.logger_factory,
        )
