"""boto3 client construction for Parameter Store."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)

SERVICE_NAME = 'ssm'


@dataclass(frozen=True)
class AWSCredentials:
    """Explicit AWS credentials that override the default credential chain."""
    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: Optional[str] = field(default=None, repr=False)

    def to_client_kwargs(self) -> Dict[str, Any]:
        kwargs = {
            'aws_access_key_id': self.access_key_id,
            'aws_secret_access_key': self.secret_access_key,
        }
        if self.session_token:
            kwargs['aws_session_token'] = self.session_token
        return kwargs


def build_client_config(
    max_attempts: Optional[int] = None,
    connect_timeout: Optional[float] = None,
    read_timeout: Optional[float] = None
) -> Optional[Config]:
    """
    Build a botocore config carrying retry and timeout settings.

    Returns:
        A botocore Config, or None when nothing was set
    """
    options = {}
    if max_attempts is not None:
        options['retries'] = {'max_attempts': max_attempts, 'mode': 'standard'}
    if connect_timeout is not None:
        options['connect_timeout'] = connect_timeout
    if read_timeout is not None:
        options['read_timeout'] = read_timeout

    return Config(**options) if options else None


def create_ssm_client(
    region: Optional[str] = None,
    credentials: Optional[AWSCredentials] = None,
    profile: Optional[str] = None,
    client_config: Optional[Config] = None
):
    """
    Create a Systems Manager client.

    No request is sent; the client only resolves region and credentials.

    Args:
        region: AWS region name; falls back to the session default when None
        credentials: Explicit credentials overriding the default chain
        profile: AWS profile name to use
        client_config: Optional botocore config (retries, timeouts)

    Returns:
        boto3 SSM client instance

    Raises:
        InvalidArgumentError: If botocore cannot construct the client
    """
    kwargs: Dict[str, Any] = {'region_name': region}
    if client_config is not None:
        kwargs['config'] = client_config
    if credentials is not None:
        kwargs.update(credentials.to_client_kwargs())

    try:
        session = boto3.Session(profile_name=profile) if profile else boto3.Session()
        client = session.client(SERVICE_NAME, **kwargs)
    except BotoCoreError as e:
        logger.error(f"Failed to create {SERVICE_NAME} client for region {region or 'default'}: {e}")
        raise InvalidArgumentError(f"Cannot create {SERVICE_NAME} client: {e}") from e

    logger.debug(f"Created {SERVICE_NAME} client for region {region or 'default'}")
    return client
