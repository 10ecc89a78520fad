"""Settings schema for the Parameter Store source."""

from typing import Any, Dict, Optional
import logging

from botocore.config import Config
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import InvalidArgumentError
from ..parameter_store.client import build_client_config

logger = logging.getLogger(__name__)


class ParameterStoreSettings(BaseModel):
    """Settings for building a ParameterStoreSource."""

    root_path: str = Field(
        description="Parameter hierarchy to load, e.g. /app/prod"
    )
    region: Optional[str] = Field(
        default=None,
        description="AWS region; the boto3 default is used when unset"
    )
    profile: Optional[str] = Field(
        default=None,
        description="AWS CLI profile to use for authentication"
    )
    parse_string_list_as_list: bool = Field(
        default=False,
        description="Expand StringList values into indexed keys"
    )
    fail_if_cant_load: bool = Field(
        default=False,
        description="Raise instead of continuing when parameters cannot be loaded"
    )
    max_attempts: Optional[int] = Field(
        default=None,
        ge=1,
        description="Total attempts per request, including the first one"
    )
    connect_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Connection timeout in seconds"
    )
    read_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Read timeout in seconds"
    )

    @field_validator('root_path')
    @classmethod
    def _root_path_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("root_path must not be empty")
        return value

    def client_config(self) -> Optional[Config]:
        return build_client_config(
            max_attempts=self.max_attempts,
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
        )


def validate_settings(config: Dict[str, Any]) -> ParameterStoreSettings:
    """Validate a settings dictionary.

    Args:
        config: Merged settings dictionary

    Returns:
        Validated settings

    Raises:
        InvalidArgumentError: If settings are invalid
    """
    try:
        settings = ParameterStoreSettings(**config)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        error_msg = "Settings validation failed:\n" + "\n".join(errors)
        logger.error(error_msg)
        raise InvalidArgumentError(error_msg) from e

    logger.debug("Settings validation passed")
    return settings
