"""Configuration provider backed by AWS Systems Manager Parameter Store."""

from typing import Optional, Set

from ..configuration.interfaces import ConfigurationProvider, KEY_DELIMITER
from ..errors import InvalidArgumentError, RemoteFetchError
from ..log import LoggerFactory, null_logger_factory
from .keys import flatten_name, list_item_key
from .models import Parameter, ParameterPage, ParameterType

PAGE_SIZE = 10

OPERATION = 'get_parameters_by_path'


class ParameterStoreProvider(ConfigurationProvider):
    """Loads every parameter below a root path into flat configuration keys."""

    def __init__(
        self,
        client,
        root_path: str,
        parse_string_list_as_list: bool = False,
        fail_if_cant_load: bool = False,
        logger_factory: Optional[LoggerFactory] = None,
        delimiter: str = KEY_DELIMITER
    ):
        """
        Initialize the provider.

        Args:
            client: boto3 SSM client (anything with ``get_paginator``)
            root_path: Parameter hierarchy to load, e.g. '/app'
            parse_string_list_as_list: Expand StringList values into indexed keys
            fail_if_cant_load: Raise RemoteFetchError instead of logging and continuing
            logger_factory: Callable returning a logger for a name; defaults to a no-op logger
            delimiter: Separator used between flat key segments
        """
        super().__init__()
        if not root_path:
            raise InvalidArgumentError("root_path is required")
        if client is None:
            raise InvalidArgumentError("client is required")

        self.client = client
        self.root_path = root_path
        self.parse_string_list_as_list = parse_string_list_as_list
        self.fail_if_cant_load = fail_if_cant_load
        self.delimiter = delimiter
        self.secure_keys: Set[str] = set()

        factory = logger_factory or null_logger_factory
        self.logger = factory(f"{__name__}.{type(self).__name__}")

    def load(self) -> None:
        """Replace ``data`` with the current contents of the parameter hierarchy.

        Failures are logged. They only propagate, as RemoteFetchError, when
        ``fail_if_cant_load`` is set; otherwise ``data`` keeps whatever was
        loaded before the failure.
        """
        self.data = {}
        self.secure_keys = set()

        try:
            self._load_parameters()
        except Exception as e:
            self.logger.error(
                f"Failed to access AWS Systems Manager Parameter Store at '{self.root_path}': {e}",
                exc_info=True,
                extra={'parameters_path': self.root_path},
            )
            if self.fail_if_cant_load:
                raise RemoteFetchError(
                    f"Failed to load parameters from '{self.root_path}': {e}",
                    root_path=self.root_path,
                ) from e

    def _load_parameters(self) -> None:
        paginator = self.client.get_paginator(OPERATION)
        pages = paginator.paginate(
            Path=self.root_path,
            Recursive=True,
            WithDecryption=True,
            PaginationConfig={'PageSize': PAGE_SIZE},
        )

        for response in pages:
            page = ParameterPage.from_response(response)

            self.logger.info(
                f"Parameter Store has {len(page.parameters)} parameters in '{self.root_path}'",
                extra={'parameters_count': len(page.parameters), 'parameters_path': self.root_path},
            )

            for parameter in page.parameters:
                self._log_parameter(parameter)
                self._add_parameter(parameter)

        self.logger.info(
            f"Parameter Store has returned {len(self.data)} parameters in total",
            extra={'total_parameters_count': len(self.data), 'parameters_path': self.root_path},
        )

    def _log_parameter(self, parameter: Parameter) -> None:
        if parameter.is_secure:
            self.logger.info(
                f"Parameter Store has returned {parameter.name}",
                extra={'parameter_name': parameter.name, 'parameter_type': parameter.type.value},
            )
        else:
            self.logger.info(
                f"Parameter Store has returned {parameter.name} with value '{parameter.value}'",
                extra={
                    'parameter_name': parameter.name,
                    'parameter_type': parameter.type.value,
                    'parameter_value': parameter.value,
                },
            )

    def _add_parameter(self, parameter: Parameter) -> None:
        key = flatten_name(parameter.name, self.delimiter)

        if parameter.type is ParameterType.STRING_LIST and self.parse_string_list_as_list:
            for index, item in enumerate(parameter.split_list()):
                self.data[list_item_key(key, index, self.delimiter)] = item

        # The unsplit value is kept next to the expanded items.
        self.data[key] = parameter.value

        if parameter.is_secure:
            self.secure_keys.add(key)
