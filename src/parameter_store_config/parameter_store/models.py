"""Parameter Store data returned by GetParametersByPath."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ParameterType(str, Enum):
    """Parameter Store value types."""
    STRING = 'String'
    STRING_LIST = 'StringList'
    SECURE_STRING = 'SecureString'


@dataclass(frozen=True)
class Parameter:
    """A single parameter snapshot.

    ``value`` is left out of the repr so secrets never end up in tracebacks
    or log messages by accident.
    """
    name: str
    value: str = field(repr=False)
    type: ParameterType = ParameterType.STRING
    version: Optional[int] = None

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> 'Parameter':
        """
        Build a parameter from one entry of the ``Parameters`` list.

        Raises:
            KeyError: If the entry has no Name or Value
            ValueError: If the Type is not a known parameter type
        """
        return cls(
            name=raw['Name'],
            value=raw['Value'],
            type=ParameterType(raw.get('Type', ParameterType.STRING.value)),
            version=raw.get('Version'),
        )

    @property
    def is_secure(self) -> bool:
        return self.type is ParameterType.SECURE_STRING

    def split_list(self) -> List[str]:
        """Split a comma-delimited StringList value into its elements."""
        return self.value.split(',')


@dataclass
class ParameterPage:
    """One page of a GetParametersByPath response."""
    parameters: List[Parameter]
    next_token: Optional[str] = None

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> 'ParameterPage':
        parameters = [Parameter.from_api(raw) for raw in response['Parameters']]
        return cls(parameters=parameters, next_token=response.get('NextToken') or None)
