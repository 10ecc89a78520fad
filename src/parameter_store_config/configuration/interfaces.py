"""Base classes for configuration sources and providers."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

KEY_DELIMITER = ':'


class ConfigurationProvider(ABC):
    """Abstract base class for anything that loads flat configuration keys."""

    def __init__(self):
        self.data: Dict[str, str] = {}

    @abstractmethod
    def load(self) -> None:
        """Populate ``data``."""
        pass

    def try_get(self, key: str) -> Optional[str]:
        """Return the value for ``key`` or None if this provider does not have it."""
        return self.data.get(key)

    def get_child_keys(self, parent: Optional[str] = None) -> List[str]:
        """
        Get the immediate child segments below ``parent``.

        Args:
            parent: Flat key of the parent section, or None for the root

        Returns:
            Distinct child segment names in first-seen order
        """
        prefix = f"{parent}{KEY_DELIMITER}" if parent else ''
        children = []

        for key in self.data:
            if not key.startswith(prefix):
                continue
            segment = key[len(prefix):].split(KEY_DELIMITER, 1)[0]
            if segment and segment not in children:
                children.append(segment)

        return children


class ConfigurationSource(ABC):
    """Abstract base class for configuration sources."""

    @abstractmethod
    def build(self, builder=None) -> ConfigurationProvider:
        """Create a provider for this source."""
        pass
