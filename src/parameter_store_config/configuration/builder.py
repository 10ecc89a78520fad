"""Compose configuration providers into a single key lookup."""

import logging
from typing import Dict, Iterator, List, Optional

from .interfaces import ConfigurationProvider, ConfigurationSource, KEY_DELIMITER

logger = logging.getLogger(__name__)


class MemoryConfigurationProvider(ConfigurationProvider):
    """Provider backed by a static dictionary."""

    def __init__(self, initial_data: Optional[Dict[str, str]] = None):
        super().__init__()
        self._initial_data = dict(initial_data or {})

    def load(self) -> None:
        self.data = dict(self._initial_data)


class MemoryConfigurationSource(ConfigurationSource):
    """Source for in-memory values such as defaults."""

    def __init__(self, initial_data: Optional[Dict[str, str]] = None):
        self.initial_data = dict(initial_data or {})

    def build(self, builder=None) -> MemoryConfigurationProvider:
        return MemoryConfigurationProvider(self.initial_data)


class ConfigurationBuilder:
    """Collects configuration sources in order of precedence (lowest first)."""

    def __init__(self):
        self.sources: List[ConfigurationSource] = []

    def add(self, source: ConfigurationSource) -> 'ConfigurationBuilder':
        """Add a source. Sources added later take precedence."""
        if source is None:
            raise ValueError("source must not be None")
        self.sources.append(source)
        return self

    def build(self) -> 'Configuration':
        """Build a provider for every source, load them and return the result."""
        providers = [source.build(self) for source in self.sources]
        configuration = Configuration(providers)
        configuration.reload()
        return configuration


class Configuration:
    """Read view over a list of loaded providers.

    Lookups walk the providers from last to first, so the most recently added
    source wins.
    """

    def __init__(self, providers: List[ConfigurationProvider]):
        self.providers = list(providers)

    def reload(self) -> None:
        for provider in self.providers:
            provider.load()
        logger.debug(f"Loaded {len(self.providers)} configuration providers")

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        for provider in reversed(self.providers):
            value = provider.try_get(key)
            if value is not None:
                return value
        return default

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def keys(self) -> List[str]:
        seen = {}
        for provider in self.providers:
            for key in provider.data:
                seen.setdefault(key, None)
        return list(seen)

    def as_dict(self) -> Dict[str, str]:
        """Flatten all providers into one dictionary, applying precedence."""
        result = {}
        for provider in self.providers:
            result.update(provider.data)
        return result

    def get_section(self, prefix: str) -> Dict[str, str]:
        """
        Get all keys below a section with the section prefix removed.

        Args:
            prefix: Flat key of the section (e.g. 'app:db')

        Returns:
            Dictionary of relative keys to values
        """
        start = f"{prefix}{KEY_DELIMITER}"
        return {
            key[len(start):]: value
            for key, value in self.as_dict().items()
            if key.startswith(start)
        }

    def get_list(self, key: str) -> List[str]:
        """Get the indexed children of ``key`` (``key:0``, ``key:1``, ...) in index order."""
        items = []
        for child, value in self.get_section(key).items():
            if KEY_DELIMITER in child or not child.isdigit():
                continue
            items.append((int(child), value))
        return [value for _, value in sorted(items)]
