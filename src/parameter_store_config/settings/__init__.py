"""Settings for the Parameter Store source."""

from .loader import SettingsLoader, load_settings
from .schema import ParameterStoreSettings, validate_settings

__all__ = ["ParameterStoreSettings", "SettingsLoader", "load_settings", "validate_settings"]
