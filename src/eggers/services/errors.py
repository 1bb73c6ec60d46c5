"""Service-layer exceptions."""


class ConfigError(Exception):
    """Base exception for configuration persistence."""


class ConfigLoadError(ConfigError):
    """Raised when the configuration document cannot be read or parsed."""


class ConfigSaveError(ConfigError):
    """Raised when the configuration document cannot be written."""
