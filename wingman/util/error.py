"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are missing or unsafe for the selected environment."""

    pass


class DependencyInjectionError(UtilError):
    """A provider implementation could not be resolved."""

    pass
