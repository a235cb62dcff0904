"""Utility layer errors.

Raised while wiring the application, never while serving a request.
"""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are unusable for the selected environment."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation exists for a component."""

    pass
