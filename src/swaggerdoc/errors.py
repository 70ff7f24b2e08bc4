"""Exceptions raised while generating Swagger documentation."""


class SwaggerdocError(Exception):
    """Base class for all swaggerdoc errors."""


class ConfigError(SwaggerdocError):
    """The configuration file is unreadable or holds invalid values."""


class RouterNotFoundError(SwaggerdocError):
    """No route provider could be resolved or imported."""
