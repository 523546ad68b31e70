"""
Exception types for pagesift.

The extraction pipeline itself never raises these: every extraction step
degrades to a default value. They are raised only at the outer surfaces
(configuration loading and the command-line interface).
"""


class PagesiftError(Exception):
    """Base exception for all pagesift errors."""

    pass


class ConfigurationError(PagesiftError):
    """Raised when configuration cannot be loaded or validated."""

    pass


class InvalidBaseURLError(PagesiftError, ValueError):
    """Raised when a base URL is not an absolute http or https URL."""

    pass
