"""
Exceptions raised by the genetic package.
"""


class ConfigurationError(ValueError):
    """Raised when a population or run is configured with invalid parameters."""
