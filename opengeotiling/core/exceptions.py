"""
OpenGeoTiling Exceptions

Exception hierarchy for error handling.
"""


class OpenGeoTilingError(Exception):
    """Base exception for OpenGeoTiling"""

    pass


class InvalidArgumentError(OpenGeoTilingError, ValueError):
    """Argument rejected by a tile operation (bad code, address or size)"""

    pass


class ConfigurationError(OpenGeoTilingError):
    """Tiling configuration is invalid"""

    pass
