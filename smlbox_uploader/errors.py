class SmlBoxError(Exception):
    """Base error for the uploader."""


class ConfigurationError(SmlBoxError):
    """Raised when a required setting is missing from `.env`."""


class UpstreamFetchError(SmlBoxError):
    """Raised when a playlist or the panel cannot be fetched."""
