class StitcherError(Exception):
    """Base exception for CDN key sample errors."""
    pass

class MissingConfigurationError(StitcherError):
    """A required environment variable is not set."""
    pass

class CdnKeyMismatchError(StitcherError):
    """A fetched CDN key does not carry the expected resource name."""
    pass
