"""
Video Stitcher CDN keys

This package wraps the Video Stitcher API's CDN key calls for
Cloud CDN, Media CDN and Akamai keys, together with the setup and
cleanup helpers used by the integration tests.
"""

from .exceptions import StitcherError, MissingConfigurationError, CdnKeyMismatchError
from .types import CdnKeyVariant, CdnKeyResult, CdnKeyRun
from .cdn_keys import (
    create_cdn_key, create_cdn_key_akamai, get_cdn_key,
    delete_cdn_key, ensure_absent, list_cdn_keys
)
from .janitor import clean_stale_cdn_keys
from .harness import setup_cdn_keys, exercise_cdn_keys, teardown_cdn_keys, cdn_key_lifecycle

__all__ = [
    # Errors
    'StitcherError', 'MissingConfigurationError', 'CdnKeyMismatchError',

    # Types
    'CdnKeyVariant', 'CdnKeyResult', 'CdnKeyRun',

    # Operations
    'create_cdn_key', 'create_cdn_key_akamai', 'get_cdn_key',
    'delete_cdn_key', 'ensure_absent', 'list_cdn_keys',

    # Cleanup and harness
    'clean_stale_cdn_keys',
    'setup_cdn_keys', 'exercise_cdn_keys', 'teardown_cdn_keys', 'cdn_key_lifecycle'
]
__version__ = "0.1.0"
