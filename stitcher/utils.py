import os
import re
import time
import logging
from typing import Optional

from dotenv import load_dotenv
from google.cloud.video import stitcher_v1
from google.oauth2 import service_account

from .exceptions import MissingConfigurationError

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

CDN_KEY_ID_PREFIX = "cdnkey"
_CDN_KEY_ID_PATTERN = re.compile(rf"^{CDN_KEY_ID_PREFIX}-.+-(\d+)$")

# Helper to retrieve environment variables (with fallback)
def retrieve_environment_variables(var_name, default=None):
    return os.getenv(var_name) or default

def require_env_var(var_name: str) -> str:
    """Return the value of a required environment variable.

    Raises:
        MissingConfigurationError: if the variable is unset or empty
    """
    value = os.getenv(var_name)
    if not value:
        raise MissingConfigurationError(
            f"Environment variable '{var_name}' is required to perform these tests."
        )
    return value

def check_requirements() -> str:
    """Validate credentials and project settings, returning the project id."""
    require_env_var("GOOGLE_APPLICATION_CREDENTIALS")
    return require_env_var("GOOGLE_CLOUD_PROJECT")

# Get GCP credentials from environment variables
def get_gcp_credentials():
    credentials_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    if credentials_path and os.path.isfile(credentials_path):
        return service_account.Credentials.from_service_account_file(credentials_path)

    # Fall back to application default credentials
    logger.info("No service account file found, falling back to default credentials")
    return None

def get_stitcher_client() -> stitcher_v1.VideoStitcherServiceClient:
    """Create a Video Stitcher client using the configured credentials."""
    credentials = get_gcp_credentials()
    if credentials:
        return stitcher_v1.VideoStitcherServiceClient(credentials=credentials)
    return stitcher_v1.VideoStitcherServiceClient()

def get_cdn_key_id(prefix: str, timestamp: Optional[int] = None) -> str:
    """Build a CDN key id for a test run, e.g. ``cdnkey-my-test-cloud-1700000000``."""
    if timestamp is None:
        timestamp = int(time.time())
    return f"{CDN_KEY_ID_PREFIX}-{prefix}-{timestamp}"

def cdn_key_timestamp(cdn_key_id: str) -> Optional[int]:
    """Creation timestamp embedded in a test key id, or None for foreign ids."""
    match = _CDN_KEY_ID_PATTERN.match(cdn_key_id)
    if not match:
        return None
    return int(match.group(1))

def location_path(project_id: str, location: str) -> str:
    return f"projects/{project_id}/locations/{location}"

def cdn_key_path(project_id: str, location: str, cdn_key_id: str) -> str:
    return f"{location_path(project_id, location)}/cdnKeys/{cdn_key_id}"

# The service reports names with the project number rather than the id,
# so only this suffix is stable across callers.
def cdn_key_suffix(location: str, cdn_key_id: str) -> str:
    return f"/locations/{location}/cdnKeys/{cdn_key_id}"

def parse_cdn_key_id(name: str) -> str:
    return name.rstrip("/").rsplit("/", 1)[-1]
