import time
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel

from .utils import cdn_key_suffix, get_cdn_key_id

# CDN key variants, named after the cdn_key_config field they populate
class CdnKeyVariant(str, Enum):
    CLOUD_CDN = "cloud-cdn"
    MEDIA_CDN = "media-cdn"
    AKAMAI = "akamai"

class CdnKeyResult(BaseModel):
    name: str
    hostname: Optional[str] = None
    variant: Optional[CdnKeyVariant] = None
    key_name: Optional[str] = None

    @classmethod
    def from_cdn_key(cls, cdn_key) -> "CdnKeyResult":
        """Build a result from a ``stitcher_v1.CdnKey`` message.

        Key material is never copied; the service does not return it.
        """
        variant = None
        key_name = None
        if "google_cdn_key" in cdn_key:
            variant = CdnKeyVariant.CLOUD_CDN
            key_name = cdn_key.google_cdn_key.key_name
        elif "media_cdn_key" in cdn_key:
            variant = CdnKeyVariant.MEDIA_CDN
            key_name = cdn_key.media_cdn_key.key_name
        elif "akamai_cdn_key" in cdn_key:
            variant = CdnKeyVariant.AKAMAI
        return cls(
            name=cdn_key.name,
            hostname=cdn_key.hostname or None,
            variant=variant,
            key_name=key_name or None,
        )

class CdnKeyRun(BaseModel):
    """Context shared by the setup, exercise and teardown phases of one run."""
    project_id: str
    location: str = "us-central1"
    cloud_cdn_key_id: str
    media_cdn_key_id: str
    akamai_key_id: str
    hostname: str = "cdn.example.com"
    key_name: str = "my-key"
    cloud_cdn_private_key: str = "VGhpcyBpcyBhIHRlc3Qgc3RyaW5nLg=="
    media_cdn_private_key: str = "MTIzNDU2Nzg5MDEyMzQ1Njc4OTAxMjM0NTY3ODkwMTIzNDU2Nzg5MDEyMzQ1Njc4OTAxMjM0NTY3ODkwMTIzNA=="
    akamai_token_key: str = "VGhpcyBpcyBhIHRlc3Qgc3RyaW5nLg=="

    @classmethod
    def new(cls, project_id: str, location: str = "us-central1",
            timestamp: Optional[int] = None, **overrides) -> "CdnKeyRun":
        if timestamp is None:
            timestamp = int(time.time())
        return cls(
            project_id=project_id,
            location=location,
            cloud_cdn_key_id=get_cdn_key_id("my-test-cloud", timestamp),
            media_cdn_key_id=get_cdn_key_id("my-test-media", timestamp),
            akamai_key_id=get_cdn_key_id("my-test-akamai", timestamp),
            **overrides,
        )

    @property
    def key_ids(self) -> List[str]:
        return [self.cloud_cdn_key_id, self.media_cdn_key_id, self.akamai_key_id]

    @property
    def expected_names(self) -> Dict[str, str]:
        """Map of key id to the resource name suffix the service must report."""
        return {key_id: cdn_key_suffix(self.location, key_id) for key_id in self.key_ids}
