"""
CDN key operations for the Video Stitcher API.

Each function builds a request, issues a single call and returns a
``CdnKeyResult``. With ``echo`` enabled a line containing the resource
name is printed, matching the output of the published samples.
"""

import logging
from typing import List, Optional

from google.api_core.exceptions import NotFound
from google.cloud.video import stitcher_v1

from .types import CdnKeyResult
from .utils import cdn_key_path, get_stitcher_client, location_path

logger = logging.getLogger(__name__)

def create_cdn_key(
    project_id: str,
    location: str,
    cdn_key_id: str,
    hostname: str,
    key_name: str,
    private_key: str,
    is_media_cdn: bool = False,
    client: Optional[stitcher_v1.VideoStitcherServiceClient] = None,
    echo: bool = True,
) -> CdnKeyResult:
    """Create a Cloud CDN or Media CDN key.

    Args:
        project_id: Google Cloud project id
        location: Region of the key, e.g. ``us-central1``
        cdn_key_id: Id of the new key
        hostname: Hostname served by the CDN
        key_name: Name of the key field on the CDN side
        private_key: Base64-encoded private key
        is_media_cdn: Create a Media CDN key instead of a Cloud CDN key
    """
    client = client or get_stitcher_client()

    cdn_key = stitcher_v1.CdnKey(
        name=cdn_key_path(project_id, location, cdn_key_id),
        hostname=hostname,
    )
    if is_media_cdn:
        cdn_key.media_cdn_key = stitcher_v1.MediaCdnKey(
            key_name=key_name,
            private_key=private_key,
        )
    else:
        cdn_key.google_cdn_key = stitcher_v1.GoogleCdnKey(
            key_name=key_name,
            private_key=private_key,
        )

    request = stitcher_v1.CreateCdnKeyRequest(
        parent=location_path(project_id, location),
        cdn_key_id=cdn_key_id,
        cdn_key=cdn_key,
    )
    logger.debug(f"Creating CDN key {cdn_key_id} in {request.parent}")
    operation = client.create_cdn_key(request=request)
    response = operation.result()

    if echo:
        print(f"CDN key: {response.name}")
    return CdnKeyResult.from_cdn_key(response)

def create_cdn_key_akamai(
    project_id: str,
    location: str,
    cdn_key_id: str,
    hostname: str,
    akamai_token_key: str,
    client: Optional[stitcher_v1.VideoStitcherServiceClient] = None,
    echo: bool = True,
) -> CdnKeyResult:
    """Create an Akamai CDN key from a base64-encoded token key."""
    client = client or get_stitcher_client()

    cdn_key = stitcher_v1.CdnKey(
        name=cdn_key_path(project_id, location, cdn_key_id),
        hostname=hostname,
        akamai_cdn_key=stitcher_v1.AkamaiCdnKey(
            token_key=akamai_token_key,
        ),
    )

    request = stitcher_v1.CreateCdnKeyRequest(
        parent=location_path(project_id, location),
        cdn_key_id=cdn_key_id,
        cdn_key=cdn_key,
    )
    logger.debug(f"Creating Akamai CDN key {cdn_key_id} in {request.parent}")
    operation = client.create_cdn_key(request=request)
    response = operation.result()

    if echo:
        print(f"CDN key: {response.name}")
    return CdnKeyResult.from_cdn_key(response)

def get_cdn_key(
    project_id: str,
    location: str,
    cdn_key_id: str,
    client: Optional[stitcher_v1.VideoStitcherServiceClient] = None,
    echo: bool = True,
) -> CdnKeyResult:
    """Fetch a CDN key. ``NotFound`` propagates if the key does not exist."""
    client = client or get_stitcher_client()

    request = stitcher_v1.GetCdnKeyRequest(
        name=cdn_key_path(project_id, location, cdn_key_id),
    )
    response = client.get_cdn_key(request=request)

    if echo:
        print(f"CDN key: {response.name}")
    return CdnKeyResult.from_cdn_key(response)

def delete_cdn_key(
    project_id: str,
    location: str,
    cdn_key_id: str,
    client: Optional[stitcher_v1.VideoStitcherServiceClient] = None,
    echo: bool = True,
) -> str:
    """Delete a CDN key and return its resource name.

    ``NotFound`` propagates; use ``ensure_absent`` when a missing key is fine.
    """
    client = client or get_stitcher_client()

    request = stitcher_v1.DeleteCdnKeyRequest(
        name=cdn_key_path(project_id, location, cdn_key_id),
    )
    operation = client.delete_cdn_key(request=request)
    operation.result()

    if echo:
        print(f"Deleted CDN key: {request.name}")
    return request.name

def ensure_absent(
    project_id: str,
    location: str,
    cdn_key_id: str,
    client: Optional[stitcher_v1.VideoStitcherServiceClient] = None,
    echo: bool = True,
) -> bool:
    """Delete a CDN key if it exists.

    Returns:
        True if a key was deleted, False if there was nothing to delete
    """
    try:
        delete_cdn_key(project_id, location, cdn_key_id, client=client, echo=echo)
    except NotFound:
        logger.info(f"CDN key {cdn_key_id} already absent")
        return False
    return True

def list_cdn_keys(
    project_id: str,
    location: str,
    client: Optional[stitcher_v1.VideoStitcherServiceClient] = None,
    echo: bool = True,
) -> List[CdnKeyResult]:
    """List all CDN keys in a location."""
    client = client or get_stitcher_client()

    request = stitcher_v1.ListCdnKeysRequest(
        parent=location_path(project_id, location),
    )
    results = []
    if echo:
        print("CDN keys:")
    for cdn_key in client.list_cdn_keys(request=request):
        if echo:
            print(cdn_key.name)
        results.append(CdnKeyResult.from_cdn_key(cdn_key))
    return results
