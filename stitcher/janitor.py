import time
import logging
from typing import List, Optional

from .cdn_keys import ensure_absent, list_cdn_keys
from .utils import cdn_key_timestamp, get_stitcher_client, parse_cdn_key_id

logger = logging.getLogger(__name__)

# Keys from runs older than this are assumed abandoned
DELETION_THRESHOLD_SECONDS = 3 * 60 * 60

def clean_stale_cdn_keys(
    project_id: str,
    location: str,
    client=None,
    max_age_seconds: int = DELETION_THRESHOLD_SECONDS,
    now: Optional[float] = None,
) -> List[str]:
    """Delete CDN keys left behind by earlier aborted test runs.

    Only ids following the ``cdnkey-<prefix>-<epoch>`` convention are
    considered, and only when older than ``max_age_seconds``.

    Returns:
        Ids of the deleted keys
    """
    client = client or get_stitcher_client()
    if now is None:
        now = time.time()

    deleted = []
    for cdn_key in list_cdn_keys(project_id, location, client=client, echo=False):
        cdn_key_id = parse_cdn_key_id(cdn_key.name)
        created = cdn_key_timestamp(cdn_key_id)
        if created is None:
            continue
        if now - created < max_age_seconds:
            continue
        if ensure_absent(project_id, location, cdn_key_id, client=client, echo=False):
            deleted.append(cdn_key_id)

    if deleted:
        logger.info(f"Removed {len(deleted)} stale CDN key(s) from {location}: {', '.join(deleted)}")
    return deleted
