"""
Setup, exercise and teardown phases for CDN key integration runs.

A run creates one key of each variant, reads them back, and always
deletes them again. Key ids are carried in a ``CdnKeyRun`` so that the
phases share no module-level state.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List

from .cdn_keys import create_cdn_key, create_cdn_key_akamai, ensure_absent, get_cdn_key
from .exceptions import CdnKeyMismatchError
from .janitor import clean_stale_cdn_keys
from .types import CdnKeyResult, CdnKeyRun

logger = logging.getLogger(__name__)

def setup_cdn_keys(run: CdnKeyRun, client, echo: bool = False) -> List[CdnKeyResult]:
    """Clean stale keys, then create the Cloud CDN, Media CDN and Akamai keys."""
    clean_stale_cdn_keys(run.project_id, run.location, client=client)

    for cdn_key_id in run.key_ids:
        ensure_absent(run.project_id, run.location, cdn_key_id, client=client, echo=False)

    created = [
        create_cdn_key(
            run.project_id, run.location, run.cloud_cdn_key_id,
            run.hostname, run.key_name, run.cloud_cdn_private_key,
            is_media_cdn=False, client=client, echo=echo,
        ),
        create_cdn_key(
            run.project_id, run.location, run.media_cdn_key_id,
            run.hostname, run.key_name, run.media_cdn_private_key,
            is_media_cdn=True, client=client, echo=echo,
        ),
        create_cdn_key_akamai(
            run.project_id, run.location, run.akamai_key_id,
            run.hostname, run.akamai_token_key, client=client, echo=echo,
        ),
    ]
    logger.info(f"Created CDN keys: {', '.join(run.key_ids)}")
    return created

def exercise_cdn_keys(run: CdnKeyRun, client, echo: bool = True) -> List[CdnKeyResult]:
    """Fetch every key of the run and check the reported resource names."""
    results = []
    for cdn_key_id, expected in run.expected_names.items():
        result = get_cdn_key(run.project_id, run.location, cdn_key_id, client=client, echo=echo)
        if not result.name.endswith(expected):
            raise CdnKeyMismatchError(f"Expected a name ending in {expected}, got {result.name}")
        results.append(result)
    return results

def teardown_cdn_keys(run: CdnKeyRun, client) -> None:
    """Delete all keys of the run.

    Every id is attempted; the first failure is re-raised afterwards.
    """
    failure = None
    for cdn_key_id in run.key_ids:
        try:
            ensure_absent(run.project_id, run.location, cdn_key_id, client=client, echo=False)
        except Exception as e:
            logger.error(f"Failed to delete CDN key {cdn_key_id}: {e}")
            if failure is None:
                failure = e
    if failure is not None:
        raise failure

@contextmanager
def cdn_key_lifecycle(run: CdnKeyRun, client) -> Iterator[CdnKeyRun]:
    """Set up the run's keys and guarantee teardown, even if setup fails midway.

    When the run itself fails, a teardown failure is logged and the
    original error propagates.
    """
    try:
        setup_cdn_keys(run, client)
        yield run
    except BaseException:
        try:
            teardown_cdn_keys(run, client)
        except Exception as e:
            logger.error(f"Teardown after a failed run also failed: {e}")
        raise
    teardown_cdn_keys(run, client)
