"""Live Video Stitcher fixtures. Requires real Google Cloud access."""

from __future__ import annotations

import os

import pytest

from stitcher.exceptions import MissingConfigurationError
from stitcher.types import CdnKeyRun
from stitcher.utils import check_requirements, get_stitcher_client

ENV_ENABLE = "STITCHER_RUN_INTEGRATION"
LOCATION = "us-central1"


def pytest_collection_modifyitems(config, items):
    if os.getenv(ENV_ENABLE) == "1":
        return
    skip = pytest.mark.skip(reason=f"Set {ENV_ENABLE}=1 to run Video Stitcher integration tests")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def live_project_id() -> str:
    try:
        return check_requirements()
    except MissingConfigurationError as e:
        pytest.exit(str(e), returncode=1)


@pytest.fixture(scope="session")
def live_client(live_project_id):
    return get_stitcher_client()


@pytest.fixture
def live_run(live_project_id) -> CdnKeyRun:
    return CdnKeyRun.new(live_project_id, LOCATION)
