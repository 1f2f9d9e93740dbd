"""Shared fixtures: an in-memory stand-in for the Video Stitcher client."""

from __future__ import annotations

import pytest
from google.api_core.exceptions import AlreadyExists, InvalidArgument, NotFound
from google.cloud.video import stitcher_v1

PROJECT_ID = "my-project"
PROJECT_NUMBER = "123456789"
LOCATION = "us-central1"
MEDIA_CDN_KEY_BYTES = 64


class FakeOperation:
    """Completed long-running operation."""

    def __init__(self, result=None):
        self._result = result

    def result(self, timeout=None):
        return self._result


class FakeStitcherClient:
    """Keeps CDN keys in a dict and reports names with the project number."""

    def __init__(self):
        self.keys: dict[str, stitcher_v1.CdnKey] = {}

    @staticmethod
    def _service_name(name: str) -> str:
        return name.replace(f"projects/{PROJECT_ID}/", f"projects/{PROJECT_NUMBER}/")

    def create_cdn_key(self, request):
        name = f"{request.parent}/cdnKeys/{request.cdn_key_id}"
        if name in self.keys:
            raise AlreadyExists(f"CDN key {name} already exists")

        submitted = request.cdn_key
        if "media_cdn_key" in submitted and len(submitted.media_cdn_key.private_key) != MEDIA_CDN_KEY_BYTES:
            raise InvalidArgument("Media CDN private key must be a 64-byte ed25519 key")
        stored = stitcher_v1.CdnKey.deserialize(stitcher_v1.CdnKey.serialize(submitted))
        stored.name = self._service_name(name)
        self.keys[name] = stored
        return FakeOperation(stored)

    def get_cdn_key(self, request):
        if request.name not in self.keys:
            raise NotFound(f"CDN key {request.name} not found")
        return self.keys[request.name]

    def delete_cdn_key(self, request):
        if request.name not in self.keys:
            raise NotFound(f"CDN key {request.name} not found")
        del self.keys[request.name]
        return FakeOperation()

    def list_cdn_keys(self, request):
        prefix = f"{request.parent}/cdnKeys/"
        return iter([key for name, key in self.keys.items() if name.startswith(prefix)])

    def add_key(self, cdn_key_id: str, location: str = LOCATION) -> None:
        """Seed a Cloud CDN key without going through create."""
        name = f"projects/{PROJECT_ID}/locations/{location}/cdnKeys/{cdn_key_id}"
        self.keys[name] = stitcher_v1.CdnKey(
            name=self._service_name(name),
            hostname="cdn.example.com",
            google_cdn_key=stitcher_v1.GoogleCdnKey(key_name="my-key"),
        )

    def key_ids(self) -> list[str]:
        return sorted(name.rsplit("/", 1)[-1] for name in self.keys)


@pytest.fixture
def fake_client() -> FakeStitcherClient:
    return FakeStitcherClient()


@pytest.fixture
def project_id() -> str:
    return PROJECT_ID


@pytest.fixture
def location() -> str:
    return LOCATION
