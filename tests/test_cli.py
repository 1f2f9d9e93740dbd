"""Tests for the command line entry point."""

from __future__ import annotations

import pytest

from stitcher.cli import main

PRIVATE_KEY = "VGhpcyBpcyBhIHRlc3Qgc3RyaW5nLg=="
# Media CDN keys are 64-byte ed25519 private keys
MEDIA_PRIVATE_KEY = "MTIzNDU2Nzg5MDEyMzQ1Njc4OTAxMjM0NTY3ODkwMTIzNDU2Nzg5MDEyMzQ1Njc4OTAxMjM0NTY3ODkwMTIzNA=="


def test_create_get_delete(fake_client, project_id, capsys):
    base = ["--project-id", project_id, "--location", "us-central1"]

    assert main(base + ["create", "--cdn-key-id", "k", "--hostname", "cdn.example.com",
                        "--key-name", "my-key", "--private-key", MEDIA_PRIVATE_KEY, "--media-cdn"],
                client=fake_client) == 0
    assert main(base + ["get", "--cdn-key-id", "k"], client=fake_client) == 0
    assert main(base + ["delete", "--cdn-key-id", "k"], client=fake_client) == 0

    output = capsys.readouterr().out
    assert output.count("/locations/us-central1/cdnKeys/k") == 3
    assert fake_client.keys == {}


def test_create_akamai_and_list(fake_client, project_id, capsys):
    base = ["--project-id", project_id]
    main(base + ["create-akamai", "--cdn-key-id", "a", "--hostname", "cdn.example.com",
                 "--akamai-token-key", PRIVATE_KEY], client=fake_client)
    capsys.readouterr()

    main(base + ["list"], client=fake_client)

    assert "/cdnKeys/a" in capsys.readouterr().out


def test_clean(fake_client, project_id, capsys):
    fake_client.add_key("cdnkey-my-test-cloud-1000")

    main(["--project-id", project_id, "clean", "--max-age-seconds", "0"], client=fake_client)

    assert "Deleted 1 stale CDN key(s)" in capsys.readouterr().out
    assert fake_client.keys == {}


def test_missing_project(fake_client, monkeypatch):
    monkeypatch.delenv("GOOGLE_CLOUD_PROJECT", raising=False)
    with pytest.raises(SystemExit):
        main(["--project-id", "", "list"], client=fake_client)
