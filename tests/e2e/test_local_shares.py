"""End-to-end tests for local capability routes."""

import pytest
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from collab.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def local_client(monkeypatch):
    """Client for an app started with local mode enabled."""
    monkeypatch.setenv("SHARING__LOCAL_MODE_ENABLED", "true")
    container = build_test_container(None, FastapiProvider())
    return TestClient(create_app(container=container))


class TestLocalShares:
    """Local tokens: mint, accept, list, revoke."""

    def test_disabled_by_default(self, client):
        response = client.get("/local/shares")

        assert response.status_code == 404

    def test_full_cycle(self, local_client):
        minted = local_client.post(
            "/local/shares/obj-1/token", params={"role": "viewer"}
        ).json()
        again = local_client.post(
            "/local/shares/obj-1/token", params={"role": "viewer"}
        ).json()
        assert minted["token"] == again["token"]
        assert minted["url"].endswith(f"/share/{minted['token']}")

        accepted = local_client.post(
            "/local/shares/obj-1/accept",
            json={"token": minted["token"], "role": "viewer"},
        )
        assert accepted.json() == {"accepted": True}
        listed = local_client.get("/local/shares").json()["shares"]
        assert listed == [
            {"resource_id": "obj-1", "role": "viewer", "token": minted["token"]}
        ]

        revoked = local_client.post(
            "/local/shares/obj-1/revoke", json={"token": minted["token"]}
        )
        assert revoked.json() == {"revoked": True}
        assert local_client.get("/local/shares").json()["shares"] == []

    def test_mismatched_role_not_accepted(self, local_client):
        token = local_client.post(
            "/local/shares/obj-1/token", params={"role": "viewer"}
        ).json()["token"]

        response = local_client.post(
            "/local/shares/obj-1/accept", json={"token": token, "role": "editor"}
        )

        assert response.json() == {"accepted": False}
