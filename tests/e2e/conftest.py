"""Fixtures for end-to-end API tests.

The app runs against a test container with in-memory persistence, so no
database is needed. Repositories are APP scoped, so state persists across
requests within one test.
"""

import asyncio

import pytest
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from collab.config import Settings
from collab.domain.repository import ObjectiveRepository
from collab.interface.api.app import create_app
from collab.util.jwt import create_token
from tests.di import build_test_container
from tests.fixtures import OWNER_EMAIL, OWNER_ID, seed_objective


@pytest.fixture
def container():
    return build_test_container(None, FastapiProvider())


@pytest.fixture
def client(container):
    """Unauthenticated client (a guest)."""
    return TestClient(create_app(container=container))


@pytest.fixture
def objective(container):
    """Objective ``obj-1`` owned by ``OWNER_ID``."""

    async def _seed():
        return await seed_objective(await container.get(ObjectiveRepository))

    return asyncio.run(_seed())


@pytest.fixture
def owner_client(container, objective):
    """Client carrying the owner's auth cookie, with ``obj-1`` seeded."""
    client = TestClient(create_app(container=container))
    token = create_token(OWNER_ID, OWNER_EMAIL, Settings().auth)
    client.cookies.set("auth_token", token)
    return client
