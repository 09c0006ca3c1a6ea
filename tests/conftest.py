"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: isolated ALGOLIA_*/LOG_* environment
    - Fake API Fixtures: in-memory Algolia application behind httpx.MockTransport
    - Client Fixtures: clients and indexes wired to the fake application
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
import os

from fixtures.fake_algolia import FakeAlgolia
import pytest

from algolia_client.core.settings import clear_all_caches
from algolia_client.search import AlgoliaClient, Index

# Never pick up a developer's real credentials or .env overrides
for _name in list(os.environ):
    if _name.startswith(("ALGOLIA_", "LOG_")):
        del os.environ[_name]


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings before and after every test."""
    clear_all_caches()
    yield
    clear_all_caches()


@pytest.fixture
def algolia_env(monkeypatch):
    """Set the credentials the CLI and ``from_settings`` read."""
    monkeypatch.setenv("ALGOLIA_APPLICATION_ID", "TESTAPP")
    monkeypatch.setenv("ALGOLIA_API_KEY", "admin-key")
    monkeypatch.setenv("ALGOLIA_WAIT_TASK_INITIAL_DELAY", "0.001")
    monkeypatch.setenv("ALGOLIA_WAIT_TASK_MAX_DELAY", "0.002")
    clear_all_caches()


# ============================================================================
# Fake API Fixtures
# ============================================================================


@pytest.fixture
def fake_algolia() -> FakeAlgolia:
    """Fresh in-memory Algolia application.

    Example:
        async def test_search(fake_algolia, client):
            fake_algolia.add_records("products", [{"objectID": "1", "name": "phone"}])
            res = await client.init_index("products").search("phone")
            assert res.nb_hits == 1
    """
    return FakeAlgolia()


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
async def client(fake_algolia: FakeAlgolia) -> AsyncGenerator[AlgoliaClient]:
    """Client talking to ``fake_algolia``; closed after the test."""
    algolia = fake_algolia.client()
    yield algolia
    await algolia.close()


@pytest.fixture
def index(client: AlgoliaClient) -> Index:
    """Handle on the ``products`` index of the fake application."""
    return client.init_index("products")


@pytest.fixture
def products() -> list[dict]:
    """A few records with facetable attributes."""
    return [
        {"objectID": "1", "name": "Galaxy phone", "brand": "acme", "price": 300},
        {"objectID": "2", "name": "Pixel phone", "brand": "globex", "price": 400},
        {"objectID": "3", "name": "Phone case", "brand": "acme", "price": 20},
        {"objectID": "4", "name": "Laptop", "brand": "initech", "price": 1200},
    ]
