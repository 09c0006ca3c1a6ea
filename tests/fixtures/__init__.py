"""Test fixtures for pytest.

This module re-exports the in-memory Algolia fake for easier importing.
"""

from .fake_algolia import ADMIN_KEY, APP_ID, FakeAlgolia, FakeIndex

__all__ = [
    "ADMIN_KEY",
    "APP_ID",
    "FakeAlgolia",
    "FakeIndex",
]
