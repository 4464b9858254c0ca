"""
Shared pytest fixtures
"""

import pytest

from miniblog.models import User
from miniblog.store import BlogStore


@pytest.fixture
def store():
    """An empty store."""
    return BlogStore()


@pytest.fixture
def alice():
    return User(id="user-1", name="Alice", avatar_url="https://example.com/alice.png")


@pytest.fixture
def seeded_store(store, alice):
    """A store holding a single user, Alice, stored under user-1."""
    store.insert_user(alice)
    return store
