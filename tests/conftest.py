"""Shared fixtures: every test gets its own app and store."""

import pytest
from fastapi.testclient import TestClient

from user_api.config import Settings
from user_api.db.store import UserStore
from user_api.main import create_app


@pytest.fixture
def settings():
    return Settings(app_version="9.9.9", seed_users=True)


@pytest.fixture
def store():
    return UserStore.seeded()


@pytest.fixture
def client(store, settings):
    with TestClient(create_app(store=store, settings=settings)) as c:
        yield c


@pytest.fixture
def empty_client(settings):
    with TestClient(create_app(store=UserStore(), settings=settings)) as c:
        yield c
