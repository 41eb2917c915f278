"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from quicknotes.app import App
from quicknotes.config import Config
from quicknotes.core.modules.note.store import NoteStore
from quicknotes.web.server import create_fastapi_app


@pytest.fixture
def config():
    """Configuration isolated from the environment and any .env file."""
    return Config(_env_file=None, host="127.0.0.1", port=3000, debug=True, max_body_size=64 * 1024)


@pytest.fixture
def store():
    """Fresh empty store for each test."""
    return NoteStore()


@pytest.fixture
def fastapi_app(config, store):
    return create_fastapi_app(App(config, store), config)


@pytest.fixture
def client(fastapi_app):
    with TestClient(fastapi_app) as test_client:
        yield test_client


@pytest.fixture
def make_notes(store):
    """Create numbered notes directly in the store."""

    def _make(count: int, title: str = "Note", content: str = "Body") -> list:
        return [store.create(f"{title} {i}", f"{content} {i}") for i in range(1, count + 1)]

    return _make
