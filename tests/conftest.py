"""Pytest fixtures for the Squares web service."""
import pytest
from fastapi.testclient import TestClient

from squares.main import create_app
from squares.services.square_store import SquareStore


@pytest.fixture
def squares_path(tmp_path):
    return tmp_path / "squares.json"


@pytest.fixture
def store(squares_path):
    store = SquareStore(str(squares_path))
    store.load()
    return store


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client
