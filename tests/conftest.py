"""
- Keep the API out of dev-only setup (CORS for local front-ends)
- Provide helpers that give a predictable secret instead of a random one
- Provide a client fixture (TestClient(app)) with a fresh in-memory store
  and the secret generator overridden
"""
import os
import pytest

from fastapi.testclient import TestClient

os.environ.setdefault("APP_ENV", "test")

from codebreaker.config import GameConfig
from codebreaker.main import app, get_secret_generator, get_store
from codebreaker.store import GameStore


def fixed_generator(secret):
    """A generator that ignores randomness and always hands out `secret`."""
    def generate(config: GameConfig):
        return list(secret)
    return generate


def sequence_generator(*secrets):
    """Hands out each secret in turn, one per new play-through."""
    remaining = [list(s) for s in secrets]

    def generate(config: GameConfig):
        return remaining.pop(0)
    return generate


@pytest.fixture
def config() -> GameConfig:
    # 4 digits, 0..6 -> 10 attempts
    return GameConfig(code_length=4, max_digit=6)


@pytest.fixture
def store() -> GameStore:
    return GameStore()


@pytest.fixture
def client(store):
    """
    Every request uses this test's own store and the secret [0, 1, 2, 3]
    (or the first `code_length` digits of it padded with 0s).
    """
    def _generator():
        def generate(config: GameConfig):
            base = [0, 1, 2, 3, 0, 0]
            return base[: config.code_length]
        return generate

    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_secret_generator] = _generator
    # entering the client runs the app lifespan (settings + logging)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
