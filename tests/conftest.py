import pytest
from fastapi.testclient import TestClient

from fruitstand.config import Settings
from fruitstand.main import create_app
from fruitstand.models import Fruit, FruitStore


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def store():
    return FruitStore([
        Fruit(name="apple", color="red", ready_to_eat=True),
        Fruit(name="pear", color="green", ready_to_eat=False),
        Fruit(name="banana", color="yellow", ready_to_eat=True),
    ])


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)
