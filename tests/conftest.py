# tests\conftest.py
import pytest
from unittest.mock import MagicMock

from gaudi.shared.container import Container
from gaudi.core.domain.models import Room
from gaudi.core.ports.room_repository import IRoomRepository
from gaudi.adapters.persistence.memory_repo import MemoryRoomRepository
from gaudi.adapters.persistence.orm import build_session_factory

ROOM_DICTS = [
    {
        "code": "f853578c-fc0f-4e65-81b8-566c5dffa35a",
        "size": 215,
        "price": 39,
        "longitude": -0.09998975,
        "latitude": 51.75436293,
    },
    {
        "code": "fe2c3195-aeff-487a-a08f-e0bdc0ec6e9a",
        "size": 405,
        "price": 66,
        "longitude": 0.18228006,
        "latitude": 51.74640997,
    },
    {
        "code": "913694c6-435a-4366-ba0d-da5334a611b2",
        "size": 56,
        "price": 60,
        "longitude": 0.27891577,
        "latitude": 51.45994069,
    },
    {
        "code": "eed76e77-55c1-41ce-985d-ca49bf6c0585",
        "size": 93,
        "price": 48,
        "longitude": 0.33894476,
        "latitude": 51.39916678,
    },
]

@pytest.fixture
def room_dicts():
    """Four rooms, as plain dictionaries."""
    return [dict(room) for room in ROOM_DICTS]

@pytest.fixture
def sample_room(room_dicts):
    return Room(**room_dicts[0])

@pytest.fixture(scope="function")
def mock_room_repository():
    """Returns a mock implementation of the Room Repository."""
    repo = MagicMock(spec=IRoomRepository)
    repo.room_list.return_value = []
    return repo

@pytest.fixture
def memory_repository(room_dicts):
    return MemoryRoomRepository(room_dicts)

@pytest.fixture
def session_factory():
    """A fresh in-memory SQLite database for each test."""
    return build_session_factory("sqlite://")

@pytest.fixture(scope="function")
def container(mock_room_repository):
    """
    Sets up the Dependency Injection Container for testing.
    The room repository provider is overridden with the mock defined above.
    """
    container = Container()
    container.room_repository.override(mock_room_repository)

    yield container

    container.room_repository.reset_override()
