# gaudi/core/use_cases/rooms.py
from collections.abc import Mapping
from typing import Iterable

from gaudi.core.domain.requests import ParameterError, ValidRequest
from gaudi.core.ports.room_repository import IRoomRepository
from gaudi.core.use_cases.crud import CreateUseCase, DeleteUseCase, GetUseCase, ListUseCase

ROOM_FILTERS = ("code__eq", "price__eq", "price__lt", "price__gt")


class RoomCreate(CreateUseCase):
    """Use Case: stores a new Room from the given fields."""
    entity = "room"
    port = IRoomRepository


class RoomGet(GetUseCase):
    """Use Case: fetches the single Room matching the given fields."""
    entity = "room"
    port = IRoomRepository


class RoomList(ListUseCase):
    """
    Use Case: lists Rooms, optionally filtered.
    Only the filters understood by every room repository are accepted.
    """
    entity = "room"
    port = IRoomRepository

    def check_request(self, request: ValidRequest) -> Iterable[ParameterError]:
        yield from super().check_request(request)

        filters = request.filters
        if filters is None:
            return
        if not isinstance(filters, Mapping):
            yield ("filters", "Is not iterable")
            return

        for key in filters:
            if key not in ROOM_FILTERS:
                yield ("filters", f"Key {key} cannot be used")


class RoomDelete(DeleteUseCase):
    """Use Case: removes the single Room matching the given fields."""
    entity = "room"
    port = IRoomRepository
