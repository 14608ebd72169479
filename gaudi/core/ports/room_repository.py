# gaudi\core\ports\room_repository.py
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from gaudi.core.domain.models import Room


@runtime_checkable
class IRoomRepository(Protocol):
    """
    Port for storing and retrieving Rooms.
    Implementations could be MemoryRoomRepository or SqlAlchemyRoomRepository.

    Method names follow the '<entity>_<operation>' convention the generic
    CRUD use cases dispatch on.
    """

    def room_create(self, fields: Dict[str, Any]) -> Room:
        """
        Stores a new room built from the given fields.

        Raises:
            DuplicateEntryError: if a room with the same code already exists.
        """
        ...

    def room_get(self, fields: Dict[str, Any]) -> Room:
        """
        Returns the single room matching all the given fields.

        Raises:
            ResultNotFoundError: if nothing matches.
            MultipleResultsFoundError: if more than one room matches.
        """
        ...

    def room_list(self, filters: Optional[Dict[str, Any]] = None) -> List[Room]:
        """
        Returns the rooms matching the filters.
        Supported keys: code__eq, price__eq, price__lt, price__gt.
        """
        ...

    def room_delete(self, fields: Dict[str, Any]) -> Room:
        """
        Removes and returns the single room matching the given fields.

        Raises:
            ResultNotFoundError: if nothing matches.
            MultipleResultsFoundError: if more than one room matches.
        """
        ...
