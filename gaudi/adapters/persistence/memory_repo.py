# gaudi/adapters/persistence/memory_repo.py
import uuid
from typing import Any, Dict, Iterable, List, Optional

import structlog

from gaudi.core.domain.exceptions import DuplicateEntryError, MultipleResultsFoundError, ResultNotFoundError
from gaudi.core.domain.models import Room
from gaudi.core.ports.room_repository import IRoomRepository

logger = structlog.get_logger()


def _matches(room: Room, key: str, value: Any) -> bool:
    """Evaluates one '<field>__<operator>' filter against a room."""
    field, _, operator = key.partition("__")
    operator = operator or "eq"
    if field not in Room.model_fields:
        raise ValueError(f"Unknown room field '{field}'")
    current = getattr(room, field)

    if field == "price":
        value = int(value)

    if operator == "eq":
        return current == value
    if operator == "lt":
        return current < value
    if operator == "gt":
        return current > value
    raise ValueError(f"Unsupported filter operator '{operator}'")


class MemoryRoomRepository(IRoomRepository):
    """
    Concrete implementation of the Room Repository backed by a Python list.
    Useful for tests and demos; nothing survives the process.
    """

    def __init__(self, entries: Optional[Iterable[Dict[str, Any]]] = None):
        self._entries: List[Dict[str, Any]] = [Room.from_dict(entry).to_dict() for entry in (entries or [])]

    def _rooms(self) -> List[Room]:
        return [Room.from_dict(entry) for entry in self._entries]

    def _find_one(self, fields: Dict[str, Any]) -> Room:
        fields = fields or {}
        found = [room for room in self._rooms() if all(_matches(room, k, v) for k, v in fields.items())]
        if not found:
            raise ResultNotFoundError("room", fields)
        if len(found) > 1:
            raise MultipleResultsFoundError("room", fields)
        return found[0]

    # --- Interface Implementation ---

    def room_create(self, fields: Dict[str, Any]) -> Room:
        fields = dict(fields or {})
        fields.setdefault("code", str(uuid.uuid4()))
        if any(entry["code"] == fields["code"] for entry in self._entries):
            raise DuplicateEntryError("room", fields["code"])

        room = Room.from_dict(fields)
        self._entries.append(room.to_dict())
        logger.info("room_created", code=room.code)
        return room

    def room_get(self, fields: Dict[str, Any]) -> Room:
        return self._find_one(fields)

    def room_list(self, filters: Optional[Dict[str, Any]] = None) -> List[Room]:
        rooms = self._rooms()
        for key, value in (filters or {}).items():
            rooms = [room for room in rooms if _matches(room, key, value)]
        return rooms

    def room_delete(self, fields: Dict[str, Any]) -> Room:
        room = self._find_one(fields)
        self._entries = [entry for entry in self._entries if entry["code"] != room.code]
        logger.info("room_deleted", code=room.code)
        return room
