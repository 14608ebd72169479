# gaudi/adapters/persistence/sqlalchemy_repo.py

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

import structlog
from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from gaudi.adapters.persistence.orm import RoomRecord, session_scope
from gaudi.core.domain.exceptions import DuplicateEntryError, MultipleResultsFoundError, ResultNotFoundError
from gaudi.core.domain.models import Room
from gaudi.core.ports.room_repository import IRoomRepository

logger = structlog.get_logger()

ROOM_FIELDS = ("code", "size", "price", "longitude", "latitude")

_OPERATORS = {
    "eq": lambda column, value: column == value,
    "lt": lambda column, value: column < value,
    "gt": lambda column, value: column > value,
}


def _to_room(record: RoomRecord) -> Room:
    return Room(**{name: getattr(record, name) for name in ROOM_FIELDS})


class SqlAlchemyRoomRepository(IRoomRepository):
    """
    Room Repository backed by a relational database through SQLAlchemy.
    Each operation runs in its own session.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _base_select(self) -> Select[Any]:
        return select(RoomRecord).order_by(RoomRecord.id)

    def _where_fields(self, stmt: Select[Any], fields: Dict[str, Any]) -> Select[Any]:
        for name, value in fields.items():
            if name not in ROOM_FIELDS:
                raise ValueError(f"Unknown room field '{name}'")
            if name == "price":
                value = int(value)
            stmt = stmt.where(getattr(RoomRecord, name) == value)
        return stmt

    def _find_one(self, session: Session, fields: Dict[str, Any]) -> RoomRecord:
        fields = fields or {}
        records = list(session.execute(self._where_fields(self._base_select(), fields).limit(2)).scalars())
        if not records:
            raise ResultNotFoundError("room", fields)
        if len(records) > 1:
            raise MultipleResultsFoundError("room", fields)
        return records[0]

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def room_get(self, fields: Dict[str, Any]) -> Room:
        with session_scope(self._session_factory) as session:
            return _to_room(self._find_one(session, fields))

    def room_list(self, filters: Optional[Dict[str, Any]] = None) -> List[Room]:
        stmt = self._base_select()

        for key, value in (filters or {}).items():
            name, _, operator = key.partition("__")
            operator = operator or "eq"
            if name not in ROOM_FIELDS or operator not in _OPERATORS:
                raise ValueError(f"Unsupported filter '{key}'")
            if name == "price":
                value = int(value)
            stmt = stmt.where(_OPERATORS[operator](getattr(RoomRecord, name), value))

        with session_scope(self._session_factory) as session:
            return [_to_room(record) for record in session.execute(stmt).scalars()]

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def room_create(self, fields: Dict[str, Any]) -> Room:
        fields = dict(fields or {})
        fields.setdefault("code", str(uuid.uuid4()))
        room = Room.from_dict(fields)

        try:
            with session_scope(self._session_factory) as session:
                session.add(RoomRecord(**room.to_dict()))
        except IntegrityError:
            raise DuplicateEntryError("room", room.code) from None

        logger.info("room_created", code=room.code)
        return room

    def room_delete(self, fields: Dict[str, Any]) -> Room:
        with session_scope(self._session_factory) as session:
            record = self._find_one(session, fields)
            room = _to_room(record)
            session.delete(record)

        logger.info("room_deleted", code=room.code)
        return room
