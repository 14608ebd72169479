# gaudi\adapters\persistence\__init__.py
"""
Persistence Adapters.

This package implements the Repository ports defined in the Core layer.
It handles the translation between Domain Entities and the underlying storage mechanism.

Components:
- MemoryRoomRepository: IRoomRepository over a plain Python list.
- SqlAlchemyRoomRepository: IRoomRepository over a SQLAlchemy 'rooms' table.
"""

from .memory_repo import MemoryRoomRepository
from .sqlalchemy_repo import SqlAlchemyRoomRepository

__all__ = [
    "MemoryRoomRepository",
    "SqlAlchemyRoomRepository",
]
