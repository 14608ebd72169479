# gaudi\core\ports\__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement. These interfaces allow the use cases to reach storage without
knowing the implementation details.
"""

from .room_repository import IRoomRepository

__all__ = [
    "IRoomRepository",
]
