# gaudi\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

This package contains the "Interactors" of the system. Each use case
represents a specific business action (e.g. "List Rooms") and is
responsible for:
1. Validating the raw input against its declared parameters.
2. Interacting with Ports (repositories).
3. Returning a uniform Response (success or categorized failure).
"""

from .base import UseCase
from .crud import CreateUseCase, DeleteUseCase, GetUseCase, ListUseCase
from .registry import UseCaseCreator, UseCaseExecutor, UseCaseRegistry
from .rooms import RoomCreate, RoomDelete, RoomGet, RoomList

USE_CASES = (
    RoomCreate,
    RoomGet,
    RoomList,
    RoomDelete,
)


def build_registry(*extra_use_cases) -> UseCaseRegistry:
    """
    Initialization step run at process start: registers every use case
    shipped with the package, plus the given application ones.
    """
    registry = UseCaseRegistry()
    for use_case in USE_CASES + extra_use_cases:
        registry.register(use_case)
    return registry


__all__ = [
    "UseCase",
    "CreateUseCase",
    "GetUseCase",
    "ListUseCase",
    "DeleteUseCase",
    "RoomCreate",
    "RoomGet",
    "RoomList",
    "RoomDelete",
    "UseCaseRegistry",
    "UseCaseCreator",
    "UseCaseExecutor",
    "USE_CASES",
    "build_registry",
]
