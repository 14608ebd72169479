# gaudi/core/use_cases/registry.py
from typing import Any, Callable, Dict, Iterator, List, Type

import structlog

from gaudi.core.domain.exceptions import UseCaseAlreadyRegisteredError, UseCaseNotFoundError
from gaudi.core.domain.responses import Response
from gaudi.core.use_cases.base import UseCase

logger = structlog.get_logger()


class UseCaseRegistry:
    """
    Catalog of use case classes, addressable by their declared name.

    Built once at process start (see `build_registry`) and injected where
    needed; callers never depend on the registration order.
    """

    def __init__(self):
        self._use_cases: Dict[str, Type[UseCase]] = {}

    def register(self, use_case: Type[UseCase]) -> Type[UseCase]:
        """Adds a use case class. Returns it unchanged, so it also works as a decorator."""
        if not (isinstance(use_case, type) and issubclass(use_case, UseCase)):
            raise TypeError(f"{use_case!r} is not a UseCase subclass")

        name = use_case.name
        if name in self._use_cases:
            raise UseCaseAlreadyRegisteredError(name)

        self._use_cases[name] = use_case
        logger.debug("use_case_registered", use_case=name)
        return use_case

    def get(self, name: str) -> Type[UseCase]:
        try:
            return self._use_cases[name]
        except KeyError:
            raise UseCaseNotFoundError(name) from None

    def names(self) -> List[str]:
        return sorted(self._use_cases)

    def __contains__(self, name: object) -> bool:
        return name in self._use_cases

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._use_cases)


class UseCaseCreator:
    """
    Builds use case instances by name with a fixed set of constructor arguments.

    Every access returns a new instance; nothing is cached, so two callers
    never share use case state:

        creator = UseCaseCreator(registry, exc_class=UseCaseFailedError)
        creator.RoomList is not creator.RoomList
    """

    def __init__(self, registry: UseCaseRegistry, **init_kwargs: Any):
        self._registry = registry
        self._init_kwargs = init_kwargs

    def create(self, name: str) -> UseCase:
        return self._registry.get(name)(**self._init_kwargs)

    def __getitem__(self, name: str) -> UseCase:
        return self.create(name)

    def __getattr__(self, name: str) -> UseCase:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.create(name)


class UseCaseExecutor(UseCaseCreator):
    """
    Same as UseCaseCreator, but hands out the bound `execute` of a fresh
    instance, ready to be called with the raw input:

        executor.RoomList({"repository": repo, "filters": {}})
    """

    def create(self, name: str) -> Callable[..., Response]:
        return super().create(name).execute
