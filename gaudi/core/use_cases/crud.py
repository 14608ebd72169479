# gaudi/core/use_cases/crud.py
"""
Generic repository-backed use cases.

A concrete use case only names the entity it handles:

    class RoomGet(GetUseCase):
        entity = "room"

and dispatches to `repository.room_get(fields)`, returning
`ResponseSuccess({"room": <result>})`.
"""
from typing import Any, Callable, ClassVar, Iterable, Optional, Tuple, Type

import structlog

from gaudi.core.domain.exceptions import (
    DuplicateEntryError,
    MultipleResultsFoundError,
    ParameterDeclarationError,
    RepositoryError,
    ResultNotFoundError,
)
from gaudi.core.domain.parameters import Parameter
from gaudi.core.domain.requests import ParameterError, ValidRequest
from gaudi.core.domain.responses import Response, ResponseFailure, ResponseSuccess
from gaudi.core.use_cases.base import UseCase

logger = structlog.get_logger()


class RepositoryUseCase(UseCase):
    """
    Shared shape of the CRUD use cases.

    Subclasses set `operation` (the method suffix) and the repository
    conditions they turn into a USE_CASE_ERROR in `handled_errors`;
    concrete use cases set `entity` and the `port` the repository must
    implement.
    """

    entity: ClassVar[str] = ""
    port: ClassVar[Optional[type]] = None
    operation: ClassVar[str] = ""
    handled_errors: ClassVar[Tuple[Type[RepositoryError], ...]] = ()
    parameters = ["repository", Parameter("fields", default=dict)]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.port is not None and cls.entity and cls.operation and not hasattr(cls.port, cls.method_name()):
            raise ParameterDeclarationError(cls.__name__, f"{cls.port.__name__} has no {cls.method_name()}")

    @classmethod
    def method_name(cls) -> str:
        return f"{cls.entity}_{cls.operation}"

    @property
    def result_key(self) -> str:
        return self.entity.lower()

    def check_request(self, request: ValidRequest) -> Iterable[ParameterError]:
        if self.port is not None:
            if not isinstance(request.repository, self.port):
                yield ("repository", f"does not implement {self.port.__name__}")
        elif not callable(getattr(request.repository, self.method_name(), None)):
            yield ("repository", f"does not provide {self.method_name()}")

    def call_repository(self, method: Callable[..., Any], request: ValidRequest) -> Any:
        return method(request.fields)

    def process_request(self, request: ValidRequest) -> Response:
        method = getattr(request.repository, self.method_name())
        try:
            result = self.call_repository(method, request)
        except self.handled_errors as e:
            logger.info("repository_condition", use_case=self.name, error=e.message)
            return ResponseFailure.build_use_case_error(e.message)

        return ResponseSuccess(content={self.result_key: result})


class CreateUseCase(RepositoryUseCase):
    operation = "create"
    # A uniqueness conflict is a business condition, not a fault.
    handled_errors = (DuplicateEntryError,)


class GetUseCase(RepositoryUseCase):
    operation = "get"
    handled_errors = (ResultNotFoundError, MultipleResultsFoundError)


class ListUseCase(RepositoryUseCase):
    operation = "list"
    parameters = ["repository", Parameter("filters", default=dict)]

    def call_repository(self, method: Callable[..., Any], request: ValidRequest) -> Any:
        return method(filters=request.filters)


class DeleteUseCase(RepositoryUseCase):
    operation = "delete"
    handled_errors = (ResultNotFoundError, MultipleResultsFoundError)
