# gaudi\shared\container.py
from typing import Optional, Type

from dependency_injector import containers, providers

from gaudi.shared.config import settings
from gaudi.adapters.persistence.memory_repo import MemoryRoomRepository
from gaudi.adapters.persistence.orm import build_session_factory
from gaudi.adapters.persistence.sqlalchemy_repo import SqlAlchemyRoomRepository
from gaudi.core.domain.exceptions import UseCaseFailedError
from gaudi.core.use_cases import UseCaseCreator, UseCaseExecutor, build_registry


def select_failure_error_kind(raise_on_failure: bool) -> Optional[Type[Exception]]:
    """Error kind handed to use cases when exception-style control flow is enabled."""
    return UseCaseFailedError if raise_on_failure else None


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    # Loaded from settings, but wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # One engine and session factory per process
    session_factory = providers.Singleton(
        build_session_factory,
        database_url=config.DATABASE_URL,
        echo=config.DATABASE_ECHO,
    )

    # Room storage, chosen by REPOSITORY_BACKEND
    room_repository = providers.Selector(
        config.REPOSITORY_BACKEND,
        memory=providers.Singleton(MemoryRoomRepository),
        sqlalchemy=providers.Singleton(SqlAlchemyRoomRepository, session_factory=session_factory),
    )

    # 3. Use Cases (Application Logic)

    # The catalog is built once, at process start.
    use_case_registry = providers.Singleton(build_registry)

    failure_error_kind = providers.Callable(select_failure_error_kind, config.RAISE_ON_FAILURE)

    # Factory: a new creator (and thus new use case instances) for every caller.
    use_case_creator = providers.Factory(
        UseCaseCreator,
        use_case_registry,
        exc_class=failure_error_kind,
        with_traceback=config.WITH_TRACEBACK,
    )

    use_case_executor = providers.Factory(
        UseCaseExecutor,
        use_case_registry,
        exc_class=failure_error_kind,
        with_traceback=config.WITH_TRACEBACK,
    )
