# gaudi/main.py
import structlog

from gaudi.shared.config import settings
from gaudi.shared.container import Container
from gaudi.shared.logging_config import configure_logging
from gaudi.shared.observability import setup_observability

logger = structlog.get_logger()


def create_container() -> Container:
    """
    Process start-up.

    1. Configures structured logging and tracing.
    2. Builds the DI container; the use case registry is created on first use.
    """
    configure_logging()
    setup_observability()

    container = Container()
    logger.info(
        "gaudi_started",
        app=settings.APP_NAME,
        env=settings.APP_ENV.value,
        repository=settings.REPOSITORY_BACKEND.value,
        use_cases=container.use_case_registry().names(),
    )
    return container
