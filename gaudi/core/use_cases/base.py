# gaudi/core/use_cases/base.py
from typing import Any, ClassVar, Iterable, Mapping, Optional, Sequence, Type

import structlog

from gaudi.core.domain.parameters import ParameterDeclaration, normalize_parameters
from gaudi.core.domain.requests import InvalidRequest, ParameterError, Request, ValidRequest, build_request
from gaudi.core.domain.responses import Response, ResponseFailure, ResponseSuccess
from gaudi.shared.observability import use_case_span

logger = structlog.get_logger()


class UseCase:
    """
    Base class of every application operation.

    Subclasses declare their input schema in `parameters` and implement
    `process_request`, which only ever receives a ValidRequest:

        class PriceQuote(UseCase):
            parameters = ["price", Parameter("discounts", default=list)]

            def process_request(self, request):
                return ResponseSuccess(content={"price": request.price})

    `execute` always returns a Response, unless the instance was built with
    an `exc_class`: then every failure is raised as that error kind instead.
    """

    name: ClassVar[str] = "UseCase"
    parameters: ClassVar[Sequence[ParameterDeclaration]] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Normalized once, at class definition time.
        cls.parameters = normalize_parameters(cls.__name__, cls.parameters)
        if "name" not in cls.__dict__:
            cls.name = cls.__name__

    def __init__(self, exc_class: Optional[Type[Exception]] = None, with_traceback: bool = True):
        self.exc_class = exc_class
        self.with_traceback = with_traceback

    # --- Validation ---

    def build_request(self, raw_input: Optional[Mapping[str, Any]] = None) -> Request:
        """
        Validates the raw input against the declared parameters, then against
        the use case specific checks of `check_request`.
        """
        request = build_request(self.parameters, raw_input)
        if not request:
            return request

        extra_errors = list(self.check_request(request))
        if extra_errors:
            return InvalidRequest(extra_errors)
        return request

    def check_request(self, request: ValidRequest) -> Iterable[ParameterError]:
        """Hook for domain checks on well-formed input. Yields (name, explanation) pairs."""
        return ()

    # --- Execution ---

    def process_request(self, request: ValidRequest) -> Response:
        raise NotImplementedError(f"{self.__class__.__name__} must implement process_request()")

    def execute(self, raw_input: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Response:
        """
        Runs the use case.

        Args:
            raw_input: Mapping of parameter names to values.
            **kwargs: Extra parameters, merged over raw_input.

        Returns:
            ResponseSuccess or ResponseFailure.

        Raises:
            self.exc_class: on any failure, when configured.
        """
        raw_input = {**(raw_input or {}), **kwargs}

        with use_case_span(self.name) as span:
            try:
                request = self.build_request(raw_input)
            except Exception as e:
                response = self._exception_failure(e)
            else:
                if not request:
                    logger.info("use_case_invalid_request", errors=request.errors)
                    response = ResponseFailure.from_invalid_request(request)
                else:
                    response = self._run(request)

            span.set_attribute("gaudi.response_type", "Success" if response else response.type)

        if not response:
            return self._fail(response)
        return response

    def _exception_failure(self, error: Exception) -> ResponseFailure:
        logger.error("use_case_exception", error=str(error), exc_info=True)
        return ResponseFailure.build_exception_error(error)

    def _run(self, request: ValidRequest) -> Response:
        try:
            response = self.process_request(request)
        except Exception as e:
            return self._exception_failure(e)

        if not isinstance(response, (ResponseSuccess, ResponseFailure)):
            response = ResponseSuccess(content=response)

        if response:
            logger.info("use_case_success")
        else:
            logger.info("use_case_failure", type=response.type, message=response.message)
        return response

    def _fail(self, response: ResponseFailure) -> ResponseFailure:
        if self.exc_class is None:
            return response

        error = self.exc_class(response.message)
        if self.with_traceback and response.exception is not None:
            raise error from response.exception
        raise error from None

