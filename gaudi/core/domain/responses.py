# gaudi/core/domain/responses.py
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from gaudi.core.domain.requests import InvalidRequest


class ResponseType(str, Enum):
    """
    Built-in failure categories.
    Use cases may define further categories as plain strings.
    """
    PARAMETERS_ERROR = "ParametersError"   # Input did not match the declared parameters
    USE_CASE_ERROR = "UseCaseError"        # Well-formed input, business rule refused it
    EXCEPTION_ERROR = "ExceptionError"     # Unexpected error escaped the business logic


def describe_exception(exc: BaseException) -> str:
    """Formats an error as '<ErrorKind>: <description>'."""
    return f"{exc.__class__.__name__}: {exc}"


class ResponseSuccess(BaseModel):
    """
    The outcome of a successful use case execution.
    Always truthy, whatever the content.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    content: Any = None

    def __bool__(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content}


class ResponseFailure(BaseModel):
    """
    The outcome of a failed use case execution.

    Attributes:
        type: The failure category (a ResponseType value or a custom string).
        message: Human readable description.
        exception: The underlying error, when the failure wraps one.
            Kept for traceback chaining; never serialized.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: str
    message: str
    exception: Optional[BaseException] = Field(default=None, exclude=True, repr=False)

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "message": self.message}

    # --- Factories ---

    @classmethod
    def build(cls, type_: Union[ResponseType, str], message: Any = None) -> "ResponseFailure":
        if isinstance(type_, ResponseType):
            type_ = type_.value
        if isinstance(message, BaseException):
            return cls(type=type_, message=describe_exception(message), exception=message)
        return cls(type=type_, message="" if message is None else str(message))

    @classmethod
    def build_parameters_error(cls, message: Any = None) -> "ResponseFailure":
        return cls.build(ResponseType.PARAMETERS_ERROR, message)

    @classmethod
    def build_use_case_error(cls, message: Any = None) -> "ResponseFailure":
        return cls.build(ResponseType.USE_CASE_ERROR, message)

    @classmethod
    def build_exception_error(cls, message: Any = None) -> "ResponseFailure":
        return cls.build(ResponseType.EXCEPTION_ERROR, message)

    @classmethod
    def from_invalid_request(cls, request: InvalidRequest) -> "ResponseFailure":
        return cls.build_parameters_error(request.describe())


Response = Union[ResponseSuccess, ResponseFailure]
