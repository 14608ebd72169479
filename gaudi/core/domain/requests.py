# gaudi/core/domain/requests.py
from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from gaudi.core.domain.parameters import Parameter

UNDECLARED = "is undeclared"
MISSING_VALUE = "is missing"

ParameterError = Tuple[str, str]


class ValidRequest(Mapping[str, Any]):
    """
    A request whose input satisfied the declared parameters.
    Values are read-only and reachable both as items and as attributes.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        object.__setattr__(self, "_values", MappingProxyType(dict(values or {})))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name == "_values":
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ValidRequest is immutable")

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"ValidRequest({dict(self._values)!r})"


class InvalidRequest:
    """
    A request rejected by validation.
    Holds every (parameter_name, explanation) pair found, in collection order.
    """

    def __init__(self, errors: Optional[Iterable[ParameterError]] = None):
        self._errors: List[ParameterError] = [(str(name), str(message)) for name, message in (errors or [])]

    def add_error(self, parameter: str, message: str) -> None:
        self._errors.append((parameter, message))

    @property
    def errors(self) -> Tuple[ParameterError, ...]:
        return tuple(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def describe(self) -> str:
        """Joins the errors one per line as 'name: explanation'."""
        return "\n".join(f"{name}: {message}" for name, message in self._errors)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"InvalidRequest({self._errors!r})"


Request = Union[ValidRequest, InvalidRequest]


def build_request(parameters: Sequence[Parameter], raw_input: Optional[Mapping[str, Any]]) -> Request:
    """
    Validates a raw input mapping against declared parameters.

    Validation is exhaustive: undeclared keys (in input order) and missing
    required parameters (in declaration order) are all reported at once.
    """
    raw_input = raw_input or {}
    declared = {parameter.name for parameter in parameters}

    invalid = InvalidRequest()
    for key in raw_input:
        if key not in declared:
            invalid.add_error(key, UNDECLARED)

    for parameter in parameters:
        if parameter.required and parameter.name not in raw_input:
            invalid.add_error(parameter.name, MISSING_VALUE)

    if invalid.has_errors():
        return invalid

    values = {}
    for parameter in parameters:
        if parameter.name in raw_input:
            values[parameter.name] = raw_input[parameter.name]
        else:
            values[parameter.name] = parameter.produce_default()

    return ValidRequest(values)
