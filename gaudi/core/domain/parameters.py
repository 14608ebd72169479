# gaudi/core/domain/parameters.py
import copy
from dataclasses import dataclass, field
from typing import Any, Iterable, Tuple, Union

from gaudi.core.domain.exceptions import ParameterDeclarationError


class _Missing:
    """Sentinel type marking a parameter declared without a default."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

_CONTAINERS = (dict, list, set, bytearray)


@dataclass(frozen=True)
class Parameter:
    """
    Declares one accepted input field of a use case.

    Attributes:
        name: The key expected in the raw input mapping.
        default: A value, or a zero-argument producer (e.g. `dict`), used
            when the key is absent. Leave unset to make the parameter required.
    """
    name: str
    default: Any = field(default=MISSING, compare=False)

    @property
    def required(self) -> bool:
        return self.default is MISSING

    def produce_default(self) -> Any:
        """
        Returns the default value for one request.
        Producers are called and built-in containers are copied, so two
        requests never share a mutable container. Any other value (a
        repository, an engine, a lock) is handed out as is.
        """
        if self.required:
            raise ParameterDeclarationError(self.name, "required parameter has no default")
        if callable(self.default):
            return self.default()
        if isinstance(self.default, _CONTAINERS):
            return copy.copy(self.default)
        return self.default


ParameterDeclaration = Union[str, Parameter]


def normalize_parameters(owner: str, declarations: Iterable[ParameterDeclaration]) -> Tuple[Parameter, ...]:
    """
    Turns a class-level parameter declaration into an immutable tuple of
    Parameter records. Bare strings declare required parameters.

    Raises:
        ParameterDeclarationError: on unsupported entries or duplicate names.
    """
    if isinstance(declarations, (str, bytes)):
        raise ParameterDeclarationError(owner, "parameters must be a sequence, not a string")

    parameters = []
    seen = set()
    for item in declarations:
        if isinstance(item, str):
            item = Parameter(item)
        elif not isinstance(item, Parameter):
            raise ParameterDeclarationError(owner, f"unsupported declaration {item!r}")

        if not item.name or not isinstance(item.name, str):
            raise ParameterDeclarationError(owner, "parameter names must be non-empty strings")
        if item.name in seen:
            raise ParameterDeclarationError(owner, f"duplicate parameter '{item.name}'")

        seen.add(item.name)
        parameters.append(item)

    return tuple(parameters)
