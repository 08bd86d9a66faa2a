"""Route documentation model and the validation interfaces it relies on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from vspec.validation import ValidationBuilder

STRING_TYPE = "string"
INT_TYPE = "int"

T = TypeVar("T")

_KEYS = {
    "location": "localtion",
    "max_length": "maxLength",
    "min_length": "minLength",
    "min_value": "minValue",
    "max_value": "maxValue",
    "operation_id": "operationId",
}


@dataclass
class DocsProperty:
    """A single documented request or response property."""

    name: str = ""
    location: str = ""
    type: str = ""
    format: str = ""
    description: str = ""
    example: str = ""
    max_length: int = 0
    min_length: int = 0
    min_value: int = 0
    max_value: int = 0
    required: bool = False


@dataclass
class ReqDocs:
    path: list[DocsProperty] = field(default_factory=list)
    query: list[DocsProperty] = field(default_factory=list)
    body: list[DocsProperty] = field(default_factory=list)
    headers: list[DocsProperty] = field(default_factory=list)


@dataclass
class RespDocs:
    body: list[DocsProperty] = field(default_factory=list)
    headers: list[DocsProperty] = field(default_factory=list)


@dataclass
class Route:
    """Documentation for one route."""

    method: str = ""
    path: str = ""
    description: str = ""
    summary: str = ""
    operation_id: str = ""
    request: ReqDocs = field(default_factory=ReqDocs)
    response: RespDocs = field(default_factory=RespDocs)


@dataclass
class Group:
    """A documented route group, possibly holding nested groups."""

    path: str = ""
    groups: list[Group] = field(default_factory=list)
    routes: list[Route] = field(default_factory=list)


@dataclass
class RootDocs:
    """The top of the documentation tree."""

    groups: list[Group] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the tree as plain data using its serialised key names."""
        return asdict(
            self, dict_factory=lambda items: {_KEYS.get(k, k): v for k, v in items}
        )


class ValidationRule(ABC, Generic[T]):
    """A rule that checks a value and describes itself in documentation."""

    @abstractmethod
    def validate(self, value: T) -> None:
        """Raise ValueError if the value breaks the rule."""

    @abstractmethod
    def docs(self, prop: DocsProperty) -> None:
        """Record the rule's constraint on a documented property."""


class Validatable(ABC):
    """A request type that declares validation rules for its fields."""

    @abstractmethod
    def validator(self, builder: ValidationBuilder) -> None:
        """Register the fields and their rules with the builder."""