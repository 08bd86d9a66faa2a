"""Ready-made validation rules for strings and integers."""

from __future__ import annotations

from dataclasses import dataclass

from vspec.docs import DocsProperty, ValidationRule


@dataclass(frozen=True)
class MaxInt(ValidationRule[int]):
    """The value must not exceed the limit."""

    limit: int

    def validate(self, value: int) -> None:
        if value > self.limit:
            raise ValueError(f"mast be not more than {self.limit}")

    def docs(self, prop: DocsProperty) -> None:
        prop.max_value = self.limit


@dataclass(frozen=True)
class MinInt(ValidationRule[int]):
    """The value must not be below the limit."""

    limit: int

    def validate(self, value: int) -> None:
        if value < self.limit:
            raise ValueError(f"must me more than {self.limit}")

    def docs(self, prop: DocsProperty) -> None:
        prop.max_value = self.limit


@dataclass(frozen=True)
class MaxLength(ValidationRule[str]):
    """The UTF-8 encoded string must not be longer than the limit in bytes."""

    limit: int

    def validate(self, value: str) -> None:
        if len(value.encode("utf-8")) > self.limit:
            raise ValueError(f"max lenght should be not more than {self.limit}")

    def docs(self, prop: DocsProperty) -> None:
        prop.max_length = self.limit


@dataclass(frozen=True)
class MinLength(ValidationRule[str]):
    """The UTF-8 encoded string must be at least the limit in bytes."""

    limit: int

    def validate(self, value: str) -> None:
        if len(value.encode("utf-8")) < self.limit:
            raise ValueError(f"min lenght should be {self.limit}")

    def docs(self, prop: DocsProperty) -> None:
        prop.min_length = self.limit


@dataclass(frozen=True)
class RequiredInt(ValidationRule[int]):
    """The value must be non-zero."""

    def validate(self, value: int) -> None:
        if value == 0:
            raise ValueError("is required")

    def docs(self, prop: DocsProperty) -> None:
        prop.required = True