"""Collecting field rules and running them against an object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from vspec.docs import ValidationRule


@dataclass(frozen=True)
class Field:
    """A named field together with the rules that apply to it."""

    name: str
    rules: tuple[ValidationRule, ...] = ()


class ValidationError(Exception):
    """Raised when one or more fields break their rules."""

    def __init__(self, errors: Mapping[str, Exception] | None = None) -> None:
        self.errors: dict[str, Exception] = dict(errors or {})
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.errors:
            return "validation error"
        return "; ".join(f"{name}: {error}" for name, error in self.errors.items())


class ValidationBuilder:
    """Gathers string and integer fields with rules, then validates a target."""

    def __init__(self, target: Any = None) -> None:
        self.target = target
        self.string_fields: list[Field] = []
        self.int_fields: list[Field] = []

    def for_string(self, name: str, *rules: ValidationRule[str]) -> None:
        """Register a string attribute and its rules."""
        self.string_fields.append(Field(name, tuple(rules)))

    def for_int(self, name: str, *rules: ValidationRule[int]) -> None:
        """Register an integer attribute and its rules."""
        self.int_fields.append(Field(name, tuple(rules)))

    def validate(self) -> None:
        """Check every registered field; raise ValidationError on failures.

        Only the first broken rule of each field is reported.
        """
        if self.target is None:
            raise ValueError("validation builder has no target")
        errors: dict[str, Exception] = {}
        for fld in (*self.string_fields, *self.int_fields):
            value = getattr(self.target, fld.name)
            for rule in fld.rules:
                try:
                    rule.validate(value)
                except ValueError as exc:
                    errors[fld.name] = exc
                    break
        if errors:
            raise ValidationError(errors)