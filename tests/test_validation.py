from dataclasses import dataclass

import pytest

from vspec.docs import Validatable, ValidationRule
from vspec.validation import Field, ValidationBuilder, ValidationError


class _Reject(ValidationRule):
    def __init__(self, message):
        self.message = message
        self.calls = 0

    def validate(self, value):
        self.calls += 1
        raise ValueError(self.message)

    def docs(self, prop):
        prop.description = self.message


class _Accept(ValidationRule):
    def validate(self, value):
        return None

    def docs(self, prop):
        prop.required = True


@dataclass
class Account(Validatable):
    username: str = ""
    age: int = 0

    def validator(self, builder):
        builder.for_string("username", _Accept())
        builder.for_int("age", _Accept())


def test_for_string_and_for_int_record_fields():
    builder = ValidationBuilder()
    rule = _Accept()
    builder.for_string("username", rule)
    builder.for_int("age")
    assert builder.string_fields == [Field("username", (rule,))]
    assert builder.int_fields == [Field("age", ())]


def test_valid_target_passes():
    target = Account("alice", 30)
    builder = ValidationBuilder(target)
    target.validator(builder)
    assert builder.validate() is None
    assert [f.name for f in builder.string_fields] == ["username"]


def test_only_first_broken_rule_is_reported():
    builder = ValidationBuilder(Account("alice", 30))
    later = _Reject("second")
    builder.for_string("username", _Reject("first"), later)
    with pytest.raises(ValidationError) as info:
        builder.validate()
    assert str(info.value.errors["username"]) == "first"
    assert later.calls == 0


def test_string_errors_come_before_int_errors():
    builder = ValidationBuilder(Account("alice", 30))
    builder.for_int("age", _Reject("too old"))
    builder.for_string("username", _Reject("taken"))
    with pytest.raises(ValidationError) as info:
        builder.validate()
    assert list(info.value.errors) == ["username", "age"]
    assert str(info.value) == "username: taken; age: too old"


def test_error_message_joins_fields():
    error = ValidationError({"a": ValueError("x"), "b": ValueError("y")})
    assert str(error) == "a: x; b: y"


def test_empty_error_has_generic_message():
    assert str(ValidationError()) == "validation error"


def test_validate_without_target_fails():
    builder = ValidationBuilder()
    builder.for_string("username", _Accept())
    with pytest.raises(ValueError, match="no target"):
        builder.validate()


def test_missing_attribute_raises():
    builder = ValidationBuilder(Account())
    builder.for_string("nickname", _Accept())
    with pytest.raises(AttributeError):
        builder.validate()