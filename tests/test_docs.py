import json

import pytest

from vspec.docs import (
    STRING_TYPE,
    DocsProperty,
    Group,
    ReqDocs,
    RootDocs,
    Route,
    Validatable,
    ValidationRule,
)


def _sample_root():
    prop = DocsProperty(
        name="username",
        location="json",
        type=STRING_TYPE,
        max_length=20,
        required=True,
    )
    route = Route(
        method="get",
        path="/users",
        description="List users",
        summary="Users",
        operation_id="listUsers",
        request=ReqDocs(body=[prop]),
    )
    inner = Group(path="/v1", routes=[route])
    return RootDocs(groups=[Group(path="/api", groups=[inner])])


def test_empty_root_serialises_to_empty_group_list():
    assert RootDocs().to_dict() == {"groups": []}


def test_nested_groups_and_routes_serialise_with_key_names():
    data = _sample_root().to_dict()
    outer = data["groups"][0]
    assert outer["path"] == "/api"
    assert outer["routes"] == []
    served = outer["groups"][0]["routes"][0]
    assert served["operationId"] == "listUsers"
    assert served["method"] == "get"
    assert served["summary"] == "Users"
    assert served["response"] == {"body": [], "headers": []}
    assert served["request"]["path"] == []
    body = served["request"]["body"][0]
    assert body["name"] == "username"
    assert body["localtion"] == "json"
    assert body["type"] == "string"
    assert body["maxLength"] == 20
    assert body["minLength"] == 0
    assert body["required"] is True


def test_property_carries_every_documented_key():
    data = RootDocs(
        groups=[Group(routes=[Route(request=ReqDocs(query=[DocsProperty()]))])]
    ).to_dict()
    prop = data["groups"][0]["routes"][0]["request"]["query"][0]
    assert set(prop) == {
        "name",
        "localtion",
        "type",
        "format",
        "description",
        "example",
        "maxLength",
        "minLength",
        "minValue",
        "maxValue",
        "required",
    }


def test_to_dict_survives_json_round_trip():
    data = _sample_root().to_dict()
    assert json.loads(json.dumps(data)) == data


def test_default_lists_are_not_shared():
    first = Group()
    second = Group()
    first.routes.append(Route(path="/x"))
    assert second.routes == []
    assert len(first.routes) == 1


def test_validation_rule_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ValidationRule()


def test_concrete_rule_validates_and_documents():
    class NonEmpty(ValidationRule[str]):
        def validate(self, value):
            if not value:
                raise ValueError("is empty")

        def docs(self, prop):
            prop.required = True

    rule = NonEmpty()
    prop = DocsProperty(name="title")
    rule.docs(prop)
    assert prop.required is True
    with pytest.raises(ValueError, match="is empty"):
        rule.validate("")


def test_validatable_requires_validator():
    with pytest.raises(TypeError):
        Validatable()