"""Data model of an OpenAPI document and its serialisation to plain data."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any

_SCHEMA_KEYS = {
    "min_length": "minLength",
    "max_length": "maxLength",
    "additional_properties": "additionalProperties",
    "ref": "$ref",
}


@dataclass
class Contact:
    name: str = ""
    email: str = ""


@dataclass
class License:
    name: str = ""
    url: str = ""


@dataclass
class Info:
    title: str = ""
    description: str = ""
    version: str = ""
    contact: Contact = field(default_factory=Contact)
    license: License = field(default_factory=License)


@dataclass
class Server:
    url: str = ""
    description: str = ""


@dataclass
class Schema:
    ref: str = ""


@dataclass
class Value:
    name: str = ""
    value: str = ""


@dataclass
class Example:
    name: str = ""
    summary: str = ""
    value: list[Value] = field(default_factory=list)


@dataclass
class ContentType:
    content_type: str = ""
    schema: Schema = field(default_factory=Schema)
    examples: list[Example] = field(default_factory=list)


@dataclass
class Content:
    content_types: list[ContentType] = field(default_factory=list)


@dataclass
class RequestBody:
    required: bool = False
    content: Content = field(default_factory=Content)


@dataclass
class Header:
    name: str = ""
    description: str = ""
    schema: Schema = field(default_factory=Schema)


@dataclass
class StatusCode:
    code: str = ""
    description: str = ""
    content: Content = field(default_factory=Content)
    headers: list[Header] = field(default_factory=list)


@dataclass
class Responses:
    status_codes: list[StatusCode] = field(default_factory=list)


@dataclass
class Method:
    tags: list[str] = field(default_factory=list)
    summary: str = ""
    description: str = ""
    operation_id: str = ""
    request_body: RequestBody = field(default_factory=RequestBody)
    responses: Responses = field(default_factory=Responses)


@dataclass
class Path:
    methods: dict[str, Method] = field(default_factory=dict)


def _plain(value: Any) -> Any:
    if isinstance(value, (Property, ComponentSchema)):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return list(value)
    return value


def _schema_dict(obj: Property | ComponentSchema) -> dict[str, Any]:
    """Serialise a schema-like object, leaving out empty fields except type."""
    out: dict[str, Any] = {}
    for fld in fields(obj):
        value = getattr(obj, fld.name)
        if fld.name != "type" and (
            value is None or (fld.name != "example" and value in ("", [], {}))
        ):
            continue
        out[_SCHEMA_KEYS.get(fld.name, fld.name)] = _plain(value)
    return out


@dataclass
class Property:
    """A property of a component schema."""

    type: str = ""
    format: str = ""
    description: str = ""
    example: Any = None
    min_length: int | None = None
    max_length: int | None = None
    minimum: float | None = None
    maximum: float | None = None
    items: ComponentSchema | None = None
    properties: dict[str, Property] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    ref: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the property as plain data, leaving out empty fields."""
        return _schema_dict(self)


@dataclass
class ComponentSchema:
    """A reusable schema in the components section."""

    type: str = ""
    format: str = ""
    description: str = ""
    example: Any = None
    required: list[str] = field(default_factory=list)
    properties: dict[str, Property] = field(default_factory=dict)
    items: ComponentSchema | None = None
    additional_properties: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    minimum: float | None = None
    maximum: float | None = None
    ref: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the schema as plain data, leaving out empty fields."""
        return _schema_dict(self)


@dataclass
class Components:
    schemas: dict[str, ComponentSchema] = field(default_factory=dict)


def _content_dict(content: Content) -> dict[str, Any]:
    return {
        ct.content_type: {
            "schema": {"$ref": ct.schema.ref},
            "examples": {
                ex.name: {"summary": ex.summary, "value": {v.name: v.value for v in ex.value}}
                for ex in ct.examples
            },
        }
        for ct in content.content_types
    }


def _method_dict(method: Method) -> dict[str, Any]:
    return {
        "tags": list(method.tags),
        "summary": method.summary,
        "description": method.description,
        "operationId": method.operation_id,
        "requestBody": {
            "required": method.request_body.required,
            "content": _content_dict(method.request_body.content),
        },
        "responses": {
            status.code: {
                "description": status.description,
                "content": _content_dict(status.content),
                "headers": {
                    h.name: {"description": h.description, "schema": {"$ref": h.schema.ref}}
                    for h in status.headers
                },
            }
            for status in method.responses.status_codes
        },
    }


@dataclass
class Spec:
    """A whole OpenAPI document."""

    openapi: str = ""
    info: Info = field(default_factory=Info)
    servers: list[Server] = field(default_factory=list)
    components: Components = field(default_factory=Components)
    paths: dict[str, Path] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the document as plain data ready for JSON or YAML output."""
        return {
            "openapi": self.openapi,
            "info": asdict(self.info),
            "servers": [asdict(s) for s in self.servers],
            "components": {
                "schemas": {n: s.to_dict() for n, s in self.components.schemas.items()}
            },
            "paths": {
                route: {verb: _method_dict(m) for verb, m in path.methods.items()}
                for route, path in self.paths.items()
            },
        }