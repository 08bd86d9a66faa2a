"""Route documentation options and field tag lookup."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable

from vspec.docs import INT_TYPE, DocsProperty, Route
from vspec.validation import ValidationBuilder

RouteOption = Callable[[Route], None]

TAG_KEYS = ("param", "json", "query", "form")


def description(text: str) -> RouteOption:
    """Set the route's description."""

    def apply(route: Route) -> None:
        route.description = text

    return apply


def summary(text: str) -> RouteOption:
    """Set the route's summary."""

    def apply(route: Route) -> None:
        route.summary = text

    return apply


def operation_id(op_id: str) -> RouteOption:
    """Set the route's operation id."""

    def apply(route: Route) -> None:
        route.operation_id = op_id

    return apply


def req(cls: type) -> RouteOption:
    """Document the request from the string fields a request class validates.

    The class must be constructible without arguments and provide a
    ``validator`` method. Fields tagged ``json`` go to the body and fields
    tagged ``form`` to the query.
    """

    def apply(route: Route) -> None:
        instance = cls()
        builder = ValidationBuilder(instance)
        instance.validator(builder)

        body: list[DocsProperty] = []
        query: list[DocsProperty] = []
        path: list[DocsProperty] = []
        buckets = {"path": path, "json": body, "form": query}

        for fld in builder.string_fields:
            tags = get_field_tags(cls, fld.name) or {}
            for location, name in tags.items():
                if not name:
                    continue
                prop = DocsProperty(name=name, location=location, type=INT_TYPE)
                for rule in fld.rules:
                    rule.docs(prop)
                bucket = buckets.get(location)
                if bucket is not None:
                    bucket.append(prop)

        route.request.body = body
        route.request.query = query
        route.request.path = path

    return apply


def res(cls: type) -> RouteOption:
    """Response documentation option; it leaves the route unchanged."""
    return lambda route: None


def err(cls: type, code: int) -> RouteOption:
    """Error response documentation option; it leaves the route unchanged."""
    return lambda route: None


def get_field_tags(cls: Any, field_name: str) -> dict[str, str] | None:
    """Return the param, json, query and form tags of a dataclass field.

    Tags are read from the field's metadata; missing tags are empty strings.
    Returns None if the field does not exist.
    """
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls!r} is not a dataclass")
    for fld in dataclasses.fields(cls):
        if fld.name == field_name:
            return {key: str(fld.metadata.get(key, "")) for key in TAG_KEYS}
    return None