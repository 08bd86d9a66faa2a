"""Flask application wrapper that records route documentation alongside routing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from flask import Flask

from vspec.docs import Group, RootDocs, Route

Handler = Callable[..., Any]
Middleware = Callable[[Handler], Handler]


def _flask_path(path: str) -> str:
    """Turn ``:name`` path segments into Flask's ``<name>`` placeholders."""
    converted = "/".join(
        f"<{s[1:]}>" if s.startswith(":") and len(s) > 1 else s for s in path.split("/")
    )
    return converted if converted.startswith("/") else "/" + converted


@dataclass
class VRoute:
    """A registered route together with its documentation entry."""

    rule: str
    endpoint: str
    route: Route

    def with_docs(self, *options: Callable[[Route], None]) -> VRoute:
        """Apply documentation options to the route and return it."""
        for option in options:
            option(self.route)
        return self


@dataclass
class VGroup:
    """A route group sharing a path prefix and middleware."""

    app: Flask
    prefix: str
    docs_group: Group
    middleware: tuple[Middleware, ...] = ()

    def get(self, path: str, handler: Handler, *middleware: Middleware) -> VRoute:
        """Register a GET handler under the group's prefix."""
        rule = _flask_path(self.prefix + path)
        endpoint = f"GET {rule}"
        # The first middleware listed runs outermost.
        for mw in reversed((*self.middleware, *middleware)):
            handler = mw(handler)
        self.app.add_url_rule(rule, endpoint=endpoint, view_func=handler, methods=["GET"])
        return VRoute(rule=rule, endpoint=endpoint, route=Route(method="get", path=path))


class VEcho:
    """A Flask application paired with the documentation tree of its routes."""

    def __init__(self, app: Flask | None = None) -> None:
        self.app = app if app is not None else Flask(__name__)
        self.docs = RootDocs()

    def group(self, prefix: str, *middleware: Middleware) -> VGroup:
        """Create a route group and record it in the documentation."""
        docs_group = Group(path=prefix)
        self.docs.groups.append(docs_group)
        return VGroup(self.app, prefix, docs_group, tuple(middleware))