# vspec

vspec keeps request validation rules and route documentation close to the
routes of a Flask application. It provides:

- `vspec.validators` — ready-made rules for strings and integers;
- `vspec.validation` — a `ValidationBuilder` that collects rules per attribute
  and checks an object against them;
- `vspec.docs` — data classes for a documentation tree (`RootDocs`, `Group`,
  `Route`, `ReqDocs`, `RespDocs`, `DocsProperty`) and the abstract
  `ValidationRule` and `Validatable` interfaces;
- `vspec.options` — options that fill in a `Route` (`description`, `summary`,
  `operation_id`, `req`, `res`, `err`) and `get_field_tags`;
- `vspec.openapi` — data classes for an OpenAPI document with `to_dict()`
  serialisation;
- `vspec.vecho` — `VEcho`, a wrapper that registers routes on a Flask app.

## Installation

```
pip install vspec
```

## Validation rules

| Rule            | Applies to | `validate` raises `ValueError` when       | `docs(prop)` sets     |
|-----------------|------------|-------------------------------------------|-----------------------|
| `MinLength(n)`  | strings    | the UTF-8 encoding is shorter than `n` bytes | `prop.min_length`  |
| `MaxLength(n)`  | strings    | the UTF-8 encoding is longer than `n` bytes  | `prop.max_length`  |
| `MinInt(n)`     | integers   | the value is less than `n`                | `prop.max_value`      |
| `MaxInt(n)`     | integers   | the value is greater than `n`             | `prop.max_value`      |
| `RequiredInt()` | integers   | the value is zero                         | `prop.required`       |

Note that `MinInt.docs` writes its limit into `max_value`.

A request type implements `Validatable.validator(builder)` and registers its
attributes by name. The builder is created with the object to check:

```python
from vspec.docs import Validatable
from vspec.validation import ValidationBuilder, ValidationError
from vspec.validators import MaxInt, MaxLength, MinInt, MinLength


class RegisterUser(Validatable):
    def __init__(self, username: str, age: int) -> None:
        self.username = username
        self.age = age

    def validator(self, builder):
        builder.for_string("username", MinLength(3), MaxLength(32))
        builder.for_int("age", MinInt(18), MaxInt(130))


user = RegisterUser("al", 12)
builder = ValidationBuilder(user)
user.validator(builder)

try:
    builder.validate()
except ValidationError as exc:
    print(exc.errors)  # {'username': ValueError(...), 'age': ValueError(...)}
    print(exc)         # "username: min lenght should be 3; age: must me more than 18"
```

Each attribute reports only the first rule it breaks; all failing attributes
are gathered into one `ValidationError`, whose `errors` maps attribute names
to the exceptions raised. Calling `validate()` on a builder created without a
target raises `ValueError`.

## Route documentation options

Each option returns a callable that takes a `Route` and changes it:

- `description(text)`, `summary(text)`, `operation_id(op_id)` set the matching
  field.
- `req(cls)` builds an instance of `cls` with no arguments, asks it for its
  rules through `validator`, and documents its **string** fields. For each
  field, the tags returned by `get_field_tags` decide where it goes: the `json`
  name becomes a body property and the `form` name a query property. Each
  property gets the rules' `docs` applied; its `type` is recorded as `"int"`.
  The route's request body, query and path lists are replaced.
- `res(cls)` and `err(cls, code)` are accepted but leave the route unchanged.

Tags are read from dataclass field metadata:

```python
from dataclasses import dataclass, field

from vspec.options import get_field_tags, req
from vspec.docs import Route
from vspec.validators import MaxLength


@dataclass
class Search:
    term: str = field(default="", metadata={"json": "term", "form": "q"})

    def validator(self, builder):
        builder.for_string("term", MaxLength(64))


get_field_tags(Search, "term")
# {'param': '', 'json': 'term', 'query': '', 'form': 'q'}

route = Route(method="get", path="/search")
req(Search)(route)
```

`get_field_tags` returns `None` for an unknown field and raises `TypeError`
when given something that is not a dataclass.

## Registering routes on Flask

```python
from flask import Flask

from vspec.options import description, operation_id, summary
from vspec.vecho import VEcho

api = VEcho(Flask(__name__))   # VEcho() creates its own Flask app
users = api.group("/users")


def show_user(id):
    return {"id": id}


route = users.get("/:id", show_user).with_docs(
    summary("Show a user"),
    description("Returns one user."),
    operation_id("showUser"),
)
```

`group(prefix, *middleware)` adds a `Group` to `api.docs`. `VGroup.get`
registers a GET rule on the Flask app under the group prefix, turning `:name`
segments into `<name>` placeholders and wrapping the handler in the group's and
the route's middleware (the first listed runs outermost). The returned `VRoute`
holds the Flask rule, its endpoint name and a `Route` documentation entry;
`with_docs` applies options to that entry.

`api.docs.to_dict()` returns the documentation tree as plain data, with keys
such as `operationId`, `maxLength` and `localtion`.

## OpenAPI model

`vspec.openapi` holds `Spec`, `Info`, `Contact`, `License`, `Server`,
`Components`, `ComponentSchema`, `Property`, `Path`, `Method`, `RequestBody`,
`Content`, `ContentType`, `Schema`, `Example`, `Value`, `Responses`,
`StatusCode` and `Header`. `Spec.to_dict()` returns plain data ready for JSON
or YAML; `ComponentSchema.to_dict()` and `Property.to_dict()` leave out empty
optional fields but always include `type`.

## What it does not do

- Only GET routes can be registered through `VGroup`.
- The `Route` created by `VGroup.get` is returned in the `VRoute` but is not
  added to its group's `routes`, so `api.docs` lists groups only.
- Nothing turns the documentation tree into a `Spec`, and no endpoint serves
  the documentation; `res` and `err` record nothing.
- Validation is not run automatically on incoming requests.

## Running the tests

```
pip install -e ".[test]"
pytest
```