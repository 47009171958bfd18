"""Assertion Combinator Engine

Primitive assertions, higher-order combinators, naming contexts for precise
failure paths, and boundary helpers that turn failures into Results.

Key Features:
- Assertions are plain callables `(value, name) -> T`, freely composable
- Deferred path building: nested paths are only assembled on failure
- Union-like combinators merge every attempted kind into one failure
- Result-returning boundary parsers and an argument-narrowing decorator

Usage:
    from shapeguard.validation import is_, ValidationFailure, path

    order = is_.shape({
        "id": is_.number,
        "items": is_.array_of(is_.shape({"sku": is_.string, "qty": is_.number})),
        "note": is_.maybe(is_.string),
    })

    try:
        is_(payload, order, path("order"))
    except ValidationFailure as e:
        print(e.target, e.kind)  # order.items[0].qty a number
"""

from .errors import ValidationFailure

from .naming import (
    DEFAULT_NAME,
    NamingContext,
    PathBuilder,
    attribute,
    derive,
    index,
    path,
    resolve,
)

from .primitives import (
    array,
    boolean,
    func,
    number,
    object_,
    regex,
    string,
)

from .combinators import (
    Assertion,
    array_of,
    arrayish,
    either,
    literal,
    literals,
    maybe,
    object_of,
    shape,
    union,
    with_default,
)

from .entry import AssertionNamespace, is_, validate

from .boundaries import (
    BoundaryValidator,
    parse,
    parse_batch,
    parse_json,
    validated,
)

__all__ = [
    # Errors
    "ValidationFailure",
    # Naming
    "DEFAULT_NAME",
    "NamingContext",
    "PathBuilder",
    "attribute",
    "derive",
    "index",
    "path",
    "resolve",
    # Primitives
    "array",
    "boolean",
    "func",
    "number",
    "object_",
    "regex",
    "string",
    # Combinators
    "Assertion",
    "array_of",
    "arrayish",
    "either",
    "literal",
    "literals",
    "maybe",
    "object_of",
    "shape",
    "union",
    "with_default",
    # Entry point
    "AssertionNamespace",
    "is_",
    "validate",
    # Boundaries
    "BoundaryValidator",
    "parse",
    "parse_batch",
    "parse_json",
    "validated",
]
