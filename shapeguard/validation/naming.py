"""Naming Contexts

A naming context tells an assertion what to call the value in a failure
message. It is either a plain label ("value", "payload") or a deferred path
builder: a callable that takes trailing, already formatted path segments
(".items", "[2]") and returns the full display string.

Deriving a child context never touches the parent. For a builder the child is
a new closure over the parent and the key, so the path string is only put
together when a failure actually resolves it:

    root = path("root")
    item = derive(derive(root, "items", attribute), 2, index)
    resolve(item)  # "root.items[2]"
    resolve(root)  # still "root"
"""
from __future__ import annotations

from typing import Any, Callable, Union

PathBuilder = Callable[..., str]
NamingContext = Union[str, PathBuilder]
Formatter = Callable[[str, Any], str]

DEFAULT_NAME = "value"


def attribute(name: str, key: Any) -> str:
    return f"{name}.{key}"


def index(name: str, key: Any) -> str:
    return f"{name}[{key}]"


def resolve(context: NamingContext) -> str:
    """Turn a naming context into the string used in failure messages."""
    if callable(context):
        return context()
    return str(context)


def derive(context: NamingContext, key: Any, formatter: Formatter) -> NamingContext:
    """Child naming context for `key` under `context`.

    Labels are formatted right away since there is nothing left to defer.
    Builders get wrapped: the child prepends its own segment to whatever
    segments its descendants pass in, then hands the lot to the parent, which
    keeps nested keys in left-to-right order.
    """
    if not callable(context):
        return formatter(str(context), key)

    def child(*segments: str) -> str:
        return context(formatter("", key), *segments)

    return child


def path(root: str) -> PathBuilder:
    """Deferred path builder rooted at a plain label."""

    def builder(*segments: str) -> str:
        return root + "".join(segments)

    return builder
