"""Entry Point

`validate(value, assertion, name)` applies an assertion, and `is_` is the same
call exposed as a namespace carrying every primitive and combinator:

    from shapeguard import is_

    user = is_(payload, is_.shape({"id": is_.number, "tags": is_.array_of(is_.string)}), "user")
"""
from __future__ import annotations

from typing import Any, TypeVar

from . import combinators, primitives
from .combinators import Assertion
from .errors import ValidationFailure
from .naming import DEFAULT_NAME, NamingContext

T = TypeVar("T")


def validate(value: Any, assertion: Assertion[T], name: NamingContext = DEFAULT_NAME) -> T:
    """Check `value` against `assertion` and return the narrowed result.

    `name` only shapes the failure message, never the outcome.
    """
    return assertion(value, name)


class AssertionNamespace:
    """Callable namespace: `is_(value, assertion, name)` plus every assertion as an attribute."""

    ValidationFailure = ValidationFailure

    # Primitives
    boolean = staticmethod(primitives.boolean)
    number = staticmethod(primitives.number)
    string = staticmethod(primitives.string)
    regex = staticmethod(primitives.regex)
    array = staticmethod(primitives.array)
    func = staticmethod(primitives.func)
    object = staticmethod(primitives.object_)

    # Combinators
    array_of = staticmethod(combinators.array_of)
    arrayish = staticmethod(combinators.arrayish)
    object_of = staticmethod(combinators.object_of)
    shape = staticmethod(combinators.shape)
    maybe = staticmethod(combinators.maybe)
    with_default = staticmethod(combinators.with_default)
    default = staticmethod(combinators.with_default)
    either = staticmethod(combinators.either)
    literal = staticmethod(combinators.literal)
    union = staticmethod(combinators.union)
    literals = staticmethod(combinators.literals)

    validate = staticmethod(validate)

    @property
    def is_(self) -> AssertionNamespace:
        return self

    def __call__(self, value: Any, assertion: Assertion[T], name: NamingContext = DEFAULT_NAME) -> T:
        return validate(value, assertion, name)

    def __repr__(self) -> str:
        return "<shapeguard.is_>"


is_ = AssertionNamespace()
