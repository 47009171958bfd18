"""Assertion Combinators

Higher-order functions that build compound assertions out of simpler ones.
Every combinator returns a plain callable `(value, name) -> T` holding no
per-call state, so assertions can be built once and shared freely.

Failure policy:
- array_of, object_of, shape: the first failing member propagates unchanged
- either, union, arrayish: ValidationFailure from a branch is caught, the next
  alternative is tried, and if none succeeds a single failure summarising all
  attempted kinds is raised
- anything that is not a ValidationFailure is never caught
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, TypeVar

from .errors import ValidationFailure
from .naming import DEFAULT_NAME, NamingContext, attribute, derive, index, resolve
from .primitives import ARRAY_TYPES, array, object_

T = TypeVar("T")

Assertion = Callable[[Any, NamingContext], T]


# ============================================================================
# Collections
# ============================================================================

def array_of(assertion: Assertion[T]) -> Assertion[list[T]]:
    """Array whose every element passes `assertion`, checked in index order."""

    def check(value: Any, name: NamingContext = DEFAULT_NAME) -> list[T]:
        items = array(value, name)
        return [assertion(item, derive(name, i, index)) for i, item in enumerate(items)]

    return check


def arrayish(assertion: Assertion[T]) -> Assertion[list[T]]:
    """Array of `assertion`, or a single matching value wrapped in a list."""
    list_assertion = array_of(assertion)

    def check(value: Any, name: NamingContext = DEFAULT_NAME) -> list[T]:
        if isinstance(value, ARRAY_TYPES):
            return list_assertion(value, name)
        try:
            return [assertion(value, name)]
        except ValidationFailure as exc:
            raise ValidationFailure(f"{exc.kind} or an array", resolve(name), value) from exc

    return check


def object_of(assertion: Assertion[T]) -> Assertion[dict[str, T]]:
    """Mapping whose every value passes `assertion`."""

    def check(value: Any, name: NamingContext = DEFAULT_NAME) -> dict[str, T]:
        obj = object_(value, name)
        return {key: assertion(item, derive(name, key, attribute)) for key, item in obj.items()}

    return check


def shape(fields: Mapping[str, Assertion[Any]]) -> Assertion[dict[str, Any]]:
    """Mapping with the declared fields.

    Fields are checked in declaration order; a missing key reads as None.
    The result holds exactly the declared keys, anything else on the input
    is dropped.
    """

    def check(value: Any, name: NamingContext = DEFAULT_NAME) -> dict[str, Any]:
        obj = object_(value, name)
        return {key: assertion(obj.get(key), derive(name, key, attribute)) for key, assertion in fields.items()}

    return check


# ============================================================================
# Absent values
# ============================================================================

def maybe(assertion: Assertion[T]) -> Assertion[T | None]:
    def check(value: Any, name: NamingContext = DEFAULT_NAME) -> T | None:
        if value is None:
            return None
        return assertion(value, name)

    return check


def with_default(assertion: Assertion[T], default: T) -> Assertion[T]:
    """Like maybe, but an absent value becomes `default`.

    The default is returned as-is, not copied.
    """

    def check(value: Any, name: NamingContext = DEFAULT_NAME) -> T:
        if value is None:
            return default
        return assertion(value, name)

    return check


# ============================================================================
# Alternatives
# ============================================================================

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _render_literal(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def literal(expected: T) -> Assertion[T]:
    """Exactly `expected`.

    int and float count as one number type, so literal(1) accepts 1.0 from a
    JSON payload; any other pair must share a type, so literal(1) rejects True.
    """
    kind = f"a literal<{_render_literal(expected)}>"
    same_kind = _is_number if _is_number(expected) else (lambda value: type(value) is type(expected))

    def check(value: Any, name: NamingContext = DEFAULT_NAME) -> T:
        if same_kind(value) and value == expected:
            return value
        raise ValidationFailure(kind, resolve(name), value)

    return check


def union(*assertions: Assertion[Any]) -> Assertion[Any]:
    """First assertion that accepts the value wins.

    When every branch fails the raised kind joins all branch kinds with
    " or " in declared order; target and value are the original ones.
    """
    if not assertions:
        raise TypeError("union() requires at least one assertion")

    def check(value: Any, name: NamingContext = DEFAULT_NAME) -> Any:
        failures: list[ValidationFailure] = []
        for assertion in assertions:
            try:
                return assertion(value, name)
            except ValidationFailure as exc:
                failures.append(exc)
        raise ValidationFailure(" or ".join(f.kind for f in failures), resolve(name), value)

    return check


def either(a: Assertion[Any], b: Assertion[Any]) -> Assertion[Any]:
    return union(a, b)


def literals(values: Iterable[T]) -> Assertion[T]:
    return union(*(literal(v) for v in values))
