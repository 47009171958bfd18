"""Validation at System Boundaries

Parse-don't-validate helpers for the places untrusted data enters:
- Result-returning parsers for payloads and JSON text
- Batch parsing that collects every failing item
- A decorator that narrows function arguments before the call

Only ValidationFailure is turned into an Err; any other exception is a bug
in the caller or an assertion and propagates.
"""
from __future__ import annotations

import inspect
import json
import re
from functools import wraps
from typing import Any, Callable, Generic, TypeVar

from shapeguard.config import settings
from shapeguard.errors import AppError, ErrorCode, ErrorContext, Err, Ok, Result
from shapeguard.logging import SENSITIVE_KEYS, validation_logger
from .combinators import Assertion
from .errors import ValidationFailure
from .naming import DEFAULT_NAME, NamingContext, derive, index

T = TypeVar("T")


def _log_failure(failure: ValidationFailure, origin: str) -> None:
    if not settings.LOG_FAILURES:
        return
    # Raw value so the redaction processor can walk nested mappings
    field_name = re.split(r"[.\[\]]", failure.target.rstrip("]"))[-1]
    value = "[REDACTED]" if field_name.lower() in SENSITIVE_KEYS else failure.value
    validation_logger().debug("validation_failed", origin=origin, target=failure.target,
        kind=failure.kind, value=value)


# ============================================================================
# Boundary Validator
# ============================================================================

class BoundaryValidator(Generic[T]):
    """Stateless boundary validator for a specific assertion.

    Usage:
        user_boundary = BoundaryValidator(user_shape, name="user", origin="signup")
        result = user_boundary.parse(request_data)
    """

    __slots__ = ("assertion", "name", "origin")

    def __init__(self, assertion: Assertion[T], name: NamingContext = DEFAULT_NAME, origin: str = "boundary"):
        self.assertion, self.name, self.origin = assertion, name, origin

    def parse(self, value: Any) -> Result[T, AppError]:
        """Validate an already decoded value."""
        try:
            return Ok(self.assertion(value, self.name))
        except ValidationFailure as e:
            _log_failure(e, self.origin)
            return Err(e.to_app_error(origin=self.origin))

    def parse_json(self, text: str | bytes) -> Result[T, AppError]:
        """Decode JSON text, then validate the decoded value."""
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            return Err(AppError(code=ErrorCode.E2021_INVALID_JSON, message=f"Invalid JSON: {e.msg}",
                context=ErrorContext(origin=self.origin), metadata={"line": e.lineno, "column": e.colno}, cause=e))
        return self.parse(value)


# ============================================================================
# Functional Boundary Parsers
# ============================================================================

def parse(value: Any, assertion: Assertion[T], name: NamingContext = DEFAULT_NAME, *,
          origin: str = "boundary") -> Result[T, AppError]:
    """Validate a value, returning a Result instead of raising.

    Usage:
        match parse(payload, user_shape, "user"):
            case Ok(user):
                save(user)
            case Err(error):
                return error.to_dict()
    """
    return BoundaryValidator(assertion, name, origin).parse(value)


def parse_json(text: str | bytes, assertion: Assertion[T], name: NamingContext = DEFAULT_NAME, *,
               origin: str = "json") -> Result[T, AppError]:
    """Decode and validate JSON text."""
    return BoundaryValidator(assertion, name, origin).parse_json(text)


def parse_batch(values: list[Any], assertion: Assertion[T], name: NamingContext = DEFAULT_NAME, *,
                origin: str = "batch", max_errors: int = 50) -> Result[list[T], list[tuple[int, AppError]]]:
    """Validate a batch of items, collecting failures instead of stopping at the first.

    Each item is named `name[i]`. Returns Ok with every narrowed item, or Err
    with (index, error) pairs, at most `max_errors` of them.

    Usage:
        match parse_batch(rows, row_shape, "rows"):
            case Ok(valid):
                store(valid)
            case Err(errors):
                for idx, err in errors:
                    log.error("bad_row", index=idx, error=err.message)
    """
    valid: list[T] = []
    errors: list[tuple[int, AppError]] = []

    for idx, item in enumerate(values):
        if len(errors) >= max_errors:
            break
        try:
            valid.append(assertion(item, derive(name, idx, index)))
        except ValidationFailure as e:
            _log_failure(e, origin)
            errors.append((idx, e.to_app_error(origin=origin).with_metadata(batch_index=idx)))

    if errors:
        return Err(errors)
    return Ok(valid)


# ============================================================================
# Decorator-based Boundary Validation
# ============================================================================

def validated(**assertions: Assertion[Any]) -> Callable[[Callable], Callable]:
    """Decorator narrowing a function's arguments by parameter name.

    Only arguments the caller actually passes are checked; parameter defaults
    are trusted. The parameter name is the failure target. Works for both
    plain and async functions.

    Usage:
        @validated(user_id=is_.number, tags=is_.array_of(is_.string))
        def tag_user(user_id, tags=()):
            ...
    """

    def decorator(fn: Callable) -> Callable:
        signature = inspect.signature(fn)
        unknown = sorted(set(assertions) - set(signature.parameters))
        if unknown:
            raise TypeError(f"{fn.__qualname__}() has no parameter(s) {', '.join(unknown)}")

        def narrow(args: tuple, kwargs: dict) -> inspect.BoundArguments:
            bound = signature.bind(*args, **kwargs)
            for param, assertion in assertions.items():
                if param not in bound.arguments:
                    continue
                try:
                    bound.arguments[param] = assertion(bound.arguments[param], param)
                except ValidationFailure as e:
                    _log_failure(e, fn.__qualname__)
                    raise
            return bound

        if inspect.iscoroutinefunction(fn):
            @wraps(fn)
            async def async_wrapper(*args, **kwargs):
                bound = narrow(args, kwargs)
                return await fn(*bound.args, **bound.kwargs)
            return async_wrapper

        @wraps(fn)
        def wrapper(*args, **kwargs):
            bound = narrow(args, kwargs)
            return fn(*bound.args, **bound.kwargs)
        return wrapper

    return decorator
