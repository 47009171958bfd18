"""Primitive Assertions

Leaf checks against a value's runtime type. Each returns the value unchanged
when it matches (no coercion) and raises ValidationFailure otherwise.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Callable

from .errors import ValidationFailure
from .naming import DEFAULT_NAME, NamingContext, resolve

ARRAY_TYPES = (list, tuple)


def boolean(value: Any, name: NamingContext = DEFAULT_NAME) -> bool:
    if isinstance(value, bool):
        return value
    raise ValidationFailure("a boolean", resolve(name), value)


def number(value: Any, name: NamingContext = DEFAULT_NAME) -> int | float:
    # bool subclasses int but is not a number here; NaN is a valid float
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    raise ValidationFailure("a number", resolve(name), value)


def string(value: Any, name: NamingContext = DEFAULT_NAME) -> str:
    if isinstance(value, str):
        return value
    raise ValidationFailure("a string", resolve(name), value)


def regex(value: Any, name: NamingContext = DEFAULT_NAME) -> re.Pattern:
    if isinstance(value, re.Pattern):
        return value
    raise ValidationFailure("a regex", resolve(name), value)


def array(value: Any, name: NamingContext = DEFAULT_NAME) -> list | tuple:
    if isinstance(value, ARRAY_TYPES):
        return value
    raise ValidationFailure("an array", resolve(name), value)


def func(value: Any, name: NamingContext = DEFAULT_NAME) -> Callable:
    if callable(value):
        return value
    raise ValidationFailure("a function", resolve(name), value)


def object_(value: Any, name: NamingContext = DEFAULT_NAME) -> Mapping:
    """Mappings only: None and arrays are never objects."""
    if isinstance(value, Mapping):
        return value
    raise ValidationFailure("an object", resolve(name), value)
