"""Validation Failure

The single error kind raised by assertions. A failure carries the expected
kind ("a number", "a boolean or a string"), the fully resolved target path
("root.items[2].name") and the original offending value.

Error Format (to_dict):
{
    "kind": "a number",
    "target": "root.items[2]",
    "value": "x",
    "message": "root.items[2] must be a number"
}
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shapeguard.errors import AppError, ErrorCode, ErrorContext


@dataclass(eq=False)
class ValidationFailure(Exception):
    """Raised when a value does not conform to an assertion.

    Only this type is caught by the retrying combinators (either, union,
    arrayish); anything else raised inside an assertion is a programming
    error and propagates untouched.
    """
    kind: str
    target: str
    value: Any = None

    def __post_init__(self):
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.target} must be {self.kind}"

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        # args only holds the message; rebuild from the fields instead
        return type(self), (self.kind, self.target, self.value)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and API responses."""
        return {"kind": self.kind, "target": self.target, "value": self.value, "message": self.message}

    def to_app_error(self, origin: str = "") -> AppError:
        """Convert to AppError for Result-based callers."""
        return AppError(code=ErrorCode.E2004_INVALID_TYPE, message=self.message,
            context=ErrorContext(origin=origin),
            metadata={"field": self.target, "constraint": self.kind, "value": self.value}, cause=self)
