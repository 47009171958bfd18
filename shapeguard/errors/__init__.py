"""Result types and the application error used when a validation failure has
to cross a boundary as a value rather than as an exception.

Usage:
    from shapeguard.errors import Ok, Err

    match parse(payload, user_shape):
        case Ok(user):
            handle(user)
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
]
