__version__ = "0.1.0"

from shapeguard.config import settings, get_settings
from shapeguard.errors import AppError, ErrorCode, Err, Ok, Result
from shapeguard.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    unbind_context,
    validation_logger,
)
from shapeguard.validation import (
    Assertion,
    NamingContext,
    ValidationFailure,
    array,
    array_of,
    arrayish,
    boolean,
    derive,
    either,
    func,
    is_,
    literal,
    literals,
    maybe,
    number,
    object_,
    object_of,
    parse,
    parse_batch,
    parse_json,
    path,
    regex,
    resolve,
    shape,
    string,
    union,
    validate,
    validated,
    with_default,
)
