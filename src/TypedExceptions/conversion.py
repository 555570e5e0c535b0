# ============================================================================
# TypedExceptions - Exception Conversion
#
# Purpose: Retrofit kind tags onto error-like values in place
# Inputs: Native exceptions or structurally error-like objects
# Outputs: The same object, tagged
# Dependencies: identity, kinds, logging_utils
# Usage: err = convert(err); is_exception_of_kind(err, "ValueError")
#
# Changelog:
#   2026-09-28: Initial in-place conversion
#   2026-10-06: Added exception_to_string for converted native errors
# ============================================================================

from typing import Any, TypeVar

from TypedExceptions.identity import (
    TAGS_ATTRIBUTE,
    error_kind,
    error_message,
    is_exception_tagged,
    looks_like_error,
)
from TypedExceptions.kinds import NATIVE_GENERIC_KIND
from TypedExceptions.logging_utils import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def convert(value: T) -> T:
    """
    Tag an error-like value so kind tests succeed for its own kind.

    The value is modified in place and returned; no copy is made. Calling
    convert again on the same value does not change its state.

    Args:
        value: Native exception or error-like object

    Returns:
        The same value, now tagged

    Raises:
        ArgumentNullException: If value is None
        ArgumentException: If value does not look like an error
        NotSupportedException: If value cannot carry instance attributes
    """
    from TypedExceptions.exceptions import (
        ArgumentException,
        ArgumentNullException,
        NotSupportedException,
    )

    if value is None:
        raise ArgumentNullException("value")
    if not looks_like_error(value):
        raise ArgumentException("value", "The value does not look like an error.")

    kind = error_kind(value)
    if is_exception_tagged(value):
        getattr(value, TAGS_ATTRIBUTE).add(kind)
        return value

    try:
        setattr(value, TAGS_ATTRIBUTE, {kind})
    except (AttributeError, TypeError) as e:
        raise NotSupportedException(
            "Values of type {0} cannot carry exception tags.", type(value).__name__
        ) from e

    logger.debug(f"Tagged {kind} value as a typed exception")
    return value


def exception_to_string(value: Any) -> str:
    """
    Render an error-like value as a readable sentence.

    Typed exceptions render their resolved message. Values of Python's generic
    ``Exception`` kind render as ``"Exception: <message>"`` (or just
    ``"Exception"`` when the message is empty). Everything else renders its
    message verbatim.
    """
    from TypedExceptions.exceptions import TypedException

    if isinstance(value, TypedException):
        return value.message

    kind = error_kind(value)
    message = error_message(value)
    if kind == NATIVE_GENERIC_KIND:
        return f"{kind}: {message}" if message else kind
    return message
