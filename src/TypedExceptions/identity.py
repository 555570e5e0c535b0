# ============================================================================
# TypedExceptions - Error Identity Model
#
# Purpose: Structural and tag-based predicates over arbitrary error values
# Inputs: Any value, kind names
# Outputs: Booleans, resolved kind/message
# Dependencies: kinds
# Usage: if is_exception_of_kind(err, "Timeout"): ...
#
# Changelog:
#   2026-09-28: Initial identity predicates
#   2026-10-02: Native BaseException instances resolve kind from their class
#               name; their `name` attribute (ImportError, NameError) is ignored
# ============================================================================

from typing import Any, FrozenSet, Optional

from TypedExceptions.kinds import Kind, KindLike, kind_name

# Instance attribute holding the set of kinds a value has been tagged with.
# Its presence is the generic "tagged exception" marker.
TAGS_ATTRIBUTE = "_exception_kinds"


def _require_kind(kind: Optional[KindLike]) -> str:
    if kind is None:
        from TypedExceptions.exceptions import ArgumentNullException

        raise ArgumentNullException("kind")
    return kind_name(kind)


def _str_attribute(value: Any, attribute: str) -> Optional[str]:
    found = getattr(value, attribute, None)
    return found if isinstance(found, str) else None


def _structural_kind(value: Any) -> Optional[str]:
    kind = _str_attribute(value, "kind")
    if kind is None:
        kind = _str_attribute(value, "name")
    return kind


def looks_like_error(value: Any) -> bool:
    """
    Duck-typed test for error-like values.

    Native Python exceptions always qualify. Any other object qualifies when it
    exposes string ``message``, ``stack`` and ``kind`` (or ``name``) attributes.
    """
    if value is None:
        return False
    if isinstance(value, BaseException):
        return True
    return (
        _str_attribute(value, "message") is not None
        and _str_attribute(value, "stack") is not None
        and _structural_kind(value) is not None
    )


def error_kind(value: Any) -> str:
    """
    Resolve the kind name of an error-like value.

    Args:
        value: Error-like value

    Returns:
        The value's kind (class name for native exceptions)

    Raises:
        ArgumentException: If the value does not look like an error
    """
    from TypedExceptions.exceptions import ArgumentException, TypedException

    if isinstance(value, TypedException):
        return value.kind
    if isinstance(value, BaseException):
        return type(value).__name__
    if looks_like_error(value):
        return _structural_kind(value)
    raise ArgumentException("value", "The value does not look like an error.")


def error_message(value: Any) -> str:
    """Resolve the message of an error-like value."""
    from TypedExceptions.exceptions import ArgumentException, TypedException

    if isinstance(value, TypedException):
        return value.message
    if isinstance(value, BaseException):
        return str(value)
    if looks_like_error(value):
        return value.message
    raise ArgumentException("value", "The value does not look like an error.")


def looks_like_error_of_kind(value: Any, kind: KindLike) -> bool:
    """Return True if value looks like an error and its kind equals kind."""
    name = _require_kind(kind)
    return looks_like_error(value) and error_kind(value) == name


def is_exception_tagged(value: Any) -> bool:
    """Return True if value looks like an error and has been through conversion."""
    return looks_like_error(value) and isinstance(getattr(value, TAGS_ATTRIBUTE, None), set)


def is_exception_of_kind(value: Any, kind: KindLike) -> bool:
    """
    Canonical kind test.

    Args:
        value: Any value
        kind: Built-in Kind or custom kind name

    Returns:
        True if value is tagged and carries the given kind tag

    Raises:
        ArgumentNullException: If kind is None
    """
    name = _require_kind(kind)
    if not is_exception_tagged(value):
        return False
    return name in getattr(value, TAGS_ATTRIBUTE)


def exception_tags(value: Any) -> FrozenSet[str]:
    """Return the kind tags carried by value (empty when untagged)."""
    if not is_exception_tagged(value):
        return frozenset()
    return frozenset(getattr(value, TAGS_ATTRIBUTE))


def is_application_exception(value: Any) -> bool:
    return is_exception_of_kind(value, Kind.APPLICATION)


def is_argument_exception(value: Any) -> bool:
    return is_exception_of_kind(value, Kind.ARGUMENT)


def is_argument_null_exception(value: Any) -> bool:
    return is_exception_of_kind(value, Kind.ARGUMENT_NULL)


def is_argument_out_of_range_exception(value: Any) -> bool:
    return is_exception_of_kind(value, Kind.ARGUMENT_OUT_OF_RANGE)


def is_invalid_operation_exception(value: Any) -> bool:
    return is_exception_of_kind(value, Kind.INVALID_OPERATION)


def is_not_supported_exception(value: Any) -> bool:
    return is_exception_of_kind(value, Kind.NOT_SUPPORTED)


def is_io_exception(value: Any) -> bool:
    return is_exception_of_kind(value, Kind.IO)


def is_timeout_exception(value: Any) -> bool:
    return is_exception_of_kind(value, Kind.TIMEOUT)
