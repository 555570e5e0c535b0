# ============================================================================
# TypedExceptions - Built-in Kind Catalog
#
# Purpose: Enumerate the built-in exception kinds and their default messages
# Inputs: None
# Outputs: Kind enum, read-only DEFAULT_MESSAGES catalog
# Dependencies: enum, types
# Usage: from TypedExceptions.kinds import Kind, DEFAULT_MESSAGES
#
# Changelog:
#   2026-09-28: Initial catalog of built-in kinds
# ============================================================================

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class Kind(str, Enum):
    """Built-in exception kinds. Custom kinds are plain strings."""

    APPLICATION = "Application"
    ARGUMENT = "Argument"
    ARGUMENT_NULL = "ArgumentNull"
    ARGUMENT_OUT_OF_RANGE = "ArgumentOutOfRange"
    INVALID_OPERATION = "InvalidOperation"
    NOT_SUPPORTED = "NotSupported"
    IO = "IO"
    TIMEOUT = "Timeout"

    def __str__(self) -> str:
        return self.value


# Either a built-in Kind or any custom kind name
KindLike = Union[Kind, str]

# Python's generic native error kind (stringified as "<kind>: <message>")
NATIVE_GENERIC_KIND = "Exception"

GENERIC_MESSAGE_TEMPLATE = "Error of type {0}"

OUT_OF_RANGE_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "unbounded": 'The value of the argument "{0}" is outside of the allowable range.',
        "min": 'The value of the argument "{0}" must be greater-than-or-equal to {1}.',
        "min_max": (
            'The value of the argument "{0}" must be greater-than-or-equal to {1} '
            "and less-than-or-equal-to {2}."
        ),
    }
)

# Application has no canonical message; it falls back to the generic template.
# ArgumentOutOfRange messages depend on the bounds (see OUT_OF_RANGE_MESSAGES).
DEFAULT_MESSAGES: Mapping[Kind, Optional[str]] = MappingProxyType(
    {
        Kind.APPLICATION: None,
        Kind.ARGUMENT: 'The argument "{0}" is invalid.',
        Kind.ARGUMENT_NULL: 'The argument "{0}" cannot be null.',
        Kind.ARGUMENT_OUT_OF_RANGE: OUT_OF_RANGE_MESSAGES["unbounded"],
        Kind.INVALID_OPERATION: "Operation is not valid due to the current state of the object.",
        Kind.NOT_SUPPORTED: "Operation is not supported.",
        Kind.IO: "An IO error occurred.",
        Kind.TIMEOUT: "Operation timed-out before completing.",
    }
)


def kind_name(kind: KindLike) -> str:
    """Normalize a Kind member or custom kind string to its plain name."""
    if isinstance(kind, Kind):
        return kind.value
    return kind


def builtin_kind(name: str) -> Optional[Kind]:
    """Return the built-in Kind with the given name, or None for custom kinds."""
    try:
        return Kind(name)
    except ValueError:
        return None
