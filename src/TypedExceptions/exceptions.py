# ============================================================================
# TypedExceptions - Exception Types
#
# Purpose: Typed, named exceptions with formatted messages
# Inputs: Kind name, message template, format arguments
# Outputs: Tagged exception instances
# Dependencies: formatting, kinds, identity, conversion
# Usage: raise ArgumentNullException("path")
#
# Changelog:
#   2026-09-28: Initial TypedException base and built-in kinds
#   2026-10-02: ArgumentExceptionBase validates parameter_name itself instead of
#               relying on subclasses
#   2026-10-06: Static identity helpers exposed on TypedException
# ============================================================================

import numbers
from typing import Any, Optional

from TypedExceptions import conversion, identity
from TypedExceptions.formatting import string_format
from TypedExceptions.kinds import (
    DEFAULT_MESSAGES,
    GENERIC_MESSAGE_TEMPLATE,
    OUT_OF_RANGE_MESSAGES,
    Kind,
    KindLike,
    kind_name,
)


class TypedException(Exception):
    """
    Base class for typed exceptions.

    May be instantiated directly to create an exception of any custom kind.
    Every instance is tagged with its own kind before the constructor returns,
    so the identity predicates work on it immediately.
    """

    def __init__(self, kind: KindLike, message: Optional[str] = None, *args: Any):
        """
        Initialize exception.

        Args:
            kind: Built-in Kind or custom kind name (the implied type)
            message: Optional message, used as a template when args are given
            *args: Format arguments applied to the message template
        """
        if kind is None:
            raise ArgumentNullException("kind")
        if not isinstance(kind, str) or not kind:
            raise ArgumentException("kind", "A kind name must be a non-empty string.")

        self._kind = kind_name(kind)
        if message:
            self._message = string_format(message, *args) if args else message
        else:
            self._message = string_format(GENERIC_MESSAGE_TEMPLATE, self._kind)

        super().__init__(self._message)
        conversion.convert(self)

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def name(self) -> str:
        """Alias of kind."""
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def is_exception_tagged(self) -> bool:
        return identity.is_exception_tagged(self)

    def is_kind(self, kind: KindLike) -> bool:
        """Return True if this exception is tagged with the given kind."""
        return identity.is_exception_of_kind(self, kind)

    @property
    def is_application_exception(self) -> bool:
        return identity.is_application_exception(self)

    @property
    def is_argument_exception(self) -> bool:
        return identity.is_argument_exception(self)

    @property
    def is_argument_null_exception(self) -> bool:
        return identity.is_argument_null_exception(self)

    @property
    def is_argument_out_of_range_exception(self) -> bool:
        return identity.is_argument_out_of_range_exception(self)

    @property
    def is_invalid_operation_exception(self) -> bool:
        return identity.is_invalid_operation_exception(self)

    @property
    def is_not_supported_exception(self) -> bool:
        return identity.is_not_supported_exception(self)

    @property
    def is_io_exception(self) -> bool:
        return identity.is_io_exception(self)

    @property
    def is_timeout_exception(self) -> bool:
        return identity.is_timeout_exception(self)

    convert = staticmethod(conversion.convert)
    looks_like_error = staticmethod(identity.looks_like_error)
    looks_like_error_of_kind = staticmethod(identity.looks_like_error_of_kind)
    is_exception_of_kind = staticmethod(identity.is_exception_of_kind)

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self._kind!r}, message={self._message!r})"


class ApplicationException(TypedException):
    """A general purpose application error."""

    def __init__(self, message: Optional[str] = None, *args: Any):
        super().__init__(Kind.APPLICATION, message, *args)


class ArgumentExceptionBase(TypedException):
    """Base class for exceptions describing a problem with a named argument."""

    def __init__(
        self,
        kind: KindLike,
        default_message: str,
        parameter_name: str,
        message: Optional[str] = None,
        *args: Any,
    ):
        """
        Initialize argument exception.

        Args:
            kind: Kind of the exception
            default_message: Sentence describing the problem with the argument
            parameter_name: Name of the offending parameter
            message: Optional detail appended to default_message after a space
            *args: Format arguments applied to the combined message
        """
        _require_parameter_name(parameter_name)
        if message:
            default_message = f"{default_message} {message}"

        self._parameter_name = parameter_name
        super().__init__(kind, default_message, *args)

    @property
    def parameter_name(self) -> str:
        return self._parameter_name


class ArgumentException(ArgumentExceptionBase):
    """Raised when an invalid argument is passed to a function."""

    def __init__(self, parameter_name: str, message: Optional[str] = None, *args: Any):
        _require_parameter_name(parameter_name)
        super().__init__(
            Kind.ARGUMENT,
            string_format(DEFAULT_MESSAGES[Kind.ARGUMENT], parameter_name),
            parameter_name,
            message,
            *args,
        )


class ArgumentNullException(ArgumentExceptionBase):
    """Raised when None is passed for an argument that requires a value."""

    def __init__(self, parameter_name: str):
        _require_parameter_name(parameter_name)
        super().__init__(
            Kind.ARGUMENT_NULL,
            string_format(DEFAULT_MESSAGES[Kind.ARGUMENT_NULL], parameter_name),
            parameter_name,
        )


class ArgumentOutOfRangeException(ArgumentExceptionBase):
    """Raised when an argument lies outside the range of allowable values."""

    def __init__(self, parameter_name: str, min: Any = None, max: Any = None):
        """
        Initialize out-of-range exception.

        Args:
            parameter_name: Name of the offending parameter
            min: Optional inclusive lower bound
            max: Optional inclusive upper bound (only reported together with min)
        """
        _require_parameter_name(parameter_name)
        if min is None:
            message = string_format(OUT_OF_RANGE_MESSAGES["unbounded"], parameter_name)
        elif max is None:
            message = string_format(OUT_OF_RANGE_MESSAGES["min"], parameter_name, _format_bound(min))
        else:
            message = string_format(
                OUT_OF_RANGE_MESSAGES["min_max"],
                parameter_name,
                _format_bound(min),
                _format_bound(max),
            )

        self.min = min
        self.max = max
        super().__init__(Kind.ARGUMENT_OUT_OF_RANGE, message, parameter_name)


class InvalidOperationException(TypedException):
    """Raised when an operation is not valid for the current state of an object."""

    def __init__(self, message: Optional[str] = None, *args: Any):
        if message is None:
            message = DEFAULT_MESSAGES[Kind.INVALID_OPERATION]
        super().__init__(Kind.INVALID_OPERATION, message, *args)


class NotSupportedException(TypedException):
    """Raised when an operation is not supported by the implementing object."""

    def __init__(self, message: Optional[str] = None, *args: Any):
        if message is None:
            message = DEFAULT_MESSAGES[Kind.NOT_SUPPORTED]
        super().__init__(Kind.NOT_SUPPORTED, message, *args)


class IOException(TypedException):
    """Raised when an IO error has occurred."""

    def __init__(self, message: Optional[str] = None, *args: Any):
        if message is None:
            message = DEFAULT_MESSAGES[Kind.IO]
        super().__init__(Kind.IO, message, *args)


class TimeoutException(TypedException):
    """Raised when an operation times out before completing."""

    def __init__(self, message: Optional[str] = None, *args: Any):
        if message is None:
            message = DEFAULT_MESSAGES[Kind.TIMEOUT]
        super().__init__(Kind.TIMEOUT, message, *args)


def _require_parameter_name(parameter_name: Optional[str]) -> None:
    if parameter_name is None:
        raise ArgumentNullException("parameter_name")
    if not isinstance(parameter_name, str) or not parameter_name:
        raise ArgumentException("parameter_name", "A parameter name must be a non-empty string.")


def _format_bound(value: Any) -> str:
    # bool is an int subclass but is not a numeric bound
    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        return str(value)
    return f'"{value}"'
