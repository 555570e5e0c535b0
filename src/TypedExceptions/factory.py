# ============================================================================
# TypedExceptions - Exception Factory
#
# Purpose: Single call-site constructors for built-in and custom kinds
# Inputs: Kind-specific constructor arguments
# Outputs: Tagged exception instances
# Dependencies: exceptions
# Usage: raise ExceptionFactory.argument_out_of_range("count", 1, 10)
#
# Changelog:
#   2026-09-28: Initial factory
# ============================================================================

from typing import Any, Optional

from TypedExceptions.exceptions import (
    ApplicationException,
    ArgumentException,
    ArgumentNullException,
    ArgumentOutOfRangeException,
    InvalidOperationException,
    IOException,
    NotSupportedException,
    TimeoutException,
    TypedException,
)
from TypedExceptions.kinds import KindLike


class ExceptionFactory:
    """
    Static factory methods for the built-in exception kinds.

    Each method passes its arguments straight to the corresponding class; the
    only validation is what that class performs itself.
    """

    @staticmethod
    def application(message: Optional[str] = None, *args: Any) -> ApplicationException:
        return ApplicationException(message, *args)

    @staticmethod
    def argument(parameter_name: str, message: Optional[str] = None, *args: Any) -> ArgumentException:
        """
        Create an ArgumentException.

        Args:
            parameter_name: Name of the invalid parameter
            message: Optional detail appended to the default sentence
            *args: Format arguments applied to the detail
        """
        return ArgumentException(parameter_name, message, *args)

    @staticmethod
    def argument_null(parameter_name: str) -> ArgumentNullException:
        return ArgumentNullException(parameter_name)

    @staticmethod
    def argument_out_of_range(
        parameter_name: str, min: Any = None, max: Any = None
    ) -> ArgumentOutOfRangeException:
        """
        Create an ArgumentOutOfRangeException.

        Args:
            parameter_name: Name of the invalid parameter
            min: Optional inclusive lower bound
            max: Optional inclusive upper bound
        """
        return ArgumentOutOfRangeException(parameter_name, min, max)

    @staticmethod
    def invalid_operation(message: Optional[str] = None, *args: Any) -> InvalidOperationException:
        return InvalidOperationException(message, *args)

    @staticmethod
    def not_supported(message: Optional[str] = None, *args: Any) -> NotSupportedException:
        return NotSupportedException(message, *args)

    @staticmethod
    def io(message: Optional[str] = None, *args: Any) -> IOException:
        return IOException(message, *args)

    @staticmethod
    def timeout(message: Optional[str] = None, *args: Any) -> TimeoutException:
        return TimeoutException(message, *args)

    @staticmethod
    def custom(kind: KindLike, message: Optional[str] = None, *args: Any) -> TypedException:
        """
        Create an exception of an arbitrary kind.

        Any non-empty kind name is accepted, including the names of built-in
        kinds.

        Args:
            kind: Kind name (the implied type)
            message: Optional message template
            *args: Format arguments applied to the template
        """
        return TypedException(kind, message, *args)
