# ============================================================================
# TypedExceptions - Package Initialization
#
# Purpose: Package-level exports and version information
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from TypedExceptions import ExceptionFactory, convert
#
# Changelog:
#   2026-09-28: Initial package setup
# ============================================================================

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from TypedExceptions.conversion import convert, exception_to_string
from TypedExceptions.exceptions import (
    ApplicationException,
    ArgumentException,
    ArgumentExceptionBase,
    ArgumentNullException,
    ArgumentOutOfRangeException,
    InvalidOperationException,
    IOException,
    NotSupportedException,
    TimeoutException,
    TypedException,
)
from TypedExceptions.factory import ExceptionFactory
from TypedExceptions.formatting import FormatError, string_format
from TypedExceptions.identity import (
    error_kind,
    error_message,
    exception_tags,
    is_application_exception,
    is_argument_exception,
    is_argument_null_exception,
    is_argument_out_of_range_exception,
    is_exception_of_kind,
    is_exception_tagged,
    is_invalid_operation_exception,
    is_io_exception,
    is_not_supported_exception,
    is_timeout_exception,
    looks_like_error,
    looks_like_error_of_kind,
)
from TypedExceptions.kinds import DEFAULT_MESSAGES, Kind

__all__ = [
    "__version__",
    "ApplicationException",
    "ArgumentException",
    "ArgumentExceptionBase",
    "ArgumentNullException",
    "ArgumentOutOfRangeException",
    "DEFAULT_MESSAGES",
    "ExceptionFactory",
    "FormatError",
    "IOException",
    "InvalidOperationException",
    "Kind",
    "NotSupportedException",
    "TimeoutException",
    "TypedException",
    "convert",
    "error_kind",
    "error_message",
    "exception_tags",
    "exception_to_string",
    "is_application_exception",
    "is_argument_exception",
    "is_argument_null_exception",
    "is_argument_out_of_range_exception",
    "is_exception_of_kind",
    "is_exception_tagged",
    "is_invalid_operation_exception",
    "is_io_exception",
    "is_not_supported_exception",
    "is_timeout_exception",
    "looks_like_error",
    "looks_like_error_of_kind",
    "string_format",
]
