# ============================================================================
# TypedExceptions - Message Formatting
#
# Purpose: Resolve message templates against positional or named arguments
# Inputs: Template string, format arguments
# Outputs: Resolved message string
# Dependencies: collections.abc
# Usage: message = string_format("Your {0} doesn't work with my {1}", "foo", "bar")
#
# Changelog:
#   2026-09-28: Initial formatter for exception messages
#   2026-10-06: Accept a single list/tuple argument as the positional sequence
# ============================================================================

from collections.abc import Mapping
from typing import Any


class FormatError(ValueError):
    """Raised when a template references a placeholder that was not supplied."""

    def __init__(self, template: str, reason: str):
        super().__init__(f'Unable to format template "{template}": {reason}')
        self.template = template
        self.reason = reason


def string_format(template: str, *args: Any) -> str:
    """
    Resolve a message template.

    A single mapping argument is matched against named placeholders
    (``{key}``). A single list or tuple argument supplies the positional
    values. Any other argument list is used positionally (``{0}``, ``{1}``).

    Args:
        template: Template using ``str.format`` field syntax
        *args: Format arguments

    Returns:
        Resolved string (the template itself when no arguments are given)

    Raises:
        FormatError: If a placeholder cannot be resolved or the template is malformed
    """
    if not args:
        return template

    try:
        if len(args) == 1 and isinstance(args[0], Mapping):
            return template.format_map(args[0])
        if len(args) == 1 and isinstance(args[0], (list, tuple)):
            return template.format(*args[0])
        return template.format(*args)
    except KeyError as e:
        raise FormatError(template, f"no value supplied for placeholder {e}") from e
    except IndexError as e:
        raise FormatError(template, "not enough positional arguments") from e
    except ValueError as e:
        raise FormatError(template, str(e)) from e
