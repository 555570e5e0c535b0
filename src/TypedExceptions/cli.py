# ============================================================================
# TypedExceptions - Command Line Interface
#
# Purpose: Inspect the kind catalog and preview exception messages
# Inputs: Command-line arguments
# Outputs: Catalog listing or a rendered exception
# Dependencies: argparse, config, factory, logging_utils
# Usage: python -m TypedExceptions.cli make ArgumentOutOfRange --param count --min 1 --max 10
#
# Changelog:
#   2026-10-01: Initial CLI with 'kinds' and 'make' commands
#   2026-10-08: --log-level override; config errors exit with status 1
# ============================================================================

import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from TypedExceptions import __version__
from TypedExceptions.config import Config, LoggingConfig
from TypedExceptions.exceptions import ArgumentExceptionBase, TypedException
from TypedExceptions.factory import ExceptionFactory
from TypedExceptions.formatting import FormatError, string_format
from TypedExceptions.identity import exception_tags
from TypedExceptions.kinds import DEFAULT_MESSAGES, GENERIC_MESSAGE_TEMPLATE, Kind, builtin_kind
from TypedExceptions.logging_utils import get_logger, setup_logging

logger = get_logger(__name__)

# Built-in kinds whose factory method takes (message, *args)
_MESSAGE_FACTORIES: Dict[Kind, Callable[..., TypedException]] = {
    Kind.APPLICATION: ExceptionFactory.application,
    Kind.INVALID_OPERATION: ExceptionFactory.invalid_operation,
    Kind.NOT_SUPPORTED: ExceptionFactory.not_supported,
    Kind.IO: ExceptionFactory.io,
    Kind.TIMEOUT: ExceptionFactory.timeout,
}


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="typed-exceptions",
        description="Inspect typed exception kinds and preview their messages",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Override the configured logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("kinds", help="List the built-in kinds and their default messages")

    make_parser = subparsers.add_parser("make", help="Build an exception and print it")
    make_parser.add_argument("kind", type=str, help="Built-in kind name or any custom kind")
    make_parser.add_argument(
        "format_args",
        nargs="*",
        default=[],
        help="Positional arguments for the message template",
    )
    make_parser.add_argument(
        "-m",
        "--message",
        type=str,
        default=None,
        help="Message template (for Argument: detail appended to the default sentence)",
    )
    make_parser.add_argument(
        "--param",
        type=str,
        default=None,
        help="Parameter name (Argument, ArgumentNull, ArgumentOutOfRange)",
    )
    make_parser.add_argument("--min", type=str, default=None, help="Inclusive lower bound (ArgumentOutOfRange)")
    make_parser.add_argument("--max", type=str, default=None, help="Inclusive upper bound (ArgumentOutOfRange)")

    return parser


def parse_bound(value: Optional[str]) -> Any:
    """Parse a CLI bound as int, then float, falling back to the raw string."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def build_exception(args: argparse.Namespace) -> TypedException:
    """
    Build the exception described by the 'make' arguments.

    Unknown kind names are created through ExceptionFactory.custom.
    """
    kind = builtin_kind(args.kind)
    format_args: List[str] = list(args.format_args)

    if kind in _MESSAGE_FACTORIES:
        return _MESSAGE_FACTORIES[kind](args.message, *format_args)
    if kind is Kind.ARGUMENT:
        return ExceptionFactory.argument(args.param, args.message, *format_args)
    if kind is Kind.ARGUMENT_NULL:
        return ExceptionFactory.argument_null(args.param)
    if kind is Kind.ARGUMENT_OUT_OF_RANGE:
        return ExceptionFactory.argument_out_of_range(args.param, parse_bound(args.min), parse_bound(args.max))
    return ExceptionFactory.custom(args.kind, args.message, *format_args)


def render_exception(exc: TypedException, config: Config) -> List[str]:
    """Render an exception as output lines according to config.display."""
    lines = [str(exc)]
    if config.display.show_kind:
        lines.append(f"Kind:       {exc.kind}")
    if config.display.show_parameter and isinstance(exc, ArgumentExceptionBase):
        lines.append(f"Parameter:  {exc.parameter_name}")
    if config.display.show_tags:
        lines.append(f"Tags:       {', '.join(sorted(exception_tags(exc)))}")
    return lines


def kinds_command(args: argparse.Namespace, config: Config) -> int:
    """
    Execute the 'kinds' command.

    Returns:
        Exit code
    """
    print(f"{'Kind':20s} Default message")
    print("-" * 72)
    for kind, message in DEFAULT_MESSAGES.items():
        if message is None:
            message = string_format(GENERIC_MESSAGE_TEMPLATE, kind.value)
        else:
            message = string_format(message, "<parameter>")
        print(f"{kind.value:20s} {message}")
    return 0


def make_command(args: argparse.Namespace, config: Config) -> int:
    """
    Execute the 'make' command.

    Returns:
        Exit code (0 for success, 1 when the arguments are rejected)
    """
    try:
        exc = build_exception(args)
    except (TypedException, FormatError) as e:
        logger.error(f"Could not build exception: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1

    logger.info(f"Built {exc.kind} exception")
    for line in render_exception(exc, config):
        print(line)
    return 0


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration selected by --config and apply --log-level."""
    config = Config.from_yaml(args.config) if args.config else Config.from_default()
    if args.log_level:
        config.logging = LoggingConfig(level=args.log_level, format=config.logging.format)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args)
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        print(f"\n✗ Configuration error: {e}\n", file=sys.stderr)
        return 1

    setup_logging(config.logging.level, config.logging.format)

    try:
        if args.command == "kinds":
            return kinds_command(args, config)
        if args.command == "make":
            return make_command(args, config)
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"\n✗ Unexpected error: {e}\n", file=sys.stderr)
        return 2

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
