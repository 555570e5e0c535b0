# ============================================================================
# TypedExceptions - CLI Tests
#
# Purpose: Test the 'kinds' and 'make' commands and their error handling
# Inputs: Command-line argument lists
# Outputs: Test pass/fail
# Dependencies: pytest, TypedExceptions
# Usage: pytest tests/test_cli.py -v
# ============================================================================

import pytest

from TypedExceptions.cli import build_exception, create_parser, main, parse_bound, render_exception
from TypedExceptions.config import Config, DisplayConfig
from TypedExceptions.exceptions import ArgumentNullException
from TypedExceptions.factory import ExceptionFactory


class TestParser:
    def test_make_arguments(self):
        args = create_parser().parse_args(
            ["make", "ArgumentOutOfRange", "--param", "count", "--min", "1", "--max", "10"]
        )
        assert args.command == "make"
        assert args.kind == "ArgumentOutOfRange"
        assert args.param == "count"
        assert (args.min, args.max) == ("1", "10")
        assert args.format_args == []

    def test_make_format_args(self):
        args = create_parser().parse_args(["make", "CustomError", "foo", "bar", "-m", "{0} {1}"])
        assert args.format_args == ["foo", "bar"]
        assert args.message == "{0} {1}"

    @pytest.mark.parametrize("raw, parsed", [(None, None), ("1", 1), ("2.5", 2.5), ("a", "a")])
    def test_parse_bound(self, raw, parsed):
        assert parse_bound(raw) == parsed


class TestBuildException:
    def _args(self, *argv):
        return create_parser().parse_args(["make", *argv])

    def test_builtin_message_kind(self):
        e = build_exception(self._args("Timeout"))
        assert e.is_timeout_exception is True
        assert e.message == "Operation timed-out before completing."

    def test_argument_kind(self):
        e = build_exception(self._args("Argument", "foo", "--param", "p", "-m", "The {0} is required."))
        assert e.message == 'The argument "p" is invalid. The foo is required.'

    def test_argument_null_without_param(self):
        with pytest.raises(ArgumentNullException):
            build_exception(self._args("ArgumentNull"))

    def test_out_of_range_string_bound(self):
        e = build_exception(self._args("ArgumentOutOfRange", "--param", "letter", "--min", "a"))
        assert e.message == 'The value of the argument "letter" must be greater-than-or-equal to "a".'

    def test_unknown_kind_is_custom(self):
        e = build_exception(self._args("FooBar"))
        assert e.kind == "FooBar"
        assert e.message == "Error of type FooBar"


class TestRender:
    def test_default_display(self):
        lines = render_exception(ExceptionFactory.argument_null("p"), Config())
        assert lines == ['The argument "p" cannot be null.', "Kind:       ArgumentNull", "Parameter:  p"]

    def test_message_only(self):
        config = Config(display=DisplayConfig(show_kind=False, show_parameter=False))
        assert render_exception(ExceptionFactory.io(), config) == ["An IO error occurred."]

    def test_show_tags(self):
        config = Config(display=DisplayConfig(show_kind=False, show_tags=True))
        assert render_exception(ExceptionFactory.io(), config) == ["An IO error occurred.", "Tags:       IO"]


class TestMain:
    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_kinds(self, capsys):
        assert main(["kinds"]) == 0
        out = capsys.readouterr().out
        assert "Application          Error of type Application" in out
        assert 'ArgumentNull         The argument "<parameter>" cannot be null.' in out
        assert "Timeout              Operation timed-out before completing." in out

    def test_make(self, capsys):
        rc = main(["make", "ArgumentOutOfRange", "--param", "count", "--min", "1", "--max", "10"])
        assert rc == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == (
            'The value of the argument "count" must be greater-than-or-equal to 1 and less-than-or-equal-to 10.'
        )
        assert "Kind:       ArgumentOutOfRange" in out

    def test_make_custom_with_template(self, capsys):
        rc = main(["make", "CustomError", "foo", "bar", "-m", "Your {0} doesn't work with my {1}"])
        assert rc == 0
        assert capsys.readouterr().out.splitlines()[0] == "Your foo doesn't work with my bar"

    def test_make_rejected_arguments(self, capsys):
        assert main(["make", "Argument"]) == 1
        assert 'The argument "parameter_name" cannot be null.' in capsys.readouterr().err

    def test_make_unresolved_template(self, capsys):
        assert main(["make", "Custom", "x", "-m", "{0} {1}"]) == 1
        assert "Unable to format template" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "nope.yaml"), "kinds"]) == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_invalid_log_level(self, capsys):
        assert main(["--log-level", "chatty", "kinds"]) == 1

    def test_config_file_controls_display(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("display:\n  show_kind: false\n  show_tags: true\n")
        assert main(["--config", str(path), "make", "IO"]) == 0
        assert capsys.readouterr().out.splitlines() == ["An IO error occurred.", "Tags:       IO"]
