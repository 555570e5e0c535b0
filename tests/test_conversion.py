# ============================================================================
# TypedExceptions - Conversion Tests
#
# Purpose: Test in-place tagging of native and structural errors
# Inputs: Native exceptions, structural error objects
# Outputs: Test pass/fail
# Dependencies: pytest, TypedExceptions
# Usage: pytest tests/test_conversion.py -v
# ============================================================================

import logging

import pytest

from TypedExceptions.conversion import convert, exception_to_string
from TypedExceptions.exceptions import (
    ArgumentException,
    ArgumentNullException,
    NotSupportedException,
    TypedException,
)
from TypedExceptions.factory import ExceptionFactory
from TypedExceptions.identity import (
    exception_tags,
    is_exception_of_kind,
    is_exception_tagged,
    looks_like_error,
    looks_like_error_of_kind,
)


class TestConvertNativeErrors:
    def test_adopts_native_error(self, raised):
        err = raised(ArithmeticError("overflow"))
        assert looks_like_error(err) is True
        assert is_exception_tagged(err) is False

        converted = convert(err)

        assert converted is err
        assert is_exception_tagged(err) is True
        assert is_exception_of_kind(err, "ArithmeticError") is True
        assert looks_like_error_of_kind(err, "ArithmeticError") is True

    def test_keeps_native_type_and_message(self, raised):
        err = convert(raised(KeyError("missing")))
        assert isinstance(err, KeyError)
        assert err.args == ("missing",)
        assert err.__traceback__ is not None

    def test_only_own_kind_is_tagged(self):
        err = convert(ValueError("bad"))
        assert is_exception_of_kind(err, "Application") is False
        assert exception_tags(err) == frozenset({"ValueError"})

    def test_idempotent(self, raised):
        err = raised(LookupError("x"))
        convert(err)
        state = dict(vars(err))
        tags = exception_tags(err)

        assert convert(err) is err

        assert dict(vars(err)) == state
        assert exception_tags(err) == tags

    def test_logs_first_tagging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="TypedExceptions.conversion"):
            convert(RuntimeError("boom"))
        assert "Tagged RuntimeError value as a typed exception" in caplog.text


class TestConvertStructuralErrors:
    def test_adopts_structural_error(self, structural_error):
        assert convert(structural_error) is structural_error
        assert is_exception_tagged(structural_error) is True
        assert is_exception_of_kind(structural_error, "RangeError") is True

    def test_renamed_value_extends_tags(self, structural_error):
        convert(structural_error)
        structural_error.name = "BoundsError"
        convert(structural_error)
        assert exception_tags(structural_error) == frozenset({"RangeError", "BoundsError"})

    def test_value_without_instance_dict(self, slotted_error):
        assert looks_like_error(slotted_error) is True
        with pytest.raises(NotSupportedException) as exc_info:
            convert(slotted_error)
        assert "SlottedError" in exc_info.value.message


class TestConvertPreconditions:
    def test_none_raises_argument_null(self):
        with pytest.raises(ArgumentNullException) as exc_info:
            convert(None)
        assert exc_info.value.parameter_name == "value"

    def test_non_error_raises_argument(self):
        with pytest.raises(ArgumentException) as exc_info:
            convert("not an error")
        assert exc_info.value.kind == "Argument"
        assert exc_info.value.parameter_name == "value"

    def test_typed_exception_convert_is_no_op(self):
        e = ExceptionFactory.invalid_operation()
        tags = exception_tags(e)
        assert TypedException.convert(e) is e
        assert exception_tags(e) == tags


class TestExceptionToString:
    def test_generic_native_error_without_message(self, raised):
        assert exception_to_string(convert(raised(Exception()))) == "Exception"

    def test_generic_native_error_with_message(self, raised):
        assert exception_to_string(convert(raised(Exception("Message")))) == "Exception: Message"

    def test_specific_native_error_renders_message(self):
        assert exception_to_string(convert(ValueError("bad value"))) == "bad value"

    def test_typed_exception_renders_message(self):
        e = ExceptionFactory.invalid_operation("Message")
        assert exception_to_string(e) == "Message"
        assert str(e) == "Message"

    def test_structural_error_renders_message(self, structural_error):
        assert exception_to_string(structural_error) == "Index out of range"
