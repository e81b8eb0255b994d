"""Tests for decoding raw assignment text."""

from __future__ import annotations

import pytest

from mipsc.errors import UnsupportedExpressionError
from mipsc.expression import Assignment, decode_expression, is_number


class TestDecodeExpression:
    def test_compound_with_secondary(self):
        assert decode_expression("a += i + 2") == Assignment("a", "+=", "i", "+", 2)

    def test_sub_compound_with_minus(self):
        assert decode_expression("a -= b - 10") == Assignment("a", "-=", "b", "-", 10)

    def test_assign_binop(self):
        assert decode_expression("a = a + 1") == Assignment("a", "=", "a", "+", 1)

    def test_assign_literal(self):
        assign = decode_expression("b = 42")
        assert assign == Assignment("b", "=", "42")
        assert assign.operand_is_literal

    def test_assign_variable(self):
        assign = decode_expression("a = b")
        assert assign.operand == "b"
        assert not assign.operand_is_literal
        assert assign.secondary_operator == ""
        assert assign.immediate is None

    def test_whitespace_is_ignored(self):
        assert decode_expression(" a+=i+2 ") == decode_expression("a += i + 2")

    def test_multiply_secondary_is_decoded(self):
        assert decode_expression("a = b * 3").secondary_operator == "*"


class TestDecodeExpressionErrors:
    def test_no_operator(self):
        with pytest.raises(UnsupportedExpressionError, match="Unsupported operation"):
            decode_expression("a b")

    def test_missing_destination(self):
        with pytest.raises(UnsupportedExpressionError):
            decode_expression("= 3")

    def test_missing_right_hand_side(self):
        with pytest.raises(UnsupportedExpressionError):
            decode_expression("a =")

    def test_immediate_must_be_integer(self):
        with pytest.raises(UnsupportedExpressionError, match="Unsupported operand"):
            decode_expression("a = a + b")

    def test_negative_literal_has_no_source(self):
        with pytest.raises(UnsupportedExpressionError):
            decode_expression("a = -1")

    def test_non_ascii_digit_immediate(self):
        with pytest.raises(UnsupportedExpressionError):
            decode_expression("a = a + \u00b2")

    def test_non_ascii_digit_literal(self):
        with pytest.raises(UnsupportedExpressionError):
            decode_expression("a = \u0663")


class TestIsNumber:
    def test_ascii_digits(self):
        assert is_number("042")

    def test_empty(self):
        assert not is_number("")

    def test_unicode_digits_rejected(self):
        assert not is_number("\u00b2")
        assert not is_number("1\u0663")
