"""
Tests for pure operator application.

Run with: pytest tests/test_arithmetic.py -v
"""
import numpy as np
import pytest

from pocketcalc.model.arithmetic import ErrorKind, OperationError, Operator, apply_operator, is_finite


def ld(value):
    return np.longdouble(value)


class TestApplyOperator:
    """Tests for apply_operator."""

    def test_basic_operations(self):
        """Should compute the four operations."""
        assert apply_operator(ld(3), Operator.ADD, ld(4)) == 7
        assert apply_operator(ld(10), Operator.SUBTRACT, ld(4)) == 6
        assert apply_operator(ld(3), Operator.MULTIPLY, ld(7)) == 21
        assert apply_operator(ld(15), Operator.DIVIDE, ld(4)) == pytest.approx(3.75)

    def test_adopts_rhs_without_accumulator(self):
        """Should simply take the right-hand value when nothing is pending."""
        assert apply_operator(None, None, ld(5)) == 5
        assert apply_operator(ld(9), None, ld(5)) == 5
        assert apply_operator(None, Operator.ADD, ld(5)) == 5

    def test_division_by_zero(self):
        """Should raise a division-by-zero OperationError."""
        with pytest.raises(OperationError) as exc_info:
            apply_operator(ld(8), Operator.DIVIDE, ld(0))
        assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO
        assert str(exc_info.value) == "Division by zero"

    def test_zero_dividend_is_fine(self):
        assert apply_operator(ld(0), Operator.DIVIDE, ld(5)) == 0

    def test_overflow(self):
        """Should raise an overflow OperationError for results beyond double range."""
        with pytest.raises(OperationError) as exc_info:
            apply_operator(ld(1e308), Operator.MULTIPLY, ld(1e10))
        assert exc_info.value.kind is ErrorKind.OVERFLOW

    def test_operation_error_is_value_error(self):
        assert issubclass(OperationError, ValueError)


class TestOperatorEnum:
    def test_symbols(self):
        assert Operator("+") is Operator.ADD
        assert Operator("/") is Operator.DIVIDE
        assert [op.value for op in Operator] == ["+", "-", "*", "/"]

    def test_unknown_symbol(self):
        with pytest.raises(ValueError):
            Operator("^")


class TestIsFinite:
    def test_finite_and_non_finite(self):
        assert is_finite(ld(1.5))
        assert not is_finite(ld(float("inf")))
        assert not is_finite(ld(float("nan")))
