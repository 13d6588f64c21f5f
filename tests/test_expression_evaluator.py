import pytest

from adapters.evaluator.expression_evaluator import ExpressionEvaluator
from contracts import Expression, sub, unit
from ports.evaluator import Evaluator


def _e(left, op, right):
    return Expression.unchecked_new(left, op, right)


def test_evaluator_satisfies_port():
    assert isinstance(ExpressionEvaluator(), Evaluator)


def test_eval_flat_expression():
    result = ExpressionEvaluator().eval_expr(Expression.from_values(12, "/", 4))

    assert result.value == 3
    assert result.is_exact
    assert result.steps == ["12 / 4 = 3"]


def test_eval_nested_expression_records_inner_steps_first():
    expr = _e(sub(_e(unit(1), "+", unit(2))), "/", unit(3))

    result = ExpressionEvaluator().eval_expr(expr)

    assert result.value == 1
    assert result.steps == ["1 + 2 = 3", "3 / 3 = 1"]


def test_eval_right_nested_expression():
    expr = _e(unit(1), "*", sub(_e(unit(2), "+", unit(3))))

    assert ExpressionEvaluator().eval_expr(expr).value == 5


def test_eval_unchecked_expression_may_be_inexact():
    result = ExpressionEvaluator().eval_expr(_e(unit(1), "/", unit(2)))

    assert result.value == 0.5
    assert not result.is_exact


def test_eval_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        ExpressionEvaluator().eval_expr(_e(unit(1), "/", unit(0)))
