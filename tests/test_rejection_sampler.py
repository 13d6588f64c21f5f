from __future__ import annotations

import random

import pytest

from adapters.expression_generator.rejection_sampler import RejectionSamplingGenerator
from contracts import (
    Expression,
    ExpressionError,
    GeneratorConfig,
    SubOperand,
    UnitOperand,
)
from ports.expression_generator import ExpressionGenerator


def _operands_in_range(operand, value_range) -> bool:
    lo, hi = value_range
    if isinstance(operand, UnitOperand):
        return lo <= operand.value <= hi
    return _operands_in_range(operand.expression.left, value_range) and _operands_in_range(
        operand.expression.right, value_range
    )


def _has_allowed_shape(expr: Expression) -> bool:
    # Dwa liście albo dokładnie jedna strona zagnieżdżona
    nested = [isinstance(op, SubOperand) for op in (expr.left, expr.right)]
    return sum(nested) <= 1


def _revalidate(expr: Expression) -> None:
    Expression.from_values(expr.left.value, expr.operator, expr.right.value)


class _ScriptedRandom(random.Random):
    """Podaje z góry ustalone wartości dla choice()/randint()."""

    def __init__(self, choices, ints):
        super().__init__(0)
        self._choices = iter(choices)
        self._ints = iter(ints)

    def choice(self, seq):
        return next(self._choices)

    def randint(self, a, b):
        return next(self._ints)


def test_generator_satisfies_port():
    assert isinstance(RejectionSamplingGenerator(seed=1), ExpressionGenerator)


def test_from_range_returns_valid_expression_in_range():
    generator = RejectionSamplingGenerator(seed=7)
    value_range = (0, 10)

    for _ in range(200):
        expr = generator.from_range(value_range)

        assert _has_allowed_shape(expr)
        assert _operands_in_range(expr.left, value_range)
        assert _operands_in_range(expr.right, value_range)
        assert all(0 <= v <= 10 for v in expr.leaves())
        _revalidate(expr)


def test_from_range_produces_flat_expressions_only():
    generator = RejectionSamplingGenerator(seed=3)

    for _ in range(50):
        expr = generator.from_range((1, 20))
        assert expr.left.is_unit() and expr.right.is_unit()


def test_from_range_zero_range_terminates():
    generator = RejectionSamplingGenerator(seed=11)

    for _ in range(50):
        expr = generator.from_range((0, 0))

        assert expr.operator in {"+", "-", "*"}
        assert expr == Expression.from_values(0, expr.operator, 0)
        assert generator.last_attempts < 200


def test_from_range_discards_rejected_triples():
    rng = _ScriptedRandom(
        choices=["-", "/", "/", "+"],
        ints=[1, 5, 4, 0, 7, 2, 3, 4],
    )
    generator = RejectionSamplingGenerator(rng=rng)

    expr = generator.from_range((0, 10))

    assert expr == Expression.from_values(3, "+", 4)
    assert generator.last_attempts == 4


def test_from_range_same_seed_is_reproducible():
    a = RejectionSamplingGenerator(seed=42)
    b = RejectionSamplingGenerator(seed=42)

    assert [a.from_range((0, 50)).render() for _ in range(20)] == [
        b.from_range((0, 50)).render() for _ in range(20)
    ]


def test_from_range_rejects_invalid_range():
    generator = RejectionSamplingGenerator(seed=0)

    with pytest.raises(ValueError):
        generator.from_range((5, 1))
    with pytest.raises(ValueError):
        generator.from_range((-1, 3))


def test_max_attempts_falls_back_to_constructive_strategy():
    # Same odrzucenia: "-" z left < right
    rng = _ScriptedRandom(
        choices=["-", "-", "/"],
        ints=[1, 9, 2, 8, 6, 3, 2, 3],
    )
    generator = RejectionSamplingGenerator(rng=rng, max_attempts=2)

    expr = generator.from_range((1, 9))

    # fallback: "/" z dzielnikiem 2 i krotnością 3 → 6 / 2
    assert expr == Expression.from_values(6, "/", 2)
    assert generator.last_attempts == 2


def test_max_attempts_always_returns_valid_expression():
    generator = RejectionSamplingGenerator(seed=5, max_attempts=1)

    for value_range in [(0, 0), (0, 1), (3, 3), (7, 13), (0, 100)]:
        for _ in range(100):
            expr = generator.from_range(value_range)
            assert all(value_range[0] <= v <= value_range[1] for v in expr.leaves())
            _revalidate(expr)


def test_max_attempts_must_be_positive():
    with pytest.raises(ValueError):
        RejectionSamplingGenerator(max_attempts=0)


def test_generate_batch_uses_config_count_and_range():
    generator = RejectionSamplingGenerator(seed=9)
    config = GeneratorConfig(count=15, range=(2, 6))

    batch = generator.generate_batch(config)

    assert len(batch) == 15
    for expr in batch:
        assert all(2 <= v <= 6 for v in expr.leaves())


def test_generated_expression_never_fails_revalidation():
    generator = RejectionSamplingGenerator(seed=123)

    for _ in range(300):
        expr = generator.from_range((0, 12))
        try:
            _revalidate(expr)
        except ExpressionError:  # pragma: no cover
            pytest.fail(f"Generated invalid expression: {expr}")
