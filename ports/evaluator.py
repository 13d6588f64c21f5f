"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wartości drzewa Expression.
"""
from fractions import Fraction
from typing import Protocol, runtime_checkable

from contracts import EvalResult, Expression


@runtime_checkable
class Evaluator(Protocol):
    def eval_expr(self, expression: Expression) -> EvalResult:
        """
        Evaluates an Expression tree to an exact numeric result.
        Returns EvalResult with:
          - value: int when the result is integral, float otherwise
          - steps: list of human-readable computation steps
        Raises ZeroDivisionError on division by zero.
        """
        ...

    def value_of(self, expression: Expression) -> Fraction:
        """Exact value of the tree, without steps. Raises ZeroDivisionError."""
        ...
