"""
Adapter: ExpressionEvaluator
Implementuje port Evaluator — rekurencyjne przejście drzewa Expression z Fraction.

Fractions zapewniają dokładną arytmetykę: drzewa składane ręcznie przez
Expression.unchecked_new mogą mieć niecałkowite wartości pośrednie.

eval_expr() — oblicza wartość; zwraca int jeśli wynik jest całkowity
"""
from __future__ import annotations

from fractions import Fraction

from contracts import EvalResult, Expression, SubOperand, UnitOperand

# Mapowanie symboli operatorów na operacje Fraction
_OP_FUNCS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: _safe_div(a, b),
}


def _safe_div(a: Fraction, b: Fraction) -> Fraction:
    if b == 0:
        raise ZeroDivisionError("Dzielenie przez zero")
    return a / b


class ExpressionEvaluator:
    """Dokładny ewaluator drzew Expression."""

    # -- Evaluator protocol ------------------------------------------------

    def eval_expr(self, expression: Expression) -> EvalResult:
        value, steps = self._eval(expression)

        # Konwersja Fraction → int lub float
        if value.denominator == 1:
            return EvalResult(value=int(value), is_exact=True, steps=steps)
        return EvalResult(value=float(value), is_exact=False, steps=steps)

    def value_of(self, expression: Expression) -> Fraction:
        """Dokładna wartość bez listy kroków."""
        value, _ = self._eval(expression)
        return value

    # -- Prywatne ----------------------------------------------------------

    def _eval(self, node: Expression) -> tuple[Fraction, list[str]]:
        """Zwraca (wartość, lista kroków)."""
        left_val, left_steps = self._eval_operand(node.left)
        right_val, right_steps = self._eval_operand(node.right)

        fn = _OP_FUNCS.get(node.operator)
        if fn is None:
            raise ValueError(f"Nieznany operator: {node.operator!r}")

        result = fn(left_val, right_val)
        step = f"{_fmt(left_val)} {node.operator} {_fmt(right_val)} = {_fmt(result)}"
        return result, left_steps + right_steps + [step]

    def _eval_operand(self, operand: UnitOperand | SubOperand) -> tuple[Fraction, list[str]]:
        if isinstance(operand, UnitOperand):
            return Fraction(operand.value), []
        if isinstance(operand, SubOperand):
            return self._eval(operand.expression)
        raise TypeError(f"Nieznany typ operandu: {type(operand)}")


def _fmt(v: Fraction) -> str:
    """Czytelna reprezentacja Fraction."""
    if v.denominator == 1:
        return str(int(v))
    return f"{v.numerator}/{v.denominator}"
