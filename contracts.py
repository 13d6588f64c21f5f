"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w ArithGen.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

CONTRACTS_VERSION = "1.0.0"

OPERATORS: tuple[str, ...] = ("+", "-", "*", "/")

OperatorSymbol = Literal["+", "-", "*", "/"]


# ─────────────────────────── Błędy ───────────────────────────────────────

class ErrorKind(str, Enum):
    ARITHMETIC_VIOLATION = "arithmetic_violation"      # dzielenie przez zero
    INVALID_OPERATOR = "invalid_operator"              # symbol spoza + - * /
    UNSUPPORTED_EXPRESSION = "unsupported_expression"  # wynik ujemny lub ułamkowy


class ExpressionError(Exception):
    """
    Odrzucenie trójki (left, operator, right) przez reguły arytmetyki.
    Błąd odwracalny: wywołujący powinien spróbować innych danych.
    """

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or kind.value)


class ExerciseParseError(ValueError):
    """Tekst zadania nie daje się sparsować do Expression."""


def arithmetic_check(left: int, operator: str, right: int) -> None:
    """
    Sprawdza, czy left <operator> right daje nieujemną liczbę całkowitą.
    Rzuca ExpressionError dla niedozwolonych trójek.
    Nieznany operator to błąd programisty, a nie odrzucenie: ValueError.
    """
    if operator == "+":
        return
    if operator == "-":
        if left < right:
            # Wynik ujemny, poza dziedziną liczb naturalnych
            raise ExpressionError(
                ErrorKind.UNSUPPORTED_EXPRESSION,
                f"Ujemny wynik: {left} - {right}",
            )
        return
    if operator == "*":
        return
    if operator == "/":
        if right == 0:
            raise ExpressionError(
                ErrorKind.ARITHMETIC_VIOLATION,
                f"Dzielenie przez zero: {left} / 0",
            )
        if left % right != 0:
            # Wynik ułamkowy
            raise ExpressionError(
                ErrorKind.UNSUPPORTED_EXPRESSION,
                f"Wynik niecałkowity: {left} / {right}",
            )
        return
    raise ValueError(f"Nieznany operator: {operator!r}")


# ─────────────────────────── Operand ─────────────────────────────────────

class UnitOperand(BaseModel):
    """Liść drzewa: nieujemna liczba całkowita."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unit"] = "unit"
    value: int = Field(ge=0)

    def is_unit(self) -> bool:
        return True

    def is_expression(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SubOperand):
            raise TypeError("Nie można porównać UnitOperand z SubOperand.")
        if not isinstance(other, UnitOperand):
            return NotImplemented
        return self.value == other.value

    def __str__(self) -> str:
        return str(self.value)


class SubOperand(BaseModel):
    """Zagnieżdżone wyrażenie, posiadane wyłącznie przez ten operand."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sub"] = "sub"
    expression: Expression

    def is_unit(self) -> bool:
        return False

    def is_expression(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UnitOperand):
            raise TypeError("Nie można porównać SubOperand z UnitOperand.")
        if not isinstance(other, SubOperand):
            return NotImplemented
        return self.expression == other.expression

    def __str__(self) -> str:
        return f"( {self.expression} )"


Operand = Annotated[Union[UnitOperand, SubOperand], Field(discriminator="kind")]


# ─────────────────────────── Expression ──────────────────────────────────

class Expression(BaseModel):
    """
    Węzeł binarny: left <operator> right.

    unchecked_new() — bez walidacji arytmetyki (dla znanych, poprawnych literałów)
    from_values()   — z walidacją dwóch surowych liczb; rzuca ExpressionError

    Równość jest strukturalna: 1 + 2 != 2 + 1.
    """

    model_config = ConfigDict(frozen=True)

    left: Operand
    operator: OperatorSymbol
    right: Operand

    @classmethod
    def unchecked_new(
        cls,
        left: UnitOperand | SubOperand,
        operator: str,
        right: UnitOperand | SubOperand,
    ) -> Expression:
        return cls(left=left, operator=operator, right=right)

    @classmethod
    def from_values(cls, left: int, operator: str, right: int) -> Expression:
        arithmetic_check(left, operator, right)
        # Duplikaty nie są tu sprawdzane
        return cls.unchecked_new(
            UnitOperand(value=left),
            operator,
            UnitOperand(value=right),
        )

    def render(self) -> str:
        return f"{self.left} {self.operator} {self.right}"

    def leaves(self) -> Iterator[int]:
        """Wartości wszystkich liści Unit, od lewej do prawej."""
        for operand in (self.left, self.right):
            if isinstance(operand, UnitOperand):
                yield operand.value
            else:
                yield from operand.expression.leaves()

    def depth(self) -> int:
        nested = [
            op.expression.depth()
            for op in (self.left, self.right)
            if isinstance(op, SubOperand)
        ]
        return 1 + max(nested, default=0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return (
            self.left == other.left
            and self.right == other.right
            and self.operator == other.operator
        )

    def __str__(self) -> str:
        return self.render()


SubOperand.model_rebuild()
Expression.model_rebuild()


def unit(value: int) -> UnitOperand:
    return UnitOperand(value=value)


def sub(expression: Expression) -> SubOperand:
    return SubOperand(expression=expression)


# ─────────────────────────── Konfiguracja trybów ─────────────────────────

class GeneratorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0)
    range: tuple[int, int]  # (min, max), włącznie

    @model_validator(mode="after")
    def _check_range(self) -> GeneratorConfig:
        lo, hi = self.range
        if lo < 0 or hi < 0:
            raise ValueError(f"Zakres musi być nieujemny: {self.range}")
        if lo > hi:
            raise ValueError(f"Pusty zakres: min={lo} > max={hi}")
        return self


class CheckerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise_path: Path
    answer_path: Path


Config = Union[GeneratorConfig, CheckerConfig]


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: Union[int, float]
    is_exact: bool = True
    steps: list[str] = Field(default_factory=list)  # czytelne kroki


# ─────────────────────────── ExerciseStore ───────────────────────────────

class ExerciseEntry(BaseModel):
    number: int = Field(ge=1)
    text: str  # treść bez numeru i bez końcowego "="


class AnswerEntry(BaseModel):
    number: int = Field(ge=1)
    text: str  # surowa odpowiedź ucznia


# ─────────────────────────── AnswerChecker ───────────────────────────────

class GradeReport(BaseModel):
    correct: list[int] = Field(default_factory=list)
    wrong: list[int] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.correct) + len(self.wrong)

    def lines(self) -> list[str]:
        return [
            f"Correct: {len(self.correct)} ({', '.join(map(str, self.correct))})",
            f"Wrong: {len(self.wrong)} ({', '.join(map(str, self.wrong))})",
        ]
