"""
Port: ExpressionGenerator
Odpowiedzialność: losowanie poprawnych arytmetycznie zadań z zadanego zakresu.
"""
from typing import Protocol, runtime_checkable

from contracts import Expression, GeneratorConfig


@runtime_checkable
class ExpressionGenerator(Protocol):
    def from_range(self, value_range: tuple[int, int]) -> Expression:
        """
        Returns an Expression whose every Unit leaf lies in the inclusive
        range (min, max) and whose top-level triple passes
        Expression.from_values validation.
        May loop for a long time on pathological ranges unless the
        implementation bounds the number of attempts.
        """
        ...

    def generate_batch(self, config: GeneratorConfig) -> list[Expression]:
        """
        Calls from_range(config.range) config.count times.
        Duplicates are not filtered.
        """
        ...
