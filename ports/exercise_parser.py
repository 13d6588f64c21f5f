"""
Port: ExerciseParser
Odpowiedzialność: parsowanie linii zadania z powrotem do Expression.
"""
from typing import Protocol, runtime_checkable

from contracts import Expression


@runtime_checkable
class ExerciseParser(Protocol):
    def parse(self, text: str) -> Expression:
        """
        Parses one exercise line, e.g. "( 1 + 2 ) / 3 =", into an Expression.
        Accepts an optional "<n>." prefix and a trailing "=" or "= ?".
        Built with Expression.unchecked_new: arithmetic rules are not applied.
        Raises ExerciseParseError if the text is not a binary expression.
        """
        ...
