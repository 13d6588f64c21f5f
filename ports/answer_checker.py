"""
Port: AnswerChecker
Odpowiedzialność: ocena odpowiedzi ucznia względem pliku z zadaniami.
"""
from typing import Protocol, runtime_checkable

from contracts import CheckerConfig, GradeReport


@runtime_checkable
class AnswerChecker(Protocol):
    def check(self, config: CheckerConfig) -> GradeReport:
        """
        Reads config.exercise_path and config.answer_path, evaluates every
        exercise and compares it with the answer carrying the same number.
        Unparsable exercises, missing or unparsable answers count as wrong.
        Returns GradeReport with sorted exercise numbers.
        """
        ...
