"""
Port: ExerciseStore
Odpowiedzialność: zapis i odczyt plików z zadaniami, odpowiedziami i oceną.
"""
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from contracts import AnswerEntry, ExerciseEntry, Expression, GradeReport


@runtime_checkable
class ExerciseStore(Protocol):
    def write_exercises(self, path: Path, expressions: Sequence[Expression]) -> None:
        """Writes one numbered line "<n>. <expression> =" per expression."""
        ...

    def write_answers(self, path: Path, answers: Sequence[int | float]) -> None:
        """Writes one numbered line "<n>. <value>" per answer."""
        ...

    def read_exercises(self, path: Path) -> list[ExerciseEntry]:
        """
        Reads numbered exercise lines. Blank lines are skipped.
        Raises FileNotFoundError if the file does not exist.
        """
        ...

    def read_answers(self, path: Path) -> list[AnswerEntry]:
        """
        Reads numbered answer lines. Blank lines are skipped.
        Raises FileNotFoundError if the file does not exist.
        """
        ...

    def write_grade(self, path: Path, report: GradeReport) -> None:
        """Writes the "Correct: ..." / "Wrong: ..." summary."""
        ...
