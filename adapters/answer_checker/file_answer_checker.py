"""
Adapter: FileAnswerChecker
Implementuje port AnswerChecker.

Pipeline:
1) ExerciseStore.read_exercises / read_answers
2) ExerciseParser.parse → Expression
3) Evaluator → dokładna wartość (Fraction)
4) porównanie z odpowiedzią o tym samym numerze

Zadanie, którego nie da się sparsować lub policzyć, jest liczone jako błędne.
"""
from __future__ import annotations

import logging
from fractions import Fraction

from adapters.evaluator.expression_evaluator import ExpressionEvaluator
from adapters.exercise_parser.regex_parser import RegexExerciseParser
from adapters.exercise_store.text_file_store import TextFileExerciseStore
from contracts import CheckerConfig, ExerciseParseError, GradeReport
from ports.evaluator import Evaluator
from ports.exercise_parser import ExerciseParser
from ports.exercise_store import ExerciseStore

logger = logging.getLogger("arithgen.checker")


def parse_answer(text: str) -> Fraction | None:
    """Odpowiedź jako Fraction ("7", "3/4", "2.5") lub None."""
    raw = text.strip()
    if not raw:
        return None
    try:
        return Fraction(raw)
    except (ValueError, ZeroDivisionError):
        return None


class FileAnswerChecker:

    def __init__(
        self,
        store: ExerciseStore | None = None,
        parser: ExerciseParser | None = None,
        evaluator: Evaluator | None = None,
    ) -> None:
        self._store = store or TextFileExerciseStore()
        self._parser = parser or RegexExerciseParser()
        self._evaluator = evaluator or ExpressionEvaluator()

    # -- AnswerChecker protocol --------------------------------------------

    def check(self, config: CheckerConfig) -> GradeReport:
        exercises = self._store.read_exercises(config.exercise_path)
        answers = {a.number: a.text for a in self._store.read_answers(config.answer_path)}

        correct: list[int] = []
        wrong: list[int] = []
        for entry in exercises:
            if self._is_correct(entry.number, entry.text, answers.get(entry.number)):
                correct.append(entry.number)
            else:
                wrong.append(entry.number)

        report = GradeReport(correct=sorted(correct), wrong=sorted(wrong))
        logger.info("Checked %d exercises: %d correct", report.total, len(report.correct))
        return report

    # -- Prywatne ----------------------------------------------------------

    def _is_correct(self, number: int, exercise: str, answer: str | None) -> bool:
        if answer is None:
            logger.debug("Exercise %d: no answer", number)
            return False

        try:
            expected = self._evaluator.value_of(self._parser.parse(exercise))
        except (ExerciseParseError, ZeroDivisionError) as exc:
            logger.warning("Exercise %d cannot be evaluated: %s", number, exc)
            return False

        given = parse_answer(answer)
        if given is None:
            logger.debug("Exercise %d: unparsable answer %r", number, answer)
            return False
        return given == expected
