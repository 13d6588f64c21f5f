from adapters.answer_checker.file_answer_checker import FileAnswerChecker, parse_answer
from adapters.evaluator.expression_evaluator import ExpressionEvaluator
from contracts import CheckerConfig
from ports.answer_checker import AnswerChecker
from ports.evaluator import Evaluator


def _write(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_checker_satisfies_port():
    assert isinstance(FileAnswerChecker(), AnswerChecker)


def test_check_grades_correct_wrong_and_missing_answers(tmp_path):
    exercises = _write(tmp_path / "Exercises.txt", [
        "1. 3 + 4 =",
        "2. ( 1 + 2 ) / 3 =",
        "3. 9 - 2 =",
        "4. 2 * ( 3 + 1 ) =",
    ])
    answers = _write(tmp_path / "Answers.txt", [
        "1. 7",
        "2. 2",
        "4. 8",
    ])

    report = FileAnswerChecker().check(
        CheckerConfig(exercise_path=exercises, answer_path=answers)
    )

    assert report.correct == [1, 4]
    assert report.wrong == [2, 3]
    assert report.total == 4
    assert report.lines() == ["Correct: 2 (1, 4)", "Wrong: 2 (2, 3)"]


def test_check_counts_unparsable_entries_as_wrong(tmp_path):
    exercises = _write(tmp_path / "Exercises.txt", [
        "1. 1 / 0 =",
        "2. hello =",
        "3. 6 / 3 =",
    ])
    answers = _write(tmp_path / "Answers.txt", ["1. 0", "2. 1", "3. two"])

    report = FileAnswerChecker().check(
        CheckerConfig(exercise_path=exercises, answer_path=answers)
    )

    assert report.correct == []
    assert report.wrong == [1, 2, 3]


def test_parse_answer():
    assert parse_answer(" 7 ") == 7
    assert parse_answer("3/4") * 4 == 3
    assert parse_answer("") is None
    assert parse_answer("1/0") is None
    assert parse_answer("x") is None


def test_check_overlong_number_is_wrong_and_run_continues(tmp_path):
    exercises = _write(tmp_path / "Exercises.txt", [
        "1. 3 + 4 =",
        "2. " + "9" * 5000 + " + 1 =",
        "3. 6 / 3 =",
    ])
    answers = _write(tmp_path / "Answers.txt", ["1. 7", "2. 10", "3. 2"])

    report = FileAnswerChecker().check(
        CheckerConfig(exercise_path=exercises, answer_path=answers)
    )

    assert report.correct == [1, 3]
    assert report.wrong == [2]


class _DoublingEvaluator:
    """Evaluator zwracający podwojoną wartość; tylko przez port."""

    def __init__(self):
        self._inner = ExpressionEvaluator()

    def eval_expr(self, expression):
        return self._inner.eval_expr(expression)

    def value_of(self, expression):
        return 2 * self._inner.value_of(expression)


def test_check_uses_injected_evaluator_port(tmp_path):
    exercises = _write(tmp_path / "Exercises.txt", ["1. 3 + 4 =", "2. 2 * 5 ="])
    answers = _write(tmp_path / "Answers.txt", ["1. 14", "2. 10"])
    evaluator = _DoublingEvaluator()
    assert isinstance(evaluator, Evaluator)

    report = FileAnswerChecker(evaluator=evaluator).check(
        CheckerConfig(exercise_path=exercises, answer_path=answers)
    )

    assert report.correct == [1]
    assert report.wrong == [2]
