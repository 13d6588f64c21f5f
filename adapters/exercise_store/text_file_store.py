"""
Adapter: TextFileExerciseStore
Implementuje port ExerciseStore — zwykłe pliki tekstowe UTF-8.

Format:
  Exercises.txt  "1. 3 + 4 ="
  Answers.txt    "1. 7"
  Grade.txt      "Correct: 2 (1, 3)" / "Wrong: 1 (2)"

Przy odczycie linia bez numeru dostaje numer porządkowy.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from adapters.exercise_parser.regex_parser import split_numbering
from contracts import AnswerEntry, ExerciseEntry, Expression, GradeReport

logger = logging.getLogger("arithgen.exercise_store")


def format_value(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _strip_question(text: str) -> str:
    body = text.rstrip()
    for suffix in ("= ?", "=?", "="):
        if body.endswith(suffix):
            return body[: -len(suffix)].rstrip()
    return body


class TextFileExerciseStore:

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    # -- ExerciseStore protocol --------------------------------------------

    def write_exercises(self, path: Path, expressions: Sequence[Expression]) -> None:
        lines = [f"{i}. {expr.render()} =" for i, expr in enumerate(expressions, 1)]
        self._write_lines(path, lines)
        logger.info("Wrote %d exercises to %s", len(lines), path)

    def write_answers(self, path: Path, answers: Sequence[int | float]) -> None:
        lines = [f"{i}. {format_value(value)}" for i, value in enumerate(answers, 1)]
        self._write_lines(path, lines)
        logger.info("Wrote %d answers to %s", len(lines), path)

    def read_exercises(self, path: Path) -> list[ExerciseEntry]:
        return [
            ExerciseEntry(number=number, text=_strip_question(body))
            for number, body in self._read_numbered(path)
        ]

    def read_answers(self, path: Path) -> list[AnswerEntry]:
        return [
            AnswerEntry(number=number, text=body)
            for number, body in self._read_numbered(path)
        ]

    def write_grade(self, path: Path, report: GradeReport) -> None:
        self._write_lines(path, report.lines())
        logger.info("Wrote grade (%d/%d correct) to %s", len(report.correct), report.total, path)

    # -- Prywatne ----------------------------------------------------------

    def _write_lines(self, path: Path, lines: list[str]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        content = "\n".join(lines) + ("\n" if lines else "")
        path.write_text(content, encoding=self._encoding)

    def _read_numbered(self, path: Path) -> list[tuple[int, str]]:
        raw = Path(path).read_text(encoding=self._encoding)
        entries: list[tuple[int, str]] = []
        ordinal = 0
        for line in raw.splitlines():
            if not line.strip():
                continue
            ordinal += 1
            number, body = split_numbering(line)
            entries.append((number if number else ordinal, body))
        return entries
