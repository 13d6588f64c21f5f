#!/usr/bin/env python3
"""
arithgen.py — CLI generatora zadań arytmetycznych.

Dwa wzajemnie wykluczające się tryby:
    generowanie  — -n LICZBA i/lub -r ZAKRES; zapisuje Exercises.txt i Answers.txt
    sprawdzanie  — -e PLIK_ZADAŃ -a PLIK_ODPOWIEDZI; zapisuje Grade.txt

Konfiguracja: zmienne środowiskowe z prefiksem ARITHGEN_
lub plik .env (np. ARITHGEN_OUTPUT_DIR=out, ARITHGEN_SEED=42).

Użycie:
    python arithgen.py -n 20 -r 10
    python arithgen.py -r 5..50
    python arithgen.py -e Exercises.txt -a Answers.txt
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn, Sequence

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from config import Settings
from contracts import CheckerConfig, Config, GeneratorConfig

logger = logging.getLogger("arithgen")


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    _console().print(table)


def _print_exercises_table(expressions: list[Any], answers: list[Any], show: int) -> None:
    table = Table(
        title=f"Exercises [{len(expressions)}]",
        box=box.ASCII,
        show_lines=False,
    )
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Exercise")
    table.add_column("Answer", justify="right", no_wrap=True)
    for idx, (expr, answer) in enumerate(zip(expressions[:show], answers[:show]), 1):
        table.add_row(str(idx), expr.render(), str(answer))
    _console().print(table)


class ArgumentError(Exception):
    """Niepoprawne lub brakujące argumenty wywołania."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def parse_range(raw: str) -> tuple[int, int]:
    """"MAX" → (0, MAX); "MIN..MAX" → (MIN, MAX)."""
    try:
        if ".." in raw:
            lo, hi = raw.split("..", 1)
            return int(lo), int(hi)
        return 0, int(raw)
    except ValueError:
        raise ArgumentError(f"argument conversion exception: -r {raw!r}") from None


def _parse_count(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ArgumentError(f"argument conversion exception: -n {raw!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="arithgen",
        description="Generator zadań arytmetycznych dla liczb naturalnych",
    )
    generate = parser.add_argument_group("generate")
    generate.add_argument("-n", dest="num", metavar="N",
                          help="Liczba generowanych zadań")
    generate.add_argument("-r", dest="range", metavar="MAX|MIN..MAX",
                          help="Zakres wartości liczb w zadaniach")

    check = parser.add_argument_group("check")
    check.add_argument("-e", dest="exercise_file", metavar="PATH",
                       help="Plik z zadaniami do sprawdzenia")
    check.add_argument("-a", dest="answer_file", metavar="PATH",
                       help="Plik z odpowiedziami ucznia")

    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    return parser


def to_config(args: argparse.Namespace, settings: Settings | None = None) -> Config:
    """Mapuje argumenty na GeneratorConfig lub CheckerConfig."""
    settings = settings or Settings()

    generating = args.num is not None or args.range is not None
    checking = args.exercise_file is not None or args.answer_file is not None

    if generating and checking:
        raise ArgumentError("-n/-r cannot be used together with -e/-a")

    if generating:
        count = _parse_count(args.num) if args.num is not None else settings.default_count
        value_range = (
            parse_range(args.range) if args.range is not None
            else (0, settings.default_range_max)
        )
        try:
            return GeneratorConfig(count=count, range=value_range)
        except ValidationError as exc:
            raise ArgumentError(f"invalid generator arguments: {exc.errors()[0]['msg']}") from None

    if args.exercise_file is not None and args.answer_file is not None:
        return CheckerConfig(
            exercise_path=Path(args.exercise_file),
            answer_path=Path(args.answer_file),
        )

    raise ArgumentError("argument missing")


def _fail_usage(parser: argparse.ArgumentParser, message: str) -> NoReturn:
    print(f"Argument parser error: {message}", file=sys.stderr)
    parser.print_help(sys.stderr)
    sys.exit(1)


# -- tryby -----------------------------------------------------------------

def _generate(config: GeneratorConfig, settings: Settings) -> None:
    from adapters.evaluator.expression_evaluator import ExpressionEvaluator
    from adapters.exercise_store.text_file_store import TextFileExerciseStore
    from adapters.expression_generator.rejection_sampler import RejectionSamplingGenerator

    generator = RejectionSamplingGenerator(
        seed=settings.seed,
        max_attempts=settings.max_attempts,
    )
    evaluator = ExpressionEvaluator()
    store = TextFileExerciseStore()

    expressions = generator.generate_batch(config)
    answers = [evaluator.eval_expr(expr).value for expr in expressions]

    out_dir = Path(settings.output_dir)
    exercise_path = out_dir / settings.exercise_file
    answer_path = out_dir / settings.answer_file
    try:
        store.write_exercises(exercise_path, expressions)
        store.write_answers(answer_path, answers)
    except OSError as exc:
        print(f"Błąd zapisu pliku: {exc}", file=sys.stderr)
        sys.exit(1)

    _print_kv_table("Generated", [
        ("count", config.count),
        ("range", f"{config.range[0]}..{config.range[1]}"),
        ("exercises", exercise_path),
        ("answers", answer_path),
    ])
    if expressions:
        _print_exercises_table(expressions, answers, show=10)


def _check(config: CheckerConfig, settings: Settings) -> None:
    from adapters.answer_checker.file_answer_checker import FileAnswerChecker
    from adapters.exercise_store.text_file_store import TextFileExerciseStore

    store = TextFileExerciseStore()
    checker = FileAnswerChecker(store=store)
    try:
        report = checker.check(config)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Błąd odczytu pliku: {exc}", file=sys.stderr)
        sys.exit(1)

    grade_path = Path(settings.output_dir) / settings.grade_file
    try:
        store.write_grade(grade_path, report)
    except OSError as exc:
        print(f"Błąd zapisu pliku: {exc}", file=sys.stderr)
        sys.exit(1)

    _print_kv_table("Grade", [
        ("correct", report.lines()[0]),
        ("wrong", report.lines()[1]),
        ("grade", grade_path),
    ])


def main(argv: Sequence[str] | None = None) -> None:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        config = to_config(args, settings)
    except ArgumentError as exc:
        _fail_usage(parser, str(exc))

    logger.debug("Config: %r", config)
    if isinstance(config, GeneratorConfig):
        _generate(config, settings)
    else:
        _check(config, settings)


if __name__ == "__main__":
    main()
