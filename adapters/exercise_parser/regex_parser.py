"""
Adapter: RegexExerciseParser
Implementuje port ExerciseParser.

Wejście: jedna linia pliku z zadaniami, np. "4. ( 1 + 2 ) / 3 ="
  - opcjonalny prefiks numeru "<n>. "
  - opcjonalne "=" lub "= ?" na końcu

Parsowanie — precedence climbing parser:
  expr   = term (('+'|'-') term)*
  term   = atom (('*'|'/') atom)*
  atom   = NUMBER | '(' expr ')'

Wynik budowany przez Expression.unchecked_new, więc render() i parse()
są odwrotne dla drzew z nawiasami wokół zagnieżdżeń.
"""
from __future__ import annotations

import re
from typing import Union

from contracts import (
    Expression,
    ExerciseParseError,
    SubOperand,
    UnitOperand,
)

# Dozwolone znaki: cyfry, operatory, nawiasy, białe znaki, "= ?"
_EXPR_CHARS = re.compile(r'^[\d\s\+\-\*\/\(\)×÷=\?]+$')

_NUMBERING_RE = re.compile(r'^\s*(\d+)\.(?:\s+|$)')

_TOKEN_RE = re.compile(
    r'(\d+)'                # liczba naturalna
    r'|([+\-*/×÷()])'       # operator lub nawias
    r'|\s+'                 # białe znaki (pominięte)
)

_OP_MAP = {"×": "*", "÷": "/"}

# Lewy binding power operatorów binarnych
_LEFT_BP: dict[str, int] = {"+": 10, "-": 10, "*": 20, "/": 20}

_Node = Union[int, Expression]


def split_numbering(text: str) -> tuple[int | None, str]:
    """Oddziela prefiks "<n>. " od treści linii."""
    m = _NUMBERING_RE.match(text)
    if not m:
        return None, text.strip()
    try:
        number = int(m.group(1))
    except ValueError:
        # Limit konwersji int/str w CPythonie
        return None, text.strip()
    return number, text[m.end():].strip()


def _tokenize(text: str) -> list[str]:
    """Tokenizuje wyrażenie arytmetyczne. Whitespace ignorowany."""
    tokens = []
    # Wyczyść "= ?" na końcu (pytanie o wynik)
    text = re.sub(r'\s*[=?][=?\s]*$', '', text).strip()
    if "=" in text or "?" in text:
        raise SyntaxError("'=' i '?' dozwolone tylko na końcu zadania")
    for m in _TOKEN_RE.finditer(text):
        num, op = m.group(1), m.group(2)
        if num:
            tokens.append(num)
        elif op:
            tokens.append(_OP_MAP.get(op, op))
    return tokens


def _as_operand(node: _Node) -> UnitOperand | SubOperand:
    if isinstance(node, Expression):
        return SubOperand(expression=node)
    return UnitOperand(value=node)


class _Parser:
    def __init__(self, tokens: list[str]) -> None:
        self._tokens = tokens
        self._pos = 0

    def _peek(self) -> str | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _consume(self) -> str:
        if self._pos >= len(self._tokens):
            raise SyntaxError("Nieoczekiwany koniec wyrażenia")
        t = self._tokens[self._pos]
        self._pos += 1
        return t

    def _expect(self, tok: str) -> None:
        got = self._consume()
        if got != tok:
            raise SyntaxError(f"Oczekiwano {tok!r}, got {got!r}")

    def parse(self) -> _Node:
        node = self._expr(0)
        if self._pos < len(self._tokens):
            raise SyntaxError(f"Nieoczekiwany token: {self._tokens[self._pos]!r}")
        return node

    def _expr(self, min_bp: int) -> _Node:
        left = self._primary()
        while True:
            op = self._peek()
            if op is None or op not in _LEFT_BP:
                break
            bp = _LEFT_BP[op]
            if bp <= min_bp:
                break
            self._consume()
            # Lewostronne wiązanie: right_bp = bp (nie bp+1) dla left-assoc
            right = self._expr(bp)
            left = Expression.unchecked_new(_as_operand(left), op, _as_operand(right))
        return left

    def _primary(self) -> _Node:
        tok = self._consume()
        if tok == "(":
            node = self._expr(0)
            self._expect(")")
            return node
        if tok.isdigit():
            try:
                return int(tok)
            except ValueError:
                raise SyntaxError(f"Za długa liczba ({len(tok)} cyfr)") from None
        raise SyntaxError(f"Nieoczekiwany token: {tok!r}")


class RegexExerciseParser:
    """Parsuje linię zadania do Expression. Błędy zgłasza przez ExerciseParseError."""

    # -- ExerciseParser protocol -------------------------------------------

    def parse(self, text: str) -> Expression:
        _, body = split_numbering(text)
        if not body or not _EXPR_CHARS.match(body):
            raise ExerciseParseError(f"To nie jest wyrażenie arytmetyczne: {text!r}")

        try:
            tokens = _tokenize(body)
            if not tokens:
                raise ExerciseParseError(f"Puste wyrażenie: {text!r}")
            node = _Parser(tokens).parse()
        except SyntaxError as exc:
            raise ExerciseParseError(f"{exc} w {text!r}") from exc

        if not isinstance(node, Expression):
            raise ExerciseParseError(f"Brak operatora w {text!r}")
        return node
