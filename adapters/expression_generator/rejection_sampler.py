"""
Adapter: RejectionSamplingGenerator
Implementuje port ExpressionGenerator — losowanie z odrzucaniem.

Pętla:
  1. operator ~ U{+, -, *, /}
  2. left, right ~ U[min, max] (niezależnie, włącznie)
  3. Expression.from_values(left, operator, right)
  4. sukces → zwróć; ExpressionError → odrzuć i losuj od nowa

Domyślnie liczba prób jest nieograniczona. Przy max_attempts po wyczerpaniu
limitu generator buduje poprawną trójkę konstruktywnie (_construct).
Generowane są wyłącznie płaskie wyrażenia z dwoma liśćmi Unit.
"""
from __future__ import annotations

import logging
import random

from contracts import OPERATORS, ErrorKind, Expression, ExpressionError, GeneratorConfig

logger = logging.getLogger("arithgen.generator")


class RejectionSamplingGenerator:
    """Generator zadań z jednym operatorem; każda instancja ma własny strumień losowy."""

    def __init__(
        self,
        rng: random.Random | None = None,
        seed: int | None = None,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts musi być >= 1, jest {max_attempts}")
        self._rng = rng if rng is not None else random.Random(seed)
        self._max_attempts = max_attempts
        self.last_attempts = 0

    # -- ExpressionGenerator protocol --------------------------------------

    def from_range(self, value_range: tuple[int, int]) -> Expression:
        lo, hi = _validate_range(value_range)

        attempts = 0
        rejected: dict[ErrorKind, int] = {}
        # UWAGA: bez max_attempts pętla nie ma górnego ograniczenia
        while self._max_attempts is None or attempts < self._max_attempts:
            attempts += 1
            operator = self._rng.choice(OPERATORS)
            left = self._rng.randint(lo, hi)
            right = self._rng.randint(lo, hi)
            try:
                expression = Expression.from_values(left, operator, right)
            except ExpressionError as exc:
                rejected[exc.kind] = rejected.get(exc.kind, 0) + 1
                continue
            self.last_attempts = attempts
            if rejected:
                logger.debug(
                    "Accepted %s after %d attempts (rejected: %s)",
                    expression, attempts,
                    {k.value: v for k, v in rejected.items()},
                )
            return expression

        self.last_attempts = attempts
        logger.warning(
            "No valid expression in range %s after %d attempts, using constructive fallback.",
            (lo, hi), attempts,
        )
        return self._construct(lo, hi)

    def generate_batch(self, config: GeneratorConfig) -> list[Expression]:
        expressions = [self.from_range(config.range) for _ in range(config.count)]
        logger.info("Generated %d expressions in range %s", len(expressions), config.range)
        return expressions

    # -- Prywatne ----------------------------------------------------------

    def _construct(self, lo: int, hi: int) -> Expression:
        """Buduje poprawną trójkę bez odrzucania."""
        operator = self._rng.choice(OPERATORS)
        a = self._rng.randint(lo, hi)
        b = self._rng.randint(lo, hi)

        if operator == "-":
            return Expression.from_values(max(a, b), "-", min(a, b))

        if operator == "/":
            divisor = self._rng.randint(max(lo, 1), hi) if hi >= 1 else 0
            if divisor:
                # Wielokrotności dzielnika mieszczące się w [lo, hi]
                k_lo = -(-lo // divisor)
                k_hi = hi // divisor
                if k_lo <= k_hi:
                    k = self._rng.randint(k_lo, k_hi)
                    return Expression.from_values(k * divisor, "/", divisor)
            operator = "+"

        return Expression.from_values(a, operator, b)


def _validate_range(value_range: tuple[int, int]) -> tuple[int, int]:
    lo, hi = value_range
    if lo < 0 or hi < 0:
        raise ValueError(f"Zakres musi być nieujemny: {value_range}")
    if lo > hi:
        raise ValueError(f"Pusty zakres: min={lo} > max={hi}")
    return lo, hi
