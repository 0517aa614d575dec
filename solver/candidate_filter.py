from __future__ import annotations

from itertools import permutations
from typing import Iterable

from game.errors import InconsistentHistoryError
from game.guess import Guess
from game.ruleset import DEFAULT_RULES
from game.scoring import score
from game.secret_code import Code


def all_numbers(rules=None) -> frozenset[Code]:
    """
    Build the candidate universe: every number with unique digits.

    Leading zeros are allowed, so for 4 of 10 digits this is
    10 * 9 * 8 * 7 = 5040 numbers.
    """
    rules = rules or DEFAULT_RULES
    symbols = [int(d) for d in rules["digits"]]
    return frozenset(
        Code(p) for p in permutations(symbols, rules["code_length"])
    )


def apply(candidates: Iterable[Code], observation: Guess) -> frozenset[Code]:
    """
    Keep the candidates that would have produced the observed feedback.

    A candidate c survives iff score(c, observation.code) equals the
    recorded feedback, so a truthful history never removes the real secret.

    Args:
        candidates: Current candidate set. Not modified.
        observation: The guess and the feedback it got.

    Returns:
        frozenset[Code]: The surviving candidates.

    Raises:
        InconsistentHistoryError: No candidate survives. The observation
            contradicts the earlier ones (or was mistyped).
    """
    remaining = frozenset(
        c for c in candidates if score(c, observation.code) == observation.feedback
    )
    if not remaining:
        raise InconsistentHistoryError(observation)
    return remaining


def apply_all(
    candidates: Iterable[Code], observations: Iterable[Guess]
) -> frozenset[Code]:
    """Replay a whole history of observations, in order."""
    remaining = frozenset(candidates)
    for obs in observations:
        remaining = apply(remaining, obs)
    return remaining


def report(candidates: Iterable[Code]) -> list[Code]:
    """Return the candidates in ascending numeric order."""
    return sorted(candidates, key=Code.as_int)
