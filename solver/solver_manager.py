from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Literal

from game.ruleset import DEFAULT_RULES
from game.scoring import score
from game.secret_code import Code, validate
from solver.candidate_filter import all_numbers, report


Pool = Literal["candidates", "universe"]


# drop-in helper for progress and log line
def progress_print(msg: str) -> None:
    # overwrite same line, no newline
    print(f"\r\033[K{msg}", end="", flush=True)


def log_print(msg: str) -> None:
    # first terminate the progress line, then print normally
    print("\r\033[K", end="", flush=True)
    print(msg, flush=True)


@dataclass(frozen=True)
class MinimaxConfig:
    # which guesses are evaluated
    pool: Pool = "candidates"
    # with this few candidates left, guess them directly
    direct_threshold: int = 2
    # seconds between progress lines, None disables progress output
    progress_interval: float | None = None


class MinimaxSolver:
    """
    Minimax Guess Selection:
    - for every guess in the pool, split the candidates by the feedback
      they would produce and take the largest part (worst case)
    - best_guess = min over worst case
    - ties: prefer guesses that are candidates themselves (they can win),
      then the lower number

    Attributes:
        cfg: MinimaxConfig
        rules: Ruleset in use.
        opener: Fixed first guess.

    Methods:
        choose_guess(...): Selects the best guess using the minimax strategy.
        worst_case(...): Largest feedback partition for one guess.
    """

    def __init__(self, config: MinimaxConfig | None = None, rules=None):
        self.cfg = config or MinimaxConfig()
        self.rules = rules or DEFAULT_RULES
        self.opener = validate(self.rules["opener"], rules=self.rules)
        self._universe = None

    @property
    def universe(self) -> frozenset[Code]:
        if self._universe is None:
            self._universe = all_numbers(self.rules)
        return self._universe

    @staticmethod
    def worst_case(guess: Code, candidates: Iterable[Code]) -> int:
        """
        Size of the largest group of candidates sharing one feedback.

        Args:
            guess: The guess to evaluate.
            candidates: Possible secrets.
        Returns:
            The worst-case number of candidates left after playing guess.
        """
        partitions = Counter(score(c, guess) for c in candidates)
        return max(partitions.values(), default=0)

    def choose_guess(
        self,
        candidates: Iterable[Code],
        guessed: Iterable[Code] = (),
    ) -> Code:
        """
        Choose the best guess using the minimax strategy.
        Args:
            candidates: Numbers still consistent with the history.
            guessed: Numbers already played, never suggested again.
        Returns:
            The guess to play next.
        """
        candidates = report(candidates)
        guessed = set(guessed)
        if not candidates:
            raise ValueError("No candidates left to choose from.")

        if not guessed:
            return self.opener

        unguessed = [c for c in candidates if c not in guessed]
        if len(candidates) <= self.cfg.direct_threshold:
            return unguessed[0] if unguessed else candidates[0]

        candidate_set = set(candidates)
        if self.cfg.pool == "universe":
            pool = unguessed + [
                c for c in report(self.universe) if c not in candidate_set
            ]
        else:
            pool = unguessed

        best_guess = None
        best_key = None

        start = time.perf_counter()
        last_report = start
        for done, gs in enumerate(pool, start=1):
            if gs in guessed:
                continue
            key = (
                self.worst_case(gs, candidates),
                0 if gs in candidate_set else 1,
                gs.as_int(),
            )
            if best_key is None or key < best_key:
                best_guess, best_key = gs, key

            now = time.perf_counter()
            # periodic progress report
            if (
                self.cfg.progress_interval is not None
                and now - last_report >= self.cfg.progress_interval
            ):
                rate = done / max(1e-9, now - start)
                progress_print(
                    f"Progress: {done}/{len(pool)} guesses "
                    f"({rate:.1f} guesses/sec)"
                )
                last_report = now

        if self.cfg.progress_interval is not None and best_guess is not None:
            log_print(
                f"Best guess : {best_guess}\n"
                f"min max    : {best_key[0]}"
            )

        return best_guess if best_guess is not None else candidates[0]
