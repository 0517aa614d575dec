from __future__ import annotations

from game.guess import Guess
from game.ruleset import DEFAULT_RULES
from game.secret_code import Code
from solver import candidate_filter
from solver.solver_manager import MinimaxSolver


class AnalysisSession:
    """
    Observations a player collected in one game, and the numbers still
    consistent with all of them.

    The session is owned by its caller; several sessions can coexist.

    Attributes:
        rules: Ruleset in use.
        universe: All possible numbers, computed once per session.
        observations: Recorded observations, in input order.
        candidates: Numbers consistent with every observation.
    """

    def __init__(self, rules=None, universe=None):
        self.rules = rules or DEFAULT_RULES
        self.universe = (
            frozenset(universe)
            if universe is not None
            else candidate_filter.all_numbers(self.rules)
        )
        self.observations: list[Guess] = []
        self.candidates: frozenset[Code] = self.universe

    @property
    def is_narrowed(self) -> bool:
        """False while no observation has been applied yet."""
        return bool(self.observations)

    def add(self, observation: Guess) -> frozenset[Code]:
        """
        Record an observation and narrow the candidates.

        Raises:
            InconsistentHistoryError: The observation would leave no
                candidate. Nothing is recorded in that case.
        """
        self.candidates = candidate_filter.apply(self.candidates, observation)
        self.observations.append(observation)
        return self.candidates

    def _replay(self):
        self.candidates = candidate_filter.apply_all(
            self.universe, self.observations
        )

    def undo(self) -> Guess:
        """Drop the last observation. Raises IndexError when empty."""
        return self.discard(len(self.observations) - 1)

    def discard(self, index: int) -> Guess:
        """Drop the observation at index (0-based) and recompute."""
        if not 0 <= index < len(self.observations):
            raise IndexError(f"No observation number {index + 1}.")
        removed = self.observations.pop(index)
        # Fewer constraints can only widen the set, so replay cannot fail
        self._replay()
        return removed

    def reset(self):
        self.observations = []
        self.candidates = self.universe

    def report(self) -> list[Code]:
        return candidate_filter.report(self.candidates)

    def suggest(self, solver=None) -> Code:
        """Ask a solver (default: minimax) for the next guess to play."""
        if solver is None:
            solver = MinimaxSolver(rules=self.rules)
        guessed = {obs.code for obs in self.observations}
        return solver.choose_guess(self.candidates, guessed=guessed)
