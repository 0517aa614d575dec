# Digit/position hint table shown by the 'stats' command
from enum import Enum

from .guess import Guess
from .ruleset import DEFAULT_RULES


class Hint(Enum):
    UNKNOWN = " "  # nothing known yet
    MAYBE = "?"  # the digit may be here
    HERE = "+"  # the digit is definitely here
    NOT_HERE = "-"  # the digit is definitely not here


class HintTable:
    """
    Pencil-and-paper notes about which digit may sit at which position.

    The table is derived from the observations only, never from the secret,
    so everything in it could be worked out by the player.

    Attributes:
        cells (dict[int, list[Hint]]): cells[digit][position]
    """

    def __init__(self, rules=None):
        self.rules = rules or DEFAULT_RULES
        self.length = self.rules["code_length"]
        self.symbols = [int(d) for d in self.rules["digits"]]
        self.cells = {d: [Hint.UNKNOWN] * self.length for d in self.symbols}

    def get(self, digit: int, position: int) -> Hint:
        return self.cells[digit][position]

    def _mark(self, digit, position, hint, only_if=None):
        # only_if: set of hints that may be overwritten, None means any
        if only_if is None or self.cells[digit][position] in only_if:
            self.cells[digit][position] = hint

    def update(self, observation: Guess):
        """Apply the heuristics for one scored guess."""

        digits = observation.code.digits
        bulls, cows = observation.bulls, observation.cows

        # Nothing found: none of the guessed digits is in the secret
        if bulls == 0 and cows == 0:
            for d in digits:
                for pos in range(self.length):
                    self._mark(d, pos, Hint.NOT_HERE)

        # All digits found: every other digit is out
        if bulls + cows == self.length:
            for d in self.symbols:
                if d in observation.code.digit_set:
                    continue
                for pos in range(self.length):
                    self._mark(d, pos, Hint.NOT_HERE)

        # Some bulls: any guessed digit might be one of them
        if bulls > 0:
            for pos, d in enumerate(digits):
                self._mark(d, pos, Hint.MAYBE, only_if={Hint.UNKNOWN})

        if cows == 0 and bulls > 0:
            # Only bulls: if the positions already ruled out account for
            # all misses, the remaining guessed positions are bulls
            ruled_out = sum(
                1
                for pos, d in enumerate(digits)
                if self.cells[d][pos] == Hint.NOT_HERE
            )
            if ruled_out + bulls == self.length:
                for pos, d in enumerate(digits):
                    self._mark(
                        d, pos, Hint.HERE, only_if={Hint.UNKNOWN, Hint.MAYBE}
                    )
        elif cows > 0 and bulls == 0:
            # Only cows: no guessed digit is at its guessed position
            for pos, d in enumerate(digits):
                self._mark(
                    d, pos, Hint.NOT_HERE, only_if={Hint.UNKNOWN, Hint.MAYBE}
                )

    def rows(self):
        """Yield (digit, [hint, ...]) rows in digit order."""
        for d in self.symbols:
            yield d, list(self.cells[d])

    def render(self):
        """Return the table as text lines, positions numbered from 1."""
        header = "   " + " ".join(str(p + 1) for p in range(self.length))
        lines = [header]
        for d, hints in self.rows():
            lines.append(f"{d}: " + " ".join(h.value for h in hints))
        return lines
