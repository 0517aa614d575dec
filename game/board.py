from enum import Enum

from .errors import GameStateError
from .guess import Guess
from .hints import HintTable
from .ruleset import DEFAULT_RULES
from .scoring import score
from .secret_code import Code, validate
from state.game_state import GameState


class GameStatus(Enum):
    AWAITING_GUESS = "awaiting_guess"
    REPORTING = "reporting"
    WON = "won"
    ABORTED = "aborted"


# Allowed state machine transitions
TRANSITIONS = {
    GameStatus.AWAITING_GUESS: {GameStatus.REPORTING, GameStatus.ABORTED},
    GameStatus.REPORTING: {
        GameStatus.WON,
        GameStatus.AWAITING_GUESS,
        GameStatus.ABORTED,
    },
    GameStatus.WON: set(),
    GameStatus.ABORTED: set(),
}


class Board:
    """
    Main game board class: owns the secret, the guess history and the
    game state machine.

    AWAITING_GUESS --submit_guess--> REPORTING --resolve--> WON
                                               --resolve--> AWAITING_GUESS
    any non-terminal state --abort--> ABORTED
    """

    def __init__(self, rules=None, rng=None, secret=None):
        """
        Initialize the board and start a game.

        Args:
            rules (dict | None): Ruleset, defaults to DEFAULT_RULES.
            rng (random.Random | None): Random source for secrets.
            secret (Code | str | None): Fixed secret for the first game.
        """
        self.rules = rules or DEFAULT_RULES
        self.rng = rng
        self.initialize_game(secret=secret)

    def initialize_game(self, secret=None):
        """Set up a new game: generate a secret code and reset state."""
        if secret is None:
            secret = Code.generate_random(rng=self.rng, rules=self.rules)
        elif isinstance(secret, str):
            secret = validate(secret, rules=self.rules)
        self.secret_code = secret
        self.guesses = []
        self.current_attempt = 0
        self.hints = HintTable(rules=self.rules)
        self.status = GameStatus.AWAITING_GUESS

    def _transition(self, new_status: GameStatus):
        if new_status not in TRANSITIONS[self.status]:
            raise GameStateError(
                f"Cannot go from {self.status.value} to {new_status.value}."
            )
        self.status = new_status

    @property
    def is_over(self):
        return self.status in (GameStatus.WON, GameStatus.ABORTED)

    @property
    def is_won(self):
        return self.status is GameStatus.WON

    def submit_guess(self, guess_input: str) -> Guess:
        """
        Validate and score a guess (AWAITING_GUESS -> REPORTING).

        Invalid input raises the validator's GameInputError and leaves the
        board untouched, so it does not cost a turn.
        """
        if self.status is not GameStatus.AWAITING_GUESS:
            raise GameStateError(
                f"Not waiting for a guess (status: {self.status.value})."
            )

        code = validate(guess_input, rules=self.rules)

        # Calculate feedback and save it
        new_guess = Guess(code, score(self.secret_code, code))
        self.guesses.append(new_guess)
        self.current_attempt += 1
        self.hints.update(new_guess)

        self._transition(GameStatus.REPORTING)
        return new_guess

    def resolve(self) -> GameStatus:
        """Decide the outcome of the last guess (REPORTING -> WON / AWAITING_GUESS)."""
        if self.status is not GameStatus.REPORTING:
            raise GameStateError(
                f"No guess to report (status: {self.status.value})."
            )

        if self.guesses[-1].bulls == self.rules["code_length"]:
            self._transition(GameStatus.WON)
        else:
            self._transition(GameStatus.AWAITING_GUESS)
        return self.status

    def make_guess(self, guess_input: str) -> Guess:
        """Submit a guess and resolve it in one step."""
        new_guess = self.submit_guess(guess_input)
        self.resolve()
        return new_guess

    def abort(self) -> GameStatus:
        """End the game without a win. No-op once the game is over."""
        if not self.is_over:
            self._transition(GameStatus.ABORTED)
        return self.status

    def get_feedback_history(self):
        """Return the full history of guesses and feedback."""
        return [(g.get_guess(), g.get_feedback()) for g in self.guesses]

    def reveal_code(self):
        """Return the secret code (used at the end of the game)."""
        return self.secret_code.as_string()

    def reset(self):
        """Reset the board for a new game with the same rules."""
        self.initialize_game()

    def get_current_state(self):
        """Return a GameState snapshot for reporting or analysis."""
        return GameState(
            rules=self.rules,
            guesses=list(self.guesses),
            current_attempts=self.current_attempt,
            status=self.status.value,
            is_won=self.is_won,
            code=self.secret_code.as_string(),
        )

    def render(self):
        """Print a text-based representation of the guess history (for CLI)."""

        line = "+-----+-------+-------+------+"
        print(line)
        print("| Try | Guess | Bulls | Cows |")
        print(line)
        for i, guess in enumerate(self.guesses, start=1):
            print(
                f"| {i:>3} | {guess.get_guess():^5} "
                f"| {guess.bulls:^5} | {guess.cows:^4} |"
            )
        if not self.guesses:
            print("| no guesses yet             |")
        print(line)
