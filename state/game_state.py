# state/game_state.py


class GameState:
    """Container for a Cows and Bulls game snapshot"""

    def __init__(
        self, rules, guesses, current_attempts, status, is_won, code=None
    ):
        self.rules = rules
        self.guesses = guesses
        self.current_attempts = current_attempts
        self.status = status
        self.is_won = is_won
        self.secret_code = code

    @property
    def is_over(self):
        return self.status in ("won", "aborted")

    def to_dict(self, reveal_code=False):
        # Return the gamestate as dictionary for i.e. json
        return {
            "rules": self.rules["name"],
            "guesses": [
                {"guess": g.get_guess(), "feedback": list(g.get_feedback())}
                for g in self.guesses
            ],
            "current_attempts": self.current_attempts,
            "status": self.status,
            "is_won": self.is_won,
            # the secret stays hidden while the game is running
            "secret_code": self.secret_code
            if reveal_code or self.is_over
            else None,
        }
