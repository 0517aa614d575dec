# Exceptions raised by game, solver and cli code


class GameInputError(ValueError):
    """Recoverable user input error. str(err) is shown to the player."""


class InvalidFormatError(GameInputError):
    """Input does not have exactly code_length characters."""


class NonDigitError(GameInputError):
    """Input contains a character that is not an allowed digit."""


class DuplicateDigitError(GameInputError):
    """Input repeats a digit."""


class InvalidObservationError(GameInputError):
    """Bulls/cows counts of a recorded observation are out of range."""


class InputStreamClosed(EOFError):
    """The input collaborator has no more lines (Ctrl+D, closed pipe)."""


class InconsistentHistoryError(ValueError):
    """
    No candidate number is consistent with the recorded observations.

    Attributes:
        observation: The observation that emptied the candidate set.
    """

    def __init__(self, observation, message=None):
        self.observation = observation
        super().__init__(
            message
            or f"No number matches {observation} together with the previous "
            "observations. Check it for typos, then 'undo' or 'drop' one."
        )


class GameStateError(RuntimeError):
    """A board method was called in a state that does not allow it."""
