import re
from dataclasses import dataclass

from .errors import InvalidFormatError, InvalidObservationError
from .ruleset import DEFAULT_RULES
from .scoring import Feedback
from .secret_code import Code, validate


@dataclass(frozen=True)
class Guess:
    """
        A recorded observation: a guessed number and the feedback it got.
    Attributes:
        code (Code): The guessed number.
        feedback (Feedback): (bulls, cows) reported for it.

    Used both for the game history on the Board and for the observations
    a player types into the assistant.
    """

    code: Code
    feedback: Feedback

    @property
    def bulls(self) -> int:
        return self.feedback.bulls

    @property
    def cows(self) -> int:
        return self.feedback.cows

    def get_guess(self):
        """
        Return the guessed number as string.
        Returns:
            str: The guess, e.g. '1234'."""
        return self.code.as_string()

    def get_feedback(self):
        """
        Return the stored feedback as a tuple (bulls, cows).
        Returns:
            tuple[int, int]: The feedback tuple.
        """
        return tuple(self.feedback)

    def __str__(self):
        return (
            f"{self.code} -> {self.feedback.bulls} bulls, "
            f"{self.feedback.cows} cows"
        )


_SEPARATORS = re.compile(r"[\s,;]+")


def parse_observation(line: str, rules=None) -> Guess:
    """
    Parse an assistant input line like '1234 1 1' (guess, bulls, cows).

    Commas or semicolons may separate the fields as well.

    Raises:
        InvalidFormatError: Not three fields.
        NonDigitError, DuplicateDigitError: Bad guessed number.
        InvalidObservationError: Counts not integers, out of range, or
            their sum exceeds the code length.
    """

    rules = rules or DEFAULT_RULES
    length = rules["code_length"]

    fields = [f for f in _SEPARATORS.split(line.strip()) if f]
    if len(fields) != 3:
        raise InvalidFormatError(
            "Enter an observation as '<guess> <bulls> <cows>', e.g. "
            "'1234 1 1'."
        )

    code = validate(fields[0], rules=rules)

    # int() alone would accept "1_0" or non-ASCII digits
    for count in fields[1:]:
        if not re.fullmatch(r"-?[0-9]+", count):
            raise InvalidObservationError(
                "Bulls and cows must be whole numbers."
            )
    bulls, cows = int(fields[1]), int(fields[2])

    if not (0 <= bulls <= length and 0 <= cows <= length):
        raise InvalidObservationError(
            f"Bulls and cows must be between 0 and {length}."
        )
    if bulls + cows > length:
        raise InvalidObservationError(
            f"Bulls plus cows cannot exceed {length}."
        )

    return Guess(code, Feedback(bulls, cows))
