from typing import NamedTuple

from .secret_code import Code


class Feedback(NamedTuple):
    """(bulls, cows) for one guess. Compares equal to a plain tuple."""

    bulls: int
    cows: int


def score(secret: Code, guess: Code) -> Feedback:
    """
    Compare a guess with a secret and compute bulls and cows.

    Args:
        secret (Code): The number to be guessed.
        guess (Code): The guessed number, same length as secret.

    Returns:
        Feedback: (bulls, cows)
        bulls: digits with correct value in the correct position,
        cows: digits present in the secret but at another position.

    Notes:
        Both numbers have unique digits, so every shared digit is either a
        bull or a cow: cows = |shared digits| - bulls. A guess equal to the
        secret therefore scores (4, 0).
    """

    bulls = sum(1 for s, g in zip(secret.digits, guess.digits) if s == g)
    shared = len(secret.digit_set & guess.digit_set)
    return Feedback(bulls, shared - bulls)
