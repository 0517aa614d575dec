import random
from .errors import DuplicateDigitError, InvalidFormatError, NonDigitError
from .ruleset import DEFAULT_RULES


class Code:
    """
        Represents a number of the game: a secret or a guessed number.
    Attributes:
        digits (tuple[int, ...]): The digits, most significant first.
        digit_set (frozenset[int]): The same digits as a set, for scoring.

    Instances are immutable and hashable, so they can live in candidate sets.
    Build them with validate() / Code.from_string() or Code.generate_random();
    the constructor itself trusts its input.
    """

    def __init__(self, digits):
        """
        Initialize a Code instance.

        Args:
            digits (Iterable[int]): Already validated digits.
        """

        self.digits = tuple(digits)
        self.digit_set = frozenset(self.digits)

    @classmethod
    def from_string(cls, text: str, rules=None) -> "Code":
        """
        Parse and validate text like '0123'.

        Raises:
            InvalidFormatError, NonDigitError, DuplicateDigitError
        """
        return validate(text, rules=rules)

    @classmethod
    def generate_random(cls, rng: random.Random | None = None, rules=None):
        """
        Generate a random valid code according to the rules.

        Every number of the universe is equally likely: digits are drawn
        without replacement.

        Args:
            rng (random.Random | None): Random source. A fresh instance is
            created when omitted, the module level random state is not used.
            rules (dict | None): Ruleset, defaults to DEFAULT_RULES.
        """

        rules = rules or DEFAULT_RULES
        rng = rng or random.Random()
        symbols = rules["digits"]
        length = rules["code_length"]

        # Sample without replacement, then go through validate so a
        # broken ruleset cannot produce an invalid secret.
        picked = rng.sample(symbols, k=length)
        return validate("".join(picked), rules=rules)

    def as_string(self):
        """
        Return a string representation of the code (e.g. '0123').
        Returns:
            str: The code as a string.
        """
        return "".join(str(d) for d in self.digits)

    def as_int(self):
        """Numeric value, used for ordering (leading zeros are dropped)."""
        return int(self.as_string())

    def __iter__(self):
        return iter(self.digits)

    def __len__(self):
        return len(self.digits)

    def __getitem__(self, index):
        return self.digits[index]

    def __eq__(self, other):
        """
        Check equality between this Code and another object.

        Args:
            other (Code): Another Code instance.

        Returns:
            bool: True if the digits are equal, False otherwise.
        """

        if isinstance(other, Code):
            return self.digits == other.digits
        return NotImplemented

    def __hash__(self):
        return hash(self.digits)

    def __lt__(self, other):
        if not isinstance(other, Code):
            return NotImplemented
        return self.digits < other.digits

    def __repr__(self):
        return f"Code('{self.as_string()}')"

    def __str__(self):
        return self.as_string()


def validate(text: str, rules=None) -> Code:
    """
    Check that text is a valid number and return it as a Code.

    Checks, in this order: length, digits only, unique digits.

    Args:
        text (str): Raw characters, e.g. a stripped input line.
        rules (dict | None): Ruleset, defaults to DEFAULT_RULES.

    Returns:
        Code: The parsed number.

    Raises:
        InvalidFormatError: Not exactly code_length characters.
        NonDigitError: A character is not one of the allowed digits.
        DuplicateDigitError: A digit appears more than once.
    """

    rules = rules or DEFAULT_RULES
    length = rules["code_length"]
    symbols = rules["digits"]

    if len(text) != length:
        raise InvalidFormatError(
            f"A number of {length} digits is needed, got {len(text)} "
            "characters."
        )

    for ch in text:
        if ch not in symbols:
            raise NonDigitError(
                f"Invalid character '{ch}'. Use digits {symbols[0]}-"
                f"{symbols[-1]} only."
            )

    if not rules.get("allow_duplicates", False) and len(set(text)) != len(
        text
    ):
        raise DuplicateDigitError("Digits must be unique.")

    return Code(int(ch) for ch in text)
