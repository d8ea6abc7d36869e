import random
import re
from enum import Enum

NO_MORE_HINTS = "No more hints available."

_integer = re.compile(r"[+-]?[0-9]+")


class Outcome(Enum):
    CORRECT = "CORRECT"
    LOW = "LOW"
    HIGH = "HIGH"


def generate_target(min_value, max_value, rng=None):
    """Draw the number to guess, uniformly in [min_value, max_value].

    Arguments:
        min_value: Smallest possible target.
        max_value: Largest possible target.
        rng: A random.Random instance. If None, a new generator seeded from
            system entropy is used.
    """
    if rng is None:
        rng = random.Random()
    return rng.randint(min_value, max_value)


def evaluate(guess, target):
    """Compare a guess to the target."""
    if guess == target:
        return Outcome.CORRECT
    elif guess < target:
        return Outcome.LOW
    else:
        return Outcome.HIGH


def hint(target, index, threshold=50):
    """Return the hint for the index-th hint granted in a session.

    The first hint gives the parity of the target, the second tells whether
    it is above the threshold. There are no further hints.
    """
    if index == 1:
        if target % 2 == 0:
            return "Hint: the number is EVEN"
        else:
            return "Hint: the number is ODD"
    elif index == 2:
        if target > threshold:
            return f"Hint: the number is greater than {threshold}"
        else:
            return f"Hint: the number is {threshold} or less"
    else:
        return NO_MORE_HINTS


class InvalidGuess:
    """Base class for the ways a line of input can fail to be a guess."""

    def __init__(self, text, min_value=1, max_value=100):
        self.text = text
        self.min_value = min_value
        self.max_value = max_value

    @property
    def message(self):
        raise NotImplementedError()

    def __eq__(self, other):
        return type(self) is type(other) and self.text == other.text

    def __repr__(self):
        return f"{type(self).__name__}({self.text!r})"


class NonNumericInput(InvalidGuess):
    @property
    def message(self):
        return f"'{self.text}' is not a number. Please enter a whole number."


class OutOfRange(InvalidGuess):
    @property
    def message(self):
        return (
            f"{self.text} is out of range. Please enter a number between"
            f" {self.min_value} and {self.max_value}."
        )


def validate(text, min_value=1, max_value=100):
    """Parse one line of input as a guess.

    Returns the guess as an int, or an InvalidGuess (NonNumericInput or
    OutOfRange) describing why the line was rejected.
    """
    text = text.strip()
    if not _integer.fullmatch(text):
        return NonNumericInput(text, min_value, max_value)
    try:
        value = int(text)
    except ValueError:
        # Too many digits to convert, far outside any range
        return OutOfRange(text, min_value, max_value)
    if not min_value <= value <= max_value:
        return OutOfRange(text, min_value, max_value)
    return value
