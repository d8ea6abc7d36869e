import logging
from dataclasses import dataclass

from coleo import Option, default, tooled

from .game import generate_target

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the rules of a game are inconsistent."""


def check_rules(min_value, max_value, max_attempts, max_hints):
    if min_value > max_value:
        raise ConfigError(
            f"min-value ({min_value}) must not exceed max-value ({max_value})"
        )
    if max_attempts < 1:
        raise ConfigError(
            f"max-attempts must be at least 1, not {max_attempts}"
        )
    if max_hints < 0:
        raise ConfigError(f"max-hints must not be negative, not {max_hints}")


@dataclass(frozen=True)
class GameConfig:
    """Rules and target of one session.

    Attributes:
        target: The number to guess, drawn when the session is created.
        min_value: Smallest allowed guess.
        max_value: Largest allowed guess.
        max_attempts: Number of valid guesses allowed.
        max_hints: Number of hints granted for wrong guesses.
    """

    target: int
    min_value: int = 1
    max_value: int = 100
    max_attempts: int = 7
    max_hints: int = 3

    def __post_init__(self):
        check_rules(
            self.min_value, self.max_value, self.max_attempts, self.max_hints
        )
        if not self.min_value <= self.target <= self.max_value:
            raise ConfigError(
                f"target {self.target} is outside of"
                f" [{self.min_value}, {self.max_value}]"
            )

    @property
    def midpoint(self):
        return (self.min_value + self.max_value) // 2


@tooled
def new_config(rng=None):
    """Create the GameConfig for a new session, with a fresh target."""
    # Smallest number that can be drawn
    # [group: rules]
    min_value: Option & int = default(1)
    # Largest number that can be drawn
    # [group: rules]
    max_value: Option & int = default(100)
    # Number of guesses allowed in a session
    # [group: rules]
    max_attempts: Option & int = default(7)
    # Number of hints given for wrong guesses
    # [group: rules]
    max_hints: Option & int = default(3)

    check_rules(min_value, max_value, max_attempts, max_hints)
    target = generate_target(min_value, max_value, rng)
    logger.debug("New target drawn in [%s, %s]", min_value, max_value)
    return GameConfig(
        target=target,
        min_value=min_value,
        max_value=max_value,
        max_attempts=max_attempts,
        max_hints=max_hints,
    )
