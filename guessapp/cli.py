import logging
import os
import random
import sys

from coleo import ArgsExpander, Option, default, run_cli, tooled

from .config import ConfigError, new_config
from .results import ResultLog, ResultRecord
from .session import play_session

logger = logging.getLogger(__name__)

CONFIG_ENV = "GUESSAPP_CONFIG"
LOG_LEVEL_ENV = "GUESSAPP_LOG_LEVEL"


def configure_logging(verbose=False):
    """Configure the root logger.

    The level is DEBUG if verbose, otherwise the level named by the
    GUESSAPP_LOG_LEVEL environment variable, otherwise WARNING.
    """
    level = logging.WARNING
    level_name = os.getenv(LOG_LEVEL_ENV)
    if verbose:
        level = logging.DEBUG
    elif level_name:
        level = getattr(logging, level_name.upper(), level)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )


def describe_rules(config):
    return "\n".join(
        [
            f"I am thinking of a number between {config.min_value}"
            f" and {config.max_value}.",
            f"You have {config.max_attempts} attempts to find it.",
            f"You will get up to {config.max_hints} hints on wrong guesses.",
        ]
    )


def run_application(
    ask=input, say=print, log=None, rng=None, make_config=new_config
):
    """Play sessions until the player does not want to play again.

    Arguments:
        ask: Function that displays a prompt and returns a line of input.
        say: Function that displays a line of output.
        log: The ResultLog where results are recorded (default: results.txt).
        rng: The random.Random used to draw targets.
        make_config: Function that takes rng and returns a GameConfig.

    Returns:
        The number of sessions played.
    """
    if log is None:
        log = ResultLog("results.txt")
    if rng is None:
        rng = random.Random()

    say("Welcome to the Guessing App")
    sessions = 0
    while True:
        player = ask("Enter your name: ").strip() or "Player"
        config = make_config(rng)
        say(f"Hello {player}!")
        say(describe_rules(config))

        state = play_session(config, ask=ask, say=say)
        sessions += 1

        record = ResultRecord(player, state.attempts_used, state.won)
        if not log.record(record):
            say(f"Warning: the result could not be saved to {log.filename}")

        answer = ask("Play again? (yes/no): ")
        if answer.strip().lower() != "yes":
            break

    say("Thanks for playing. Goodbye!")
    return sessions


def _start(ask, say, log, rng, make_config):
    try:
        return run_application(
            ask=ask, say=say, log=log, rng=rng, make_config=make_config
        )
    except ConfigError as err:
        print(f"error: {err}", file=sys.stderr)
        sys.exit(2)
    except EOFError:
        logger.debug("End of input, quitting")
        return None


@tooled
def guess(ask=input, say=print):
    """Number guessing game."""
    # File where the result of each session is appended
    # [metavar: PATH]
    results: Option = default("results.txt")

    # Seed for the random number generator (defaults to system entropy)
    seed: Option & int = default(None)

    # Log debugging information
    # [alias: -v]
    verbose: Option & bool = default(False)

    configure_logging(verbose)
    return _start(ask, say, ResultLog(results), random.Random(seed), new_config)


def main(argv=None, args=()):
    expand = ArgsExpander("@", default_file=os.environ.get(CONFIG_ENV))
    return run_cli(guess, args, argv=argv, expand=expand)
