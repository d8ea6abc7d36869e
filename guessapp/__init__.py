from .cli import configure_logging, guess, main, run_application
from .config import ConfigError, GameConfig, new_config
from .game import (
    NO_MORE_HINTS,
    InvalidGuess,
    NonNumericInput,
    OutOfRange,
    Outcome,
    evaluate,
    generate_target,
    hint,
    validate,
)
from .results import ResultLog, ResultRecord
from .session import SessionState, play_session, take_turn
from .version import version
