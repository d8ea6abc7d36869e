import logging
from dataclasses import dataclass

from .game import InvalidGuess, Outcome, evaluate, hint, validate

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """Counters of one session, owned by play_session."""

    attempts_used: int = 0
    hints_used: int = 0
    won: bool = False

    def finished(self, config):
        return self.won or self.attempts_used >= config.max_attempts

    def status(self, config):
        if self.won:
            return "won"
        elif self.attempts_used >= config.max_attempts:
            return "lost"
        else:
            return "playing"


def take_turn(config, state, guess):
    """Evaluate a validated guess and update the state.

    Returns the tuple (outcome, hint) where hint is None if no hint was
    granted for this guess.
    """
    if state.finished(config):
        raise ValueError("session is over")
    state.attempts_used += 1
    outcome = evaluate(guess, config.target)
    logger.debug(
        "Attempt %s: %s is %s", state.attempts_used, guess, outcome.value
    )
    granted = None
    if outcome is Outcome.CORRECT:
        state.won = True
    elif state.hints_used < config.max_hints:
        state.hints_used += 1
        granted = hint(config.target, state.hints_used, config.midpoint)
    return outcome, granted


def play_session(config, ask=input, say=print):
    """Play one session until it is won or all attempts are used.

    Arguments:
        config: The GameConfig of the session.
        ask: Function that displays a prompt and returns a line of input.
        say: Function that displays a line of output.

    Returns:
        The final SessionState.
    """
    state = SessionState()
    prompt = f"Enter your guess ({config.min_value}-{config.max_value}): "
    while not state.finished(config):
        result = validate(ask(prompt), config.min_value, config.max_value)
        if isinstance(result, InvalidGuess):
            say(result.message)
            continue

        outcome, granted = take_turn(config, state, result)
        if granted is not None:
            say(granted)
        say(outcome.value)

        if outcome is Outcome.CORRECT:
            say(f"You found it in {state.attempts_used} attempt(s)!")
        elif state.finished(config):
            say(f"Out of attempts! The number was {config.target}.")
        else:
            left = config.max_attempts - state.attempts_used
            say(f"Attempts left: {left}")

    logger.info(
        "Session %s after %s attempt(s), %s hint(s)",
        state.status(config),
        state.attempts_used,
        state.hints_used,
    )
    return state
