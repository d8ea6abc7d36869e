import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultRecord:
    player: str
    attempts: int
    won: bool

    def format(self):
        result = "WIN" if self.won else "LOSE"
        return (
            f"Player: {self.player}, Attempts: {self.attempts},"
            f" Result: {result}"
        )


class ResultLog:
    """Append-only text file holding one line per finished session.

    The file is only ever appended to. It is created, along with its
    directory, on the first record.
    """

    def __init__(self, filename):
        self.filename = os.path.expanduser(filename)

    def record(self, result):
        """Append the result. Return False if it could not be written."""
        line = result.format().replace("\n", " ")
        try:
            dirname = os.path.dirname(self.filename)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filename, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except (OSError, UnicodeError) as err:
            logger.warning(
                "Could not save result to %s: %s", self.filename, err
            )
            return False
        logger.info("Recorded '%s' in %s", line, self.filename)
        return True
