import sys
from typing import Literal, NoReturn

type MessageLevel = Literal["INFO", "WARNING", "ERROR"]


class CLIColor:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"


LEVEL_COLORS: dict[MessageLevel, str] = {
    "INFO": CLIColor.BLUE,
    "WARNING": CLIColor.YELLOW,
    "ERROR": CLIColor.RED,
}


def cli_message(
    level: MessageLevel,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit message to user, `INFO` messages are shown only in verbose mode."""
    if level == "INFO" and not verbose:
        return
    fd = sys.stderr if level == "ERROR" else sys.stdout
    color = LEVEL_COLORS[level] if fd.isatty() else ""
    reset = CLIColor.RESET if color else ""
    print(f"{color}[{level}]{reset} {text}", file=fd)


def cli_fatal_abort(text: str) -> NoReturn:
    cli_message("ERROR", text)
    sys.exit(1)
