from __future__ import annotations

import sys
from typing import Literal, NoReturn, TypeAlias

MESSAGE_LEVEL: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

_LEVEL_COLORS: dict[MESSAGE_LEVEL, str] = {
    "INFO": "\033[94m",
    "WARNING": "\033[93m",
    "ERROR": "\033[91m",
}
_COLOR_RESET = "\033[0m"


def cli_message(
    level: MESSAGE_LEVEL,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit message from toolchain into stderr, non-error messages are hidden unless verbose."""
    if not verbose and level != "ERROR":
        return

    tag = f"[{level}]"
    if sys.stderr.isatty():
        tag = f"{_LEVEL_COLORS[level]}{tag}{_COLOR_RESET}"
    print(tag, text, file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error and exit with failure code."""
    cli_message("ERROR", text)
    sys.exit(1)
