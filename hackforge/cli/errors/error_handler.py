import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from hackforge.cli.output import cli_fatal_abort, cli_message
from libhackforge.exceptions import HackforgeError

# Exit code for toolchain errors and failed file operations
EXIT_CODE_FAILURE = 1


@contextmanager
def cli_hackforge_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Turn errors raised by goals into messages and exit codes.

    Goals are expected to exit by themselves, so falling through is an bug in the CLI.
    """
    try:
        yield
    except HackforgeError as he:
        if not debug_user_friendly_errors:
            raise
        cli_fatal_abort(repr(he))
    except UnicodeDecodeError as ue:
        cli_message(
            "ERROR",
            f"Source file is not valid UTF-8 text (byte {ue.start} cannot be decoded)",
        )
        sys.exit(EXIT_CODE_FAILURE)
    except OSError as oe:
        cli_message(
            "ERROR",
            f"Cannot access `{oe.filename}`: {oe.strerror or oe}",
        )
        sys.exit(EXIT_CODE_FAILURE)
    except KeyboardInterrupt:
        print()
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        sys.exit(0)
    cli_fatal_abort("Goal returned without exit code, this is an bug in Hackforge CLI")
