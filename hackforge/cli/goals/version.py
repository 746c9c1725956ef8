import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from hackforge.cli.parser.arguments import CLIArguments
from libhackforge.architecture import (
    ADDRESS_SPACE_SIZE,
    KEYBOARD_ADDRESS,
    SCREEN_ADDRESS,
    WORD_WIDTH,
)

DISTRIBUTION_NAME = "hackforge"


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[Hackforge toolchain]")
    print(f"\tVersion: {_get_distribution_version()}")
    print("Target platform:")
    print(f"\tWord width: {WORD_WIDTH} bits")
    print(f"\tAddress space: {ADDRESS_SPACE_SIZE} words")
    print(f"\tScreen / keyboard: {SCREEN_ADDRESS} / {KEYBOARD_ADDRESS}")
    print(f"\tTemp segment base: {args.temp_segment_base}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)


def _get_distribution_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "unknown (not installed)"
