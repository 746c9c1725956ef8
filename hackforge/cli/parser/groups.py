import argparse
from argparse import ArgumentParser

DEFAULT_EXECUTION_MAX_CYCLES = 1_000_000


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Control translation output")
    group.add_argument(
        "--output",
        "-o",
        type=str,
        required=False,
        help="Output file path to generate, by default will be inferred from input filename",
    )
    group.add_argument(
        "--output-format",
        "-of",
        type=str,
        required=False,
        default=None,
        choices=["hack", "asm"],
        help="Output format. Assembly input is always assembled into `hack`, bytecode input is translated into `asm` by default, `hack` also assembles it.",
    )
    group.add_argument(
        "--strict",
        action="store_true",
        default=False,
        required=False,
        help="If passed, lines that match no known instruction / command are errors instead of being skipped with warning",
    )


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Debugging and inspection")

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO and WARNING level logs from toolchain.",
    )

    group.add_argument(
        "--symbols",
        dest="display_symbols",
        required=False,
        action="store_true",
        help="If passed will display symbol table (labels and variables) after assembling.",
    )


def add_translator_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with VM translator options into given parser."""
    group = parser.add_argument_group("Translator", "Flags for the VM translator")
    group.add_argument(
        "--comments",
        dest="emit_comments",
        action="store_true",
        default=False,
        help="If passed, each VM command is emitted as an comment before its assembly",
    )
    group.add_argument(
        "--temp-base",
        dest="temp_segment_base",
        type=int,
        default=4,
        metavar="<N>",
        help="First address of the `temp` segment (defaults to 4, platform convention is 5)",
    )


def add_execution_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with emulator options into given parser."""
    group = parser.add_argument_group("Execution", "Run result on the emulator")
    group.add_argument(
        "--execute",
        "-e",
        dest="execute_after_compilation",
        required=False,
        action="store_true",
        help="If provided, will execute binary output on the emulator and display stack / registers. Expects output format to be `hack`",
    )
    group.add_argument(
        "--cycles",
        dest="execution_max_cycles",
        type=int,
        default=DEFAULT_EXECUTION_MAX_CYCLES,
        metavar="<N>",
        help="Max instructions to execute on the emulator",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with internal toolchain debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
