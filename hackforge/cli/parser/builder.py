from argparse import ArgumentParser

from hackforge.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Hackforge Toolkit - CLI for assembling and translating programs for the Hack platform",
        usage=f"{prog} file [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_files",
        help="Input source file to process (`.asm` assembly or `.vm` bytecode)",
        nargs="*",
        default=[],
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_output_group(parser)
    groups.add_debug_group(parser)
    groups.add_translator_group(parser)
    groups.add_execution_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
