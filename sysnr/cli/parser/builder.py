from argparse import ArgumentParser

from sysnr.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Syscall numbers generator - resolves kernel syscall numbers for architectures and emits tables",
        usage=f"{prog} syscalls_file [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "syscalls_file",
        help="File with syscall list, one `name [call_name]` per line",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_target_group(parser)
    groups.add_output_group(parser)
    groups.add_probe_group(parser)
    groups.add_debug_group(parser)
    return parser
