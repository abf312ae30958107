from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, cast

from sysnr.cli.output import cli_fatal_abort
from sysnr.cli.parser.arguments import CLIArguments, ProbeKind

if TYPE_CHECKING:
    from argparse import Namespace

# Kernel source tree is taken from environment if not specified
LINUX_SOURCE_ENVIRONMENT_VARIABLE = "LINUX"


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    _validate_mutually_exclusive_goals(args)
    goal_requires_input = not args.version and not args.list_architectures

    probe = cast("ProbeKind", args.probe)
    syscalls_filepath = _process_syscalls_filepath(args, required=goal_requires_input)
    linux_source = _process_linux_source(
        args,
        required=goal_requires_input and probe == "compiler",
    )
    probe_table_filepath = _process_probe_table_filepath(
        args,
        required=goal_requires_input and probe == "static",
    )

    return CLIArguments(
        # Goals.
        version=bool(args.version),
        list_architectures=bool(args.list_architectures),
        check=bool(args.check),
        # Rest of these are mostly goal-specific
        syscalls_filepath=syscalls_filepath,
        output_directory=_process_output_directory(args),
        architectures=cast("list[str]", args.architectures),
        probe=probe,
        probe_table_filepath=probe_table_filepath,
        probe_timeout=_process_probe_timeout(args),
        probe_flags=cast("list[str]", args.probe_flags),
        linux_source=linux_source,
        cc_executable=str(args.cc_executable),
        max_thread_workers=_process_max_thread_workers(args),
        verbose=bool(args.verbose) or bool(args.show_commands),
        show_commands=bool(args.show_commands),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _validate_mutually_exclusive_goals(args: Namespace) -> None:
    """Validate that goal flags is not present as mutually exclusive."""
    if sum([args.version, args.list_architectures, args.check]) in (0, 1):
        return None

    return cli_fatal_abort("Goal flags is mutually exclusive!")


def _process_syscalls_filepath(args: Namespace, *, required: bool) -> Path | None:
    """Process input syscall list file as path and validate it."""
    if args.syscalls_file is None:
        if required:
            return cli_fatal_abort("Expected syscall list file to generate from!")
        return None

    path = Path(args.syscalls_file)
    if not path.is_file():
        return cli_fatal_abort(f"Syscall list file `{path}` is not exists!")
    return path


def _process_linux_source(args: Namespace, *, required: bool) -> Path | None:
    """Process kernel source tree path with fallback onto environment."""
    raw_path = args.linux_source or os.environ.get(LINUX_SOURCE_ENVIRONMENT_VARIABLE)
    if not raw_path:
        if required:
            return cli_fatal_abort(
                f"Kernel source tree is required for compiler probe, pass `--linux` or set ${LINUX_SOURCE_ENVIRONMENT_VARIABLE}!",
            )
        return None

    path = Path(raw_path)
    if required and not path.is_dir():
        return cli_fatal_abort(f"Kernel source tree `{path}` is not an directory!")
    return path


def _process_probe_table_filepath(args: Namespace, *, required: bool) -> Path | None:
    if args.probe_table is None:
        if required:
            return cli_fatal_abort("Static probe requires `--probe-table` file!")
        return None

    path = Path(args.probe_table)
    if required and not path.is_file():
        return cli_fatal_abort(f"Probe table file `{path}` is not exists!")
    return path


def _process_output_directory(args: Namespace) -> Path:
    path = Path(args.output_directory)
    if path.exists() and not path.is_dir():
        return cli_fatal_abort(f"Output path `{path}` is not an directory!")
    return path


def _process_probe_timeout(args: Namespace) -> float:
    timeout = float(args.probe_timeout)
    if timeout <= 0:
        return cli_fatal_abort("Probe timeout must be positive!")
    return timeout


def _process_max_thread_workers(args: Namespace) -> int:
    workers = int(args.max_thread_workers)
    if workers < 1:
        return cli_fatal_abort("Expected at least one job!")
    return workers
