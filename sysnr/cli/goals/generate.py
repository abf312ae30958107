from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libsysnr.generator import generate_syscalls_numbers
from libsysnr.probe import CompilerProbeDriver, ProbeDriverProtocol, StaticProbeDriver
from libsysnr.resolver import UNRESOLVED_SYSCALL_NUMBER
from libsysnr.syscalls import SyntheticCallTable, load_syscalls_from_file
from libsysnr.targets import default_architecture_registry
from sysnr.cli.output import cli_message

if TYPE_CHECKING:
    from libsysnr.resolver import ResolvedArchitecture
    from libsysnr.targets import ArchitectureRegistry
    from sysnr.cli.parser.arguments import CLIArguments


def cli_perform_generate_goal(args: CLIArguments) -> NoReturn:
    """Perform generate goal that resolves syscall numbers and writes (or checks) artifacts."""
    assert args.syscalls_filepath is not None

    registry = default_architecture_registry()
    if args.architectures:
        registry = registry.select(args.architectures)

    syscalls = load_syscalls_from_file(args.syscalls_filepath)
    cli_message(
        "INFO",
        f"Loaded {len(syscalls)} syscalls from `{args.syscalls_filepath}`, generating for {', '.join(registry.names)}",
        verbose=args.verbose,
    )

    def on_resolved(resolved: ResolvedArchitecture) -> None:
        unresolved = resolved.numbers.count(UNRESOLVED_SYSCALL_NUMBER)
        cli_message(
            "INFO",
            f"Resolved {len(resolved.numbers)} syscall numbers for '{resolved.architecture.name}' ({unresolved} missing on that architecture)",
            verbose=args.verbose,
        )

    result = generate_syscalls_numbers(
        syscalls,
        registry=registry,
        synthetic=SyntheticCallTable(),
        probe=cli_construct_probe_driver(args, registry),
        output_root=args.output_directory,
        max_workers=args.max_thread_workers,
        check=args.check,
        on_resolved=on_resolved,
    )

    if args.check:
        cli_message("INFO", "All artifacts are up to date!", verbose=args.verbose)
        return sys.exit(0)

    for path in result.artifacts:
        state = "updated" if path in result.changed else "unchanged"
        cli_message(
            "INFO",
            f"Wrote `{args.output_directory / path}` ({state})",
            verbose=args.verbose,
        )
    return sys.exit(0)


def cli_construct_probe_driver(
    args: CLIArguments,
    registry: ArchitectureRegistry,
) -> ProbeDriverProtocol:
    """Construct probe driver that is requested by user."""
    match args.probe:
        case "static":
            assert args.probe_table_filepath is not None
            return StaticProbeDriver.from_json_file(args.probe_table_filepath)
        case "compiler":
            assert args.linux_source is not None

            def on_shell_call(command: list[str]) -> None:
                cli_message(
                    "INFO",
                    f"Running probe: `{' '.join(command)}`",
                    verbose=args.show_commands,
                )

            return CompilerProbeDriver(
                args.linux_source,
                executable=args.cc_executable,
                timeout=args.probe_timeout,
                arch_defines={a.kernel_header_arch: a.c_macros for a in registry},
                flags=args.probe_flags,
                on_shell_call=on_shell_call,
            )
