from argparse import ArgumentParser

from libsysnr.probe import CompilerProbeDriver


def add_target_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with architecture selection into given parser."""
    group = parser.add_argument_group("Target", "Architectures to generate for")
    group.add_argument(
        "--arch",
        "-a",
        dest="architectures",
        required=False,
        action="append",
        default=[],
        help="Generate only for that architecture (may be passed several times), by default generates for all",
    )
    group.add_argument(
        "--list-archs",
        dest="list_architectures",
        default=False,
        action="store_true",
        help="Show known architectures and exit",
    )


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Where and how to emit generated artifacts")
    group.add_argument(
        "--output-dir",
        "-o",
        dest="output_directory",
        required=False,
        default=".",
        help="Root directory where `sys/` and `executor/` artifacts are written (default: current directory)",
    )
    group.add_argument(
        "--check",
        default=False,
        action="store_true",
        help="Do not write anything, fail if artifacts on disk are not up to date",
    )


def add_probe_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with probe options into given parser."""
    group = parser.add_argument_group("Probe", "How syscall numbers are read from kernel headers")
    group.add_argument(
        "--probe",
        required=False,
        choices=("compiler", "static"),
        default="compiler",
        help="Probe driver: compile programs against kernel headers, or replay recorded table (default: compiler)",
    )
    group.add_argument(
        "--linux",
        dest="linux_source",
        required=False,
        default=None,
        help="Kernel source tree to probe headers from (default: $LINUX)",
    )
    group.add_argument(
        "--probe-table",
        dest="probe_table",
        required=False,
        default=None,
        help="JSON table of recorded values for static probe",
    )
    group.add_argument(
        "--cc",
        dest="cc_executable",
        required=False,
        default=CompilerProbeDriver.CC_DEFAULT_EXECUTABLE,
        help="C compiler used to build probes",
    )
    group.add_argument(
        "--probe-timeout",
        dest="probe_timeout",
        required=False,
        type=float,
        default=CompilerProbeDriver.DEFAULT_TIMEOUT,
        help="Timeout in seconds for each probe process",
    )
    group.add_argument(
        "--probe-flag",
        "-Pf",
        dest="probe_flags",
        required=False,
        action="append",
        default=[],
        help="Additional flags passed to C compiler when building probes",
    )
    group.add_argument(
        "--jobs",
        "-j",
        dest="max_thread_workers",
        required=False,
        type=int,
        default=1,
        help="Probe that amount of architectures concurrently",
    )


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Logging and debugging")
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from generator.",
    )
    group.add_argument(
        "-vv",
        "-###",
        required=False,
        dest="show_commands",
        action="store_true",
        help="If passed will display commands that generator performed if any.",
    )
    group.add_argument(
        "--no-user-friendly-errors",
        dest="cli_debug_user_friendly_errors",
        required=False,
        action="store_false",
        default=True,
        help="If passed, errors are raised with traceback instead of user friendly message",
    )
