import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from libsysnr.probe import CompilerProbeDriver
from sysnr.cli.parser.arguments import CLIArguments


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and generator."""
    try:
        package_version = version("sysnr")
    except PackageNotFoundError:
        package_version = "(not installed)"

    compiler_installed = CompilerProbeDriver.is_installed(executable=args.cc_executable)

    print("[Syscall numbers generator]")
    print(f"\tVersion: {package_version}")
    print(f"\tProbe compiler: {args.cc_executable} ({'found' if compiler_installed else 'not found'})")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)
