import sys
from typing import NoReturn

from libsysnr.targets import default_architecture_registry
from sysnr.cli.parser.arguments import CLIArguments


def cli_perform_list_architectures_goal(args: CLIArguments) -> NoReturn:
    """Perform goal that display known architectures in registry order."""
    registry = default_architecture_registry()
    if args.architectures:
        registry = registry.select(args.architectures)

    for architecture in registry:
        print(f"{architecture.name}:")
        print(f"\tC macros: {', '.join(architecture.c_macros)}")
        print(f"\tKernel headers: arch/{architecture.kernel_header_arch}")
        print(f"\tInclude: <{architecture.kernel_include}>")
    return sys.exit(0)
