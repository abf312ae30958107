from dataclasses import dataclass
from typing import Literal

from .exceptions import EmptyArchitectureMacrosError

type ArchitectureName = Literal[
    "amd64",
    "arm64",
    "ppc64le",
]

# Every known architecture probes syscall numbers from that header
KERNEL_SYSCALLS_INCLUDE = "asm/unistd.h"


@dataclass(frozen=True, slots=True)
class Architecture:
    """Specifications of an architecture that syscall numbers are generated for."""

    # Build tag for generated table (e.g `// +build amd64`)
    name: str

    # Any of these macros selects that architecture at C compile time
    c_macros: tuple[str, ...]

    # Kernel source tree `arch/<...>` subdirectory to pull includes from
    kernel_header_arch: str

    # Header to probe syscall numbers from
    kernel_include: str = KERNEL_SYSCALLS_INCLUDE

    def __post_init__(self) -> None:
        if not self.c_macros:
            raise EmptyArchitectureMacrosError(architecture=self.name)

    @property
    def includes(self) -> list[str]:
        return [self.kernel_include]

    @staticmethod
    def from_name(name: ArchitectureName) -> "Architecture":
        match name:
            case "amd64":
                return Architecture(
                    name=name,
                    c_macros=("__x86_64__",),
                    kernel_header_arch="x86",
                )
            case "arm64":
                return Architecture(
                    name=name,
                    c_macros=("__aarch64__",),
                    kernel_header_arch="arm64",
                )
            case "ppc64le":
                return Architecture(
                    name=name,
                    c_macros=("__ppc64__", "__PPC64__", "__powerpc64__"),
                    kernel_header_arch="powerpc",
                )
