from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import IO, TYPE_CHECKING

from .render_data import ArchData, SyscallsData, build_syscalls_data

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libsysnr.resolver import ResolvedArchitecture
    from libsysnr.syscalls import Syscall, SyntheticCallTable

EXECUTOR_HEADER_ARTIFACT_PATH = Path("executor") / "syscalls.h"


def emit_executor_header(
    fd: IO[str],
    resolved_architectures: Sequence[ResolvedArchitecture],
    syscalls: Sequence[Syscall],
    synthetic: SyntheticCallTable,
) -> None:
    """Emit C header for executor with synthetic call numbers and per-architecture syscalls table.

    Architecture blocks follow given order, synthetic calls are sorted by name.
    """
    data = build_syscalls_data(
        resolved_architectures,
        syscalls,
        synthetic,
        artifact=EXECUTOR_HEADER_ARTIFACT_PATH,
    )
    _emit_syscalls_data(fd, data)


def _emit_syscalls_data(fd: IO[str], data: SyscallsData) -> None:
    fd.write("// AUTOGENERATED FILE\n")
    fd.write("\n")
    for fake_call in data.fake_calls:
        fd.write(f"#define __NR_{fake_call.name}\t{fake_call.nr}\n")
    fd.write("\n")
    fd.write("\n")
    fd.write("struct call_t {\n")
    fd.write("\tconst char*\tname;\n")
    fd.write("\tint\t\tsys_nr;\n")
    fd.write("};\n")
    fd.write("\n")
    for arch in data.archs:
        _emit_arch_block(fd, arch)
    fd.write("\n")


def _emit_arch_block(fd: IO[str], arch: ArchData) -> None:
    # Trailing `0` keeps disjunction valid for any amount of macros
    condition = "".join(f"defined({macro}) || " for macro in arch.c_macros) + "0"

    fd.write("\n")
    fd.write(f"#if {condition}\n")
    fd.write("call_t syscalls[] = {\n")
    for call in arch.calls:
        fd.write(f'\t{{"{call.name}", {call.nr}}},\n')
    fd.write("\n")
    fd.write("};\n")
    fd.write("#endif\n")


def render_executor_header(
    resolved_architectures: Sequence[ResolvedArchitecture],
    syscalls: Sequence[Syscall],
    synthetic: SyntheticCallTable,
) -> str:
    fd = StringIO()
    emit_executor_header(fd, resolved_architectures, syscalls, synthetic)
    return fd.getvalue()
