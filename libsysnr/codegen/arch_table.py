from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import IO, TYPE_CHECKING

from .render_data import validate_numbers_alignment

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libsysnr.resolver import ResolvedArchitecture
    from libsysnr.syscalls import Syscall


def arch_table_artifact_path(architecture_name: str) -> Path:
    return Path("sys") / f"sys_{architecture_name}.go"


def emit_arch_table(
    fd: IO[str],
    resolved: ResolvedArchitecture,
    syscalls: Sequence[Syscall],
) -> None:
    """Emit Go source with syscall numbers table, compiled only for that architecture.

    Table has no names, position of number is position of syscall in syscall list.
    """
    validate_numbers_alignment(
        resolved,
        syscalls,
        artifact=arch_table_artifact_path(resolved.architecture.name),
    )
    build_tag = resolved.architecture.name

    fd.write("// AUTOGENERATED FILE\n")
    fd.write("\n")
    fd.write(f"//go:build {build_tag}\n")
    fd.write(f"// +build {build_tag}\n")
    fd.write("\n")
    fd.write("package sys\n")
    fd.write("\n")
    fd.write("// Maps internal syscall ID onto kernel syscall number.\n")
    fd.write(f"var numbers = []int{{{', '.join(map(str, resolved.numbers))}}}\n")


def render_arch_table(
    resolved: ResolvedArchitecture,
    syscalls: Sequence[Syscall],
) -> str:
    fd = StringIO()
    emit_arch_table(fd, resolved, syscalls)
    return fd.getvalue()
