from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .exceptions import RenderDataError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from libsysnr.resolver import ResolvedArchitecture
    from libsysnr.syscalls import Syscall, SyntheticCallTable

# Characters that cannot appear inside C string literal as-is
C_STRING_UNSAFE_CHARACTERS = frozenset('"\\\n')


@dataclass(frozen=True, slots=True)
class SyscallData:
    name: str
    nr: int


@dataclass(frozen=True, slots=True)
class ArchData:
    c_macros: tuple[str, ...]
    calls: list[SyscallData]


@dataclass(frozen=True, slots=True)
class SyscallsData:
    archs: list[ArchData]
    fake_calls: list[SyscallData]


def validate_numbers_alignment(
    resolved: ResolvedArchitecture,
    syscalls: Sequence[Syscall],
    *,
    artifact: Path,
) -> None:
    """Numbers must positionally map onto syscall list, otherwise generated tables are shifted."""
    if len(resolved.numbers) == len(syscalls):
        return
    raise RenderDataError(
        artifact=artifact,
        reason=f"Architecture '{resolved.architecture.name}' has {len(resolved.numbers)} numbers for {len(syscalls)} syscalls.",
    )


def build_syscalls_data(
    resolved_architectures: Sequence[ResolvedArchitecture],
    syscalls: Sequence[Syscall],
    synthetic: SyntheticCallTable,
    *,
    artifact: Path,
) -> SyscallsData:
    """Build view of all architectures and synthetic calls for executor header."""
    for syscall in syscalls:
        if C_STRING_UNSAFE_CHARACTERS.intersection(syscall.name):
            raise RenderDataError(
                artifact=artifact,
                reason=f"Syscall name {syscall.name!r} cannot be placed into C string literal.",
            )

    archs: list[ArchData] = []
    for resolved in resolved_architectures:
        validate_numbers_alignment(resolved, syscalls, artifact=artifact)
        calls = [
            SyscallData(name=syscall.name, nr=nr)
            for syscall, nr in zip(syscalls, resolved.numbers, strict=True)
        ]
        archs.append(ArchData(c_macros=resolved.architecture.c_macros, calls=calls))

    fake_calls = [SyscallData(name=name, nr=nr) for name, nr in synthetic.sorted()]
    return SyscallsData(archs=archs, fake_calls=fake_calls)
