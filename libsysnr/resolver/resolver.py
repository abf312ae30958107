from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from libsysnr.probe.exceptions import ProbeError

from .exceptions import ProbeFailureError, SyscallNumbersCountError
from .numbers import parse_syscall_number

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from libsysnr.probe import ProbeDriverProtocol
    from libsysnr.syscalls import Syscall, SyntheticCallTable
    from libsysnr.targets import Architecture, ArchitectureRegistry

# Kernel defines syscall numbers as `__NR_<call>` macros
SYSCALL_SYMBOL_PREFIX = "__NR_"

# Default for syscalls that does not exist on an architecture
UNRESOLVED_SYSCALL_NUMBER = -1


@dataclass(frozen=True, slots=True)
class ResolvedArchitecture:
    """Architecture with its syscall numbers, one per syscall in same order as syscall list."""

    architecture: Architecture
    numbers: tuple[int, ...]


def syscall_symbol(syscall: Syscall) -> str:
    return SYSCALL_SYMBOL_PREFIX + syscall.call_name


def compose_probe_request(
    syscalls: Sequence[Syscall],
    synthetic: SyntheticCallTable,
) -> tuple[list[str], dict[str, int]]:
    """Construct ordered symbols to probe and default value for each of them."""
    symbols: list[str] = []
    defaults: dict[str, int] = {}
    for syscall in syscalls:
        symbol = syscall_symbol(syscall)
        symbols.append(symbol)

        nr = synthetic.number_for(syscall)
        defaults[symbol] = UNRESOLVED_SYSCALL_NUMBER if nr is None else nr
    return symbols, defaults


def resolve_architecture(
    architecture: Architecture,
    syscalls: Sequence[Syscall],
    *,
    synthetic: SyntheticCallTable,
    probe: ProbeDriverProtocol,
) -> ResolvedArchitecture:
    """Fetch kernel syscall numbers for all given syscalls on given architecture.

    Probe is invoked once for whole syscall list.
    Syscalls missing on that architecture resolve into `UNRESOLVED_SYSCALL_NUMBER`,
    synthetic calls into their fixed numbers.
    """
    symbols, defaults = compose_probe_request(syscalls, synthetic)

    try:
        values = probe.fetch_values(
            architecture.kernel_header_arch,
            symbols,
            architecture.includes,
            defaults,
        )
    except ProbeError as e:
        raise ProbeFailureError(architecture=architecture.name, probe=probe.name, error=e) from e

    if len(values) != len(symbols):
        raise SyscallNumbersCountError(
            architecture=architecture.name,
            expected=len(symbols),
            got=len(values),
        )

    numbers = tuple(
        parse_syscall_number(value, symbol=symbol, architecture=architecture.name)
        for symbol, value in zip(symbols, values, strict=True)
    )
    return ResolvedArchitecture(architecture=architecture, numbers=numbers)


def resolve_architectures(  # noqa: PLR0913
    registry: ArchitectureRegistry,
    syscalls: Sequence[Syscall],
    *,
    synthetic: SyntheticCallTable,
    probe: ProbeDriverProtocol,
    max_workers: int = 1,
    on_resolved: Callable[[ResolvedArchitecture], None] | None = None,
) -> list[ResolvedArchitecture]:
    """Resolve every architecture in registry, result is always in registry order.

    With `max_workers` above one, architectures are probed concurrently.
    """
    architectures = list(registry)

    def resolve_single_architecture(architecture: Architecture) -> ResolvedArchitecture:
        return resolve_architecture(
            architecture,
            syscalls,
            synthetic=synthetic,
            probe=probe,
        )

    max_workers = max(1, min(len(architectures), max_workers))

    if max_workers <= 1:
        resolved: list[ResolvedArchitecture] = []
        for architecture in architectures:
            resolved.append(resolve_single_architecture(architecture))
            if on_resolved:
                on_resolved(resolved[-1])
        return resolved

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(resolve_single_architecture, architecture)
            for architecture in architectures
        ]

        resolved = [future.result() for future in futures]

    if on_resolved:
        for resolved_architecture in resolved:
            on_resolved(resolved_architecture)
    return resolved
