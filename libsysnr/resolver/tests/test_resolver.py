from collections.abc import Mapping, Sequence

import pytest

from libsysnr.probe import ProbeDriverProtocol, StaticProbeDriver
from libsysnr.probe.exceptions import ProbeExecutionError
from libsysnr.resolver import resolve_architecture, resolve_architectures
from libsysnr.resolver.exceptions import (
    MalformedSyscallNumberError,
    ProbeFailureError,
    SyscallNumbersCountError,
)
from libsysnr.syscalls import Syscall, SyntheticCallTable
from libsysnr.targets import Architecture, ArchitectureRegistry, default_architecture_registry

SYSCALLS = [
    Syscall.from_name("read"),
    Syscall.from_name("open$dir"),
    Syscall.from_name("syz_open_dev"),
    Syscall.from_name("renameat2"),
]


class FailingProbeDriver(ProbeDriverProtocol):
    @property
    def name(self) -> str:
        return "failing"

    @classmethod
    def is_installed(cls) -> bool:
        return True

    def fetch_values(
        self,
        kernel_header_arch: str,
        symbols: Sequence[str],
        includes: Sequence[str],
        defaults: Mapping[str, int],
    ) -> list[str]:
        raise ProbeExecutionError(kernel_header_arch=kernel_header_arch, reason="broken")


class TruncatingProbeDriver(FailingProbeDriver):
    def fetch_values(
        self,
        kernel_header_arch: str,
        symbols: Sequence[str],
        includes: Sequence[str],
        defaults: Mapping[str, int],
    ) -> list[str]:
        return ["0"] * (len(symbols) - 1)


def test_resolve_example_read() -> None:
    architecture = Architecture(name="x", c_macros=("__X__",), kernel_header_arch="x")
    resolved = resolve_architecture(
        architecture,
        [Syscall(name="read", call_name="read")],
        synthetic=SyntheticCallTable({}),
        probe=StaticProbeDriver({"x": {"__NR_read": 0}}),
    )
    assert resolved.numbers == (0,)
    assert resolved.architecture is architecture


def test_resolve_order_and_defaults() -> None:
    probe = StaticProbeDriver({"x86": {"__NR_read": 0, "__NR_open": 2}})
    resolved = resolve_architecture(
        Architecture.from_name("amd64"),
        SYSCALLS,
        synthetic=SyntheticCallTable(),
        probe=probe,
    )
    # renameat2 is missing in table, so probe returns sentinel default
    assert resolved.numbers == (0, 2, 1000001, -1)
    assert probe.calls == [
        ("x86", ("__NR_read", "__NR_open", "__NR_syz_open_dev", "__NR_renameat2")),
    ]


def test_resolve_synthetic_calls_on_every_architecture() -> None:
    registry = default_architecture_registry()
    resolved = resolve_architectures(
        registry,
        SYSCALLS,
        synthetic=SyntheticCallTable(),
        probe=StaticProbeDriver({}),
    )
    assert [r.architecture.name for r in resolved] == registry.names
    for resolved_architecture in resolved:
        assert len(resolved_architecture.numbers) == len(SYSCALLS)
        assert resolved_architecture.numbers[2] == 1000001


def test_resolve_malformed_value() -> None:
    with pytest.raises(MalformedSyscallNumberError) as e:
        resolve_architecture(
            Architecture.from_name("arm64"),
            SYSCALLS,
            synthetic=SyntheticCallTable(),
            probe=StaticProbeDriver({"arm64": {"__NR_open": "abc"}}),
        )
    assert e.value.symbol == "__NR_open"
    assert e.value.architecture == "arm64"


def test_resolve_probe_failure_has_architecture() -> None:
    with pytest.raises(ProbeFailureError) as e:
        resolve_architecture(
            Architecture.from_name("ppc64le"),
            SYSCALLS,
            synthetic=SyntheticCallTable(),
            probe=FailingProbeDriver(),
        )
    assert e.value.architecture == "ppc64le"
    assert e.value.probe == "failing"
    assert "`failing` probe driver" in repr(e.value)
    assert "broken" in repr(e.value)


def test_resolve_count_mismatch() -> None:
    with pytest.raises(SyscallNumbersCountError):
        resolve_architecture(
            Architecture.from_name("amd64"),
            SYSCALLS,
            synthetic=SyntheticCallTable(),
            probe=TruncatingProbeDriver(),
        )


def test_resolve_threaded_keeps_registry_order() -> None:
    registry = ArchitectureRegistry(
        Architecture(name=f"a{i}", c_macros=(f"__A{i}__",), kernel_header_arch=f"a{i}")
        for i in range(8)
    )
    tables = {f"a{i}": {"__NR_read": i} for i in range(8)}
    seen: list[str] = []

    resolved = resolve_architectures(
        registry,
        [Syscall.from_name("read")],
        synthetic=SyntheticCallTable(),
        probe=StaticProbeDriver(tables),
        max_workers=4,
        on_resolved=lambda r: seen.append(r.architecture.name),
    )
    assert [r.architecture.name for r in resolved] == registry.names
    assert [r.numbers for r in resolved] == [(i,) for i in range(8)]
    assert seen == registry.names
