import pytest

from libsysnr.targets import Architecture, ArchitectureRegistry, default_architecture_registry
from libsysnr.targets.exceptions import (
    DuplicateArchitectureError,
    EmptyArchitectureMacrosError,
    UnknownArchitectureError,
)


def test_default_registry_order() -> None:
    assert default_architecture_registry().names == ["amd64", "arm64", "ppc64le"]


def test_default_registry_specifications() -> None:
    registry = default_architecture_registry()

    amd64 = registry.get("amd64")
    assert amd64.c_macros == ("__x86_64__",)
    assert amd64.kernel_header_arch == "x86"
    assert amd64.includes == ["asm/unistd.h"]

    ppc64le = registry.get("ppc64le")
    assert ppc64le.c_macros == ("__ppc64__", "__PPC64__", "__powerpc64__")
    assert ppc64le.kernel_header_arch == "powerpc"


def test_default_registry_macros_are_disjoint() -> None:
    registry = list(default_architecture_registry())
    for i, a in enumerate(registry):
        for b in registry[i + 1 :]:
            assert not set(a.c_macros) & set(b.c_macros)


def test_architecture_requires_macros() -> None:
    with pytest.raises(EmptyArchitectureMacrosError):
        Architecture(name="none", c_macros=(), kernel_header_arch="none")


def test_registry_rejects_duplicates() -> None:
    with pytest.raises(DuplicateArchitectureError):
        ArchitectureRegistry(
            [Architecture.from_name("amd64"), Architecture.from_name("amd64")],
        )


def test_registry_unknown_architecture() -> None:
    with pytest.raises(UnknownArchitectureError) as e:
        default_architecture_registry().get("mips")
    assert "amd64" in repr(e.value)


def test_registry_select_preserves_registry_order() -> None:
    registry = default_architecture_registry().select(["ppc64le", "amd64"])
    assert registry.names == ["amd64", "ppc64le"]
    assert "arm64" not in registry
    assert len(registry) == 2


def test_registry_select_unknown() -> None:
    with pytest.raises(UnknownArchitectureError):
        default_architecture_registry().select(["amd64", "sparc"])
