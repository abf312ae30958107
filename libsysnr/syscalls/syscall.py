from dataclasses import dataclass

# Variant separator in syscall names (e.g `open$dir` is variant of `open`)
SYSCALL_VARIANT_SEPARATOR = "$"


@dataclass(frozen=True, slots=True)
class Syscall:
    """Abstract syscall definition, correlated across architectures by position within list."""

    # Canonical name used in generated output
    name: str

    # Kernel facing name used to construct probe symbol
    call_name: str

    @staticmethod
    def from_name(name: str) -> "Syscall":
        """Construct syscall where kernel name is canonical one without variant suffix."""
        call_name, *_ = name.split(SYSCALL_VARIANT_SEPARATOR, maxsplit=1)
        return Syscall(name=name, call_name=call_name)
