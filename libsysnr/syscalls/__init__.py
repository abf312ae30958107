from .loader import load_syscalls_from_file, parse_syscalls
from .synthetic import (
    DEFAULT_SYNTHETIC_CALLS,
    SYNTHETIC_CALL_NUMBER_BASE,
    SyntheticCallTable,
)
from .syscall import Syscall

__all__ = [
    "DEFAULT_SYNTHETIC_CALLS",
    "SYNTHETIC_CALL_NUMBER_BASE",
    "Syscall",
    "SyntheticCallTable",
    "load_syscalls_from_file",
    "parse_syscalls",
]
