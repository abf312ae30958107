"""Resolver of kernel syscall numbers for architectures."""

from .numbers import parse_syscall_number
from .resolver import (
    SYSCALL_SYMBOL_PREFIX,
    UNRESOLVED_SYSCALL_NUMBER,
    ResolvedArchitecture,
    resolve_architecture,
    resolve_architectures,
)

__all__ = [
    "SYSCALL_SYMBOL_PREFIX",
    "UNRESOLVED_SYSCALL_NUMBER",
    "ResolvedArchitecture",
    "parse_syscall_number",
    "resolve_architecture",
    "resolve_architectures",
]
