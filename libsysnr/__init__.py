"""Syscall numbers generator library.

Resolves kernel syscall numbers for configured architectures and renders generated tables.
"""

from .generator import GenerationResult, generate_syscalls_numbers

__all__ = [
    "GenerationResult",
    "generate_syscalls_numbers",
]
