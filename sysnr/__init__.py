"""Syscall numbers generator toolchain.

Provides CLI over `libsysnr` library.
"""

from libsysnr import GenerationResult, generate_syscalls_numbers

__all__ = [
    "GenerationResult",
    "generate_syscalls_numbers",
]
