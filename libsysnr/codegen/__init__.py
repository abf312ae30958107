"""Emitters of generated artifacts from resolved syscall numbers."""

from .arch_table import arch_table_artifact_path, emit_arch_table, render_arch_table
from .executor_header import (
    EXECUTOR_HEADER_ARTIFACT_PATH,
    emit_executor_header,
    render_executor_header,
)
from .render_data import build_syscalls_data
from .writer import is_artifact_stale, write_artifact

__all__ = [
    "EXECUTOR_HEADER_ARTIFACT_PATH",
    "arch_table_artifact_path",
    "build_syscalls_data",
    "emit_arch_table",
    "emit_executor_header",
    "is_artifact_stale",
    "render_arch_table",
    "render_executor_header",
    "write_artifact",
]
