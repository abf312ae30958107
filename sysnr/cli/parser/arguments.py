from dataclasses import dataclass
from pathlib import Path
from typing import Literal

type ProbeKind = Literal["compiler", "static"]


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole generation process."""

    syscalls_filepath: Path | None
    output_directory: Path

    # Empty means every known architecture
    architectures: list[str]

    version: bool
    list_architectures: bool
    check: bool

    probe: ProbeKind
    probe_table_filepath: Path | None
    probe_timeout: float
    probe_flags: list[str]
    linux_source: Path | None
    cc_executable: str

    max_thread_workers: int

    verbose: bool
    show_commands: bool
    cli_debug_user_friendly_errors: bool
