"""Generation pass: resolve syscall numbers for every architecture and write generated artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from libsysnr.codegen import (
    EXECUTOR_HEADER_ARTIFACT_PATH,
    arch_table_artifact_path,
    is_artifact_stale,
    render_arch_table,
    render_executor_header,
    write_artifact,
)
from libsysnr.codegen.exceptions import StaleArtifactError
from libsysnr.resolver import ResolvedArchitecture, resolve_architectures

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from libsysnr.probe import ProbeDriverProtocol
    from libsysnr.syscalls import Syscall, SyntheticCallTable
    from libsysnr.targets import ArchitectureRegistry


@dataclass(slots=True)
class GenerationResult:
    resolved_architectures: list[ResolvedArchitecture]

    # Artifacts in order of rendering, relative to output root
    artifacts: dict[Path, str] = field(default_factory=dict)

    # Artifacts which content was changed on disk (or would be, when checking)
    changed: list[Path] = field(default_factory=list)


def generate_syscalls_numbers(  # noqa: PLR0913
    syscalls: Sequence[Syscall],
    *,
    registry: ArchitectureRegistry,
    synthetic: SyntheticCallTable,
    probe: ProbeDriverProtocol,
    output_root: Path,
    max_workers: int = 1,
    check: bool = False,
    on_resolved: Callable[[ResolvedArchitecture], None] | None = None,
) -> GenerationResult:
    """Resolve numbers of all syscalls for all architectures in registry and write artifacts.

    All architectures are resolved before anything is written,
    so failure on any of them leaves output untouched.
    With `check` nothing is written, instead stale artifacts are reported as an error.
    """
    resolved_architectures = resolve_architectures(
        registry,
        syscalls,
        synthetic=synthetic,
        probe=probe,
        max_workers=max_workers,
        on_resolved=on_resolved,
    )

    result = GenerationResult(resolved_architectures=resolved_architectures)
    for resolved in resolved_architectures:
        path = arch_table_artifact_path(resolved.architecture.name)
        result.artifacts[path] = render_arch_table(resolved, syscalls)
    result.artifacts[EXECUTOR_HEADER_ARTIFACT_PATH] = render_executor_header(
        resolved_architectures,
        syscalls,
        synthetic,
    )

    for path, content in result.artifacts.items():
        if is_artifact_stale(output_root / path, content):
            result.changed.append(path)

    if check:
        if result.changed:
            raise StaleArtifactError(paths=result.changed)
        return result

    for path, content in result.artifacts.items():
        write_artifact(output_root / path, content)
    return result
