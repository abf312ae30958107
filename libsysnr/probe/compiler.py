from __future__ import annotations

from pathlib import Path
from shutil import which
from subprocess import TimeoutExpired, run
from tempfile import TemporaryDirectory
from typing import TYPE_CHECKING, Final

from libsysnr.probe._driver_protocol import ProbeDriverProtocol

from .exceptions import (
    KernelSourceNotFoundError,
    ProbeCompilationError,
    ProbeCompilerNotFoundError,
    ProbeExecutionError,
    ProbeResultCountError,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence


class CompilerProbeDriver(ProbeDriverProtocol):
    """Driver that compiles and runs small C program against kernel headers to read values of symbols.

    Program is compiled for host, so only header-level (preprocessor) values are architecture specific.
    """

    # This is used as default compiler executable
    CC_DEFAULT_EXECUTABLE: Final[str] = "cc"

    # Timeout for single compiler or probe process
    DEFAULT_TIMEOUT: Final[float] = 60.0

    def __init__(  # noqa: PLR0913
        self,
        linux_source: Path,
        *,
        executable: str = CC_DEFAULT_EXECUTABLE,
        timeout: float = DEFAULT_TIMEOUT,
        arch_defines: Mapping[str, Sequence[str]] | None = None,
        flags: Sequence[str] = (),
        on_shell_call: Callable[[list[str]], None] | None = None,
    ) -> None:
        """Construct driver.

        :param linux_source: Root of kernel source tree
        :param executable: C compiler to use
        :param timeout: Timeout for each spawned process
        :param arch_defines: Macros to predefine when probing kernel `arch/` subdirectory (e.g `__powerpc64__`)
        :param flags: Any additional compiler flags
        :param on_shell_call: Called with command before each process is spawned e.g for logging
        """
        self.linux_source = linux_source
        self.executable = executable
        self.timeout = timeout
        self.arch_defines = arch_defines or {}
        self.flags = flags
        self.on_shell_call = on_shell_call

    @property
    def name(self) -> str:
        return f"compiler{{{self.executable}}}"

    @classmethod
    def is_installed(cls, *, executable: str = CC_DEFAULT_EXECUTABLE) -> bool:
        return which(executable) is not None

    def fetch_values(
        self,
        kernel_header_arch: str,
        symbols: Sequence[str],
        includes: Sequence[str],
        defaults: Mapping[str, int],
    ) -> list[str]:
        if not self.is_installed(executable=self.executable):
            raise ProbeCompilerNotFoundError(
                kernel_header_arch=kernel_header_arch,
                executable=self.executable,
            )
        arch_include_directory = self.linux_source / "arch" / kernel_header_arch / "include"
        if not arch_include_directory.is_dir():
            raise KernelSourceNotFoundError(
                kernel_header_arch=kernel_header_arch,
                path=self.linux_source,
            )

        source = compose_probe_source(symbols, includes, defaults)
        with TemporaryDirectory(prefix="sysnr-probe-") as directory:
            binary = Path(directory) / "probe"
            self._compile(kernel_header_arch, source, binary)
            stdout = self._execute(kernel_header_arch, binary)

        values = stdout.split()
        if len(values) != len(symbols):
            raise ProbeResultCountError(
                kernel_header_arch=kernel_header_arch,
                expected=len(symbols),
                got=len(values),
            )
        return values

    def _compile(self, kernel_header_arch: str, source: str, binary: Path) -> None:
        command = self._compose_compiler_command(kernel_header_arch, binary)
        if self.on_shell_call:
            self.on_shell_call(command)
        try:
            process = run(
                command,
                input=source.encode(),
                check=False,
                capture_output=True,
                timeout=self.timeout,
                shell=False,
            )
        except TimeoutExpired as e:
            raise ProbeCompilationError(
                kernel_header_arch=kernel_header_arch,
                command=command,
                stderr=f"Compiler timed out after {e.timeout} seconds",
            ) from e

        if process.returncode != 0:
            raise ProbeCompilationError(
                kernel_header_arch=kernel_header_arch,
                command=command,
                stderr=process.stderr.decode(errors="replace"),
            )

    def _execute(self, kernel_header_arch: str, binary: Path) -> str:
        command = [str(binary)]
        if self.on_shell_call:
            self.on_shell_call(command)
        try:
            process = run(
                command,
                check=False,
                capture_output=True,
                timeout=self.timeout,
                shell=False,
            )
        except TimeoutExpired as e:
            raise ProbeExecutionError(
                kernel_header_arch=kernel_header_arch,
                reason=f"Probe timed out after {e.timeout} seconds",
            ) from e
        except OSError as e:
            raise ProbeExecutionError(
                kernel_header_arch=kernel_header_arch,
                reason=f"Unable to start probe: {e}",
            ) from e

        if process.returncode != 0:
            raise ProbeExecutionError(
                kernel_header_arch=kernel_header_arch,
                reason=f"Probe finished with exit code {process.returncode}",
            )
        return process.stdout.decode()

    def _compose_compiler_command(self, kernel_header_arch: str, binary: Path) -> list[str]:
        """Construct compiler command to build probe program from stdin into given binary."""
        linux = self.linux_source
        arch = linux / "arch" / kernel_header_arch

        # fmt: off
        command = [
            self.executable,
            "-x", "c", "-", # Read program from stdin
            "-o", str(binary),
            "-fmessage-length=0",
            "-w", # Kernel headers are not warning-free for userspace
            "-I", str(arch / "include"),
            "-I", str(arch / "include" / "generated" / "uapi"),
            "-I", str(arch / "include" / "generated"),
            "-I", str(linux / "include"),
            "-I", str(arch / "include" / "uapi"),
            "-I", str(linux / "include" / "uapi"),
            "-I", str(linux / "include" / "generated" / "uapi"),
        ]
        # fmt: on

        kconfig = linux / "include" / "linux" / "kconfig.h"
        if kconfig.is_file():
            command.extend(("-include", str(kconfig)))

        command.extend(f"-D{macro}" for macro in self.arch_defines.get(kernel_header_arch, ()))
        command.extend(self.flags)
        return command


def compose_probe_source(
    symbols: Sequence[str],
    includes: Sequence[str],
    defaults: Mapping[str, int],
) -> str:
    """Construct C program that prints values of symbols as unsigned integers, separated by spaces.

    Symbols which has defaults are defined with them unless headers define them.
    """
    lines = [f"#include <{include}>" for include in includes]
    lines.append("")
    for symbol in symbols:
        if symbol not in defaults:
            continue
        lines.append(f"#ifndef {symbol}")
        lines.append(f"#define {symbol} {defaults[symbol]}")
        lines.append("#endif")

    # libc headers are not included as they conflict with kernel ones
    lines.append("")
    lines.append("int printf(const char *format, ...);")
    lines.append("")
    lines.append("unsigned long long vals[] = {")
    lines.extend(f"\t(unsigned long long)({symbol})," for symbol in symbols)
    lines.append("};")
    lines.append("")
    lines.append("int main(void) {")
    lines.append("\tfor (unsigned long i = 0; i < sizeof(vals) / sizeof(vals[0]); i++) {")
    lines.append('\t\tprintf("%llu ", vals[i]);')
    lines.append("\t}")
    lines.append("\treturn 0;")
    lines.append("}")
    lines.append("")
    return "\n".join(lines)
