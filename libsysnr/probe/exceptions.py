from __future__ import annotations

from pathlib import Path

from libsysnr.exceptions import SysnrError


class ProbeError(SysnrError):
    """Probe primitive itself failed (not an single symbol)."""

    def __init__(self, *args: object, kernel_header_arch: str) -> None:
        super().__init__(*args)
        self.kernel_header_arch = kernel_header_arch


class ProbeCompilerNotFoundError(ProbeError):
    def __init__(self, *args: object, kernel_header_arch: str, executable: str) -> None:
        super().__init__(*args, kernel_header_arch=kernel_header_arch)
        self.executable = executable

    def __repr__(self) -> str:
        return f"""C compiler `{self.executable}` was not found!

Probing `{self.kernel_header_arch}` kernel headers requires an C compiler to be installed.
Did you forgot to install it or pass proper compiler path?

{self.generic_error_name}"""


class KernelSourceNotFoundError(ProbeError):
    def __init__(self, *args: object, kernel_header_arch: str, path: Path) -> None:
        super().__init__(*args, kernel_header_arch=kernel_header_arch)
        self.path = path

    def __repr__(self) -> str:
        return f"""Kernel source tree for `{self.kernel_header_arch}` was not found at `{self.path}`!

Expected directory containing `arch/{self.kernel_header_arch}/include`.

{self.generic_error_name}"""


class ProbeCompilationError(ProbeError):
    def __init__(
        self,
        *args: object,
        kernel_header_arch: str,
        command: list[str],
        stderr: str,
    ) -> None:
        super().__init__(*args, kernel_header_arch=kernel_header_arch)
        self.command = command
        self.stderr = stderr

    def __repr__(self) -> str:
        return f"""Failed to compile probe program against `{self.kernel_header_arch}` kernel headers!

Command: `{" ".join(self.command)}`
{self.stderr.strip()}

{self.generic_error_name}"""


class ProbeExecutionError(ProbeError):
    def __init__(
        self,
        *args: object,
        kernel_header_arch: str,
        reason: str,
    ) -> None:
        super().__init__(*args, kernel_header_arch=kernel_header_arch)
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Probe program for `{self.kernel_header_arch}` kernel headers failed to execute!

{self.reason}

{self.generic_error_name}"""


class ProbeResultCountError(ProbeError):
    def __init__(
        self,
        *args: object,
        kernel_header_arch: str,
        expected: int,
        got: int,
    ) -> None:
        super().__init__(*args, kernel_header_arch=kernel_header_arch)
        self.expected = expected
        self.got = got

    def __repr__(self) -> str:
        return f"""Probe for `{self.kernel_header_arch}` kernel headers returned {self.got} values, but {self.expected} symbols was requested!

Probe output must contain exactly one value per requested symbol.

{self.generic_error_name}"""


class ProbeUnresolvedSymbolError(ProbeError):
    def __init__(self, *args: object, kernel_header_arch: str, symbol: str) -> None:
        super().__init__(*args, kernel_header_arch=kernel_header_arch)
        self.symbol = symbol

    def __repr__(self) -> str:
        return f"""Symbol `{self.symbol}` is not defined for `{self.kernel_header_arch}` and has no default value!

{self.generic_error_name}"""


class ProbeTableFormatError(SysnrError):
    def __init__(self, *args: object, path: Path, reason: str) -> None:
        super().__init__(*args)
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to load probe table from `{self.path}`!

{self.reason}
Expected JSON object in form of `{{"x86": {{"__NR_read": 0, ...}}, ...}}`.

{self.generic_error_name}"""
