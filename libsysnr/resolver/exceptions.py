from libsysnr.exceptions import SysnrError
from libsysnr.probe.exceptions import ProbeError


class MalformedSyscallNumberError(SysnrError):
    def __init__(
        self,
        *args: object,
        value: str,
        symbol: str,
        architecture: str,
    ) -> None:
        super().__init__(*args)
        self.value = value
        self.symbol = symbol
        self.architecture = architecture

    def __repr__(self) -> str:
        return f"""Failed to parse syscall number '{self.value}' of `{self.symbol}` for architecture '{self.architecture}'!

Expected an decimal unsigned 64-bit integer from probe.
This means probe pipeline itself is broken, not that syscall is missing.

{self.generic_error_name}"""


class ProbeFailureError(SysnrError):
    def __init__(self, *args: object, architecture: str, probe: str, error: ProbeError) -> None:
        super().__init__(*args)
        self.architecture = architecture
        self.probe = probe
        self.error = error

    def __repr__(self) -> str:
        return f"""Unable to fetch syscall numbers for architecture '{self.architecture}' using `{self.probe}` probe driver!

{self.error!r}"""


class SyscallNumbersCountError(SysnrError):
    def __init__(
        self,
        *args: object,
        architecture: str,
        expected: int,
        got: int,
    ) -> None:
        super().__init__(*args)
        self.architecture = architecture
        self.expected = expected
        self.got = got

    def __repr__(self) -> str:
        return f"""Resolved {self.got} syscall numbers for architecture '{self.architecture}', but there is {self.expected} syscalls!

Each syscall must have exactly one number.

{self.generic_error_name}"""
