from pathlib import Path

from libsysnr.exceptions import SysnrError


class SyntheticCallRangeError(SysnrError):
    def __init__(self, *args: object, name: str, nr: int) -> None:
        super().__init__(*args)
        self.name = name
        self.nr = nr

    def __repr__(self) -> str:
        return f"""Synthetic call '{self.name}' has number {self.nr} that may collide with kernel syscall numbers!

Synthetic call numbers must be above synthetic base, so they never overlap real syscalls.

{self.generic_error_name}"""


class SyscallListSyntaxError(SysnrError):
    def __init__(self, *args: object, path: Path, line: int, text: str) -> None:
        super().__init__(*args)
        self.path = path
        self.line = line
        self.text = text

    def __repr__(self) -> str:
        return f"""Malformed syscall definition at {self.path}:{self.line}!

Got `{self.text}`
Expected either `name` or `name call_name` on each line.

{self.generic_error_name}"""


class SyscallListReadError(SysnrError):
    def __init__(self, *args: object, path: Path, reason: str) -> None:
        super().__init__(*args)
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to read syscall list from `{self.path}`!

{self.reason}
Syscall list must be an UTF-8 text file.

{self.generic_error_name}"""
