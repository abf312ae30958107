from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import SyscallListReadError, SyscallListSyntaxError
from .syscall import Syscall

if TYPE_CHECKING:
    from collections.abc import Iterable

COMMENT_MARKER = "#"


def load_syscalls_from_file(path: Path) -> list[Syscall]:
    """Read ordered syscall list from given file (see `parse_syscalls`)."""
    try:
        with path.open("r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise SyscallListReadError(path=path, reason=str(e)) from e
    return parse_syscalls(lines, path=path)


def parse_syscalls(lines: Iterable[str], *, path: Path = Path("<input>")) -> list[Syscall]:
    """Parse syscall list, one syscall per line: either `name` or `name call_name`.

    Comments and blank lines are skipped, order of lines is order of syscalls.
    """
    syscalls: list[Syscall] = []
    for line_number, line in enumerate(lines, start=1):
        text, *_ = line.split(COMMENT_MARKER, maxsplit=1)
        fields = text.split()
        match fields:
            case []:
                continue
            case [name]:
                syscalls.append(Syscall.from_name(name))
            case [name, call_name]:
                syscalls.append(Syscall(name=name, call_name=call_name))
            case _:
                raise SyscallListSyntaxError(
                    path=path,
                    line=line_number,
                    text=line.rstrip("\n"),
                )
    return syscalls
