from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from .exceptions import SyntheticCallRangeError

if TYPE_CHECKING:
    from .syscall import Syscall

# Synthetic numbers are placed far above any real kernel syscall number
SYNTHETIC_CALL_NUMBER_BASE = 1_000_000

DEFAULT_SYNTHETIC_CALLS: Mapping[str, int] = {
    "syz_open_dev": SYNTHETIC_CALL_NUMBER_BASE + 1,
    "syz_open_pts": SYNTHETIC_CALL_NUMBER_BASE + 2,
    "syz_fuse_mount": SYNTHETIC_CALL_NUMBER_BASE + 3,
    "syz_fuseblk_mount": SYNTHETIC_CALL_NUMBER_BASE + 4,
}


class SyntheticCallTable(Mapping[str, int]):
    """Calls that has no kernel syscall number, with manually assigned stable numbers.

    Immutable after construction.
    """

    __slots__ = ("_calls",)

    def __init__(self, calls: Mapping[str, int] = DEFAULT_SYNTHETIC_CALLS) -> None:
        for name, nr in calls.items():
            if nr <= SYNTHETIC_CALL_NUMBER_BASE:
                raise SyntheticCallRangeError(name=name, nr=nr)
        self._calls: dict[str, int] = dict(calls)

    def __getitem__(self, name: str) -> int:
        return self._calls[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._calls)

    def __len__(self) -> int:
        return len(self._calls)

    def __repr__(self) -> str:
        return f"SyntheticCallTable({dict(self._calls)!r})"

    def sorted(self) -> list[tuple[str, int]]:
        """Entries ordered by name, for reproducible output."""
        return sorted(self._calls.items(), key=lambda x: x[0])

    def number_for(self, syscall: Syscall) -> int | None:
        """Get synthetic number for given syscall by its canonical name, falling back to kernel name."""
        nr = self._calls.get(syscall.name)
        if nr is None:
            nr = self._calls.get(syscall.call_name)
        return nr
