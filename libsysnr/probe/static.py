from __future__ import annotations

import json
from typing import TYPE_CHECKING

from libsysnr.probe._driver_protocol import ProbeDriverProtocol

from .exceptions import ProbeTableFormatError, ProbeUnresolvedSymbolError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

# Probe values are rendered as unsigned 64-bit (`%llu`)
UINT64_MODULO = 1 << 64


class StaticProbeDriver(ProbeDriverProtocol):
    """Driver that resolves symbols from recorded table of values, not from kernel headers.

    Table is keyed by kernel `arch/` subdirectory, then by symbol.
    Raw string values are passed as-is which allows to replay broken probe output.
    """

    def __init__(self, tables: Mapping[str, Mapping[str, int | str]]) -> None:
        self.tables = {arch: dict(t) for arch, t in tables.items()}
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    @property
    def name(self) -> str:
        return "static"

    @classmethod
    def is_installed(cls) -> bool:
        return True

    @classmethod
    def from_json_file(cls, path: Path) -> StaticProbeDriver:
        """Load table in form of `{"x86": {"__NR_read": 0, ...}, ...}`."""
        try:
            with path.open("r", encoding="utf-8") as f:
                tables = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ProbeTableFormatError(path=path, reason=str(e)) from e

        _validate_probe_table(path, tables)
        return cls(tables)

    def fetch_values(
        self,
        kernel_header_arch: str,
        symbols: Sequence[str],
        includes: Sequence[str],
        defaults: Mapping[str, int],
    ) -> list[str]:
        self.calls.append((kernel_header_arch, tuple(symbols)))
        table = self.tables.get(kernel_header_arch, {})

        values: list[str] = []
        for symbol in symbols:
            if symbol in table:
                value = table[symbol]
            elif symbol in defaults:
                value = defaults[symbol]
            else:
                raise ProbeUnresolvedSymbolError(
                    kernel_header_arch=kernel_header_arch,
                    symbol=symbol,
                )
            values.append(value if isinstance(value, str) else str(value % UINT64_MODULO))
        return values


def _validate_probe_table(path: Path, tables: object) -> None:
    if not isinstance(tables, dict):
        raise ProbeTableFormatError(
            path=path,
            reason=f"Top level value is {type(tables).__name__}, expected an object.",
        )

    for arch, table in tables.items():
        if not isinstance(table, dict):
            raise ProbeTableFormatError(
                path=path,
                reason=f"Table for `{arch}` is {type(table).__name__}, expected an object.",
            )
        for symbol, value in table.items():
            # bool is an int subclass but `true` is never an syscall number
            if isinstance(value, bool) or not isinstance(value, int | str):
                raise ProbeTableFormatError(
                    path=path,
                    reason=f"Value of `{symbol}` for `{arch}` is {json.dumps(value)}, expected an integer or string.",
                )
