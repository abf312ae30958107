from __future__ import annotations

from typing import TYPE_CHECKING

from libsysnr.exceptions import SysnrError

if TYPE_CHECKING:
    from collections.abc import Iterable


class EmptyArchitectureMacrosError(SysnrError):
    def __init__(self, *args: object, architecture: str) -> None:
        super().__init__(*args)
        self.architecture = architecture

    def __repr__(self) -> str:
        return f"""Architecture '{self.architecture}' has no C selector macros!

Expected at least one preprocessor macro that selects that architecture,
otherwise its block in generated header can never be compiled.

{self.generic_error_name}"""


class UnknownArchitectureError(SysnrError):
    def __init__(
        self,
        *args: object,
        name: str,
        names_available: Iterable[str],
    ) -> None:
        super().__init__(*args)
        self.name = name
        self.names_available = names_available

    def __repr__(self) -> str:
        return f"""Unknown architecture '{self.name}'!

Available architectures: {", ".join(self.names_available) or "..."}

{self.generic_error_name}"""


class DuplicateArchitectureError(SysnrError):
    def __init__(self, *args: object, name: str) -> None:
        super().__init__(*args)
        self.name = name

    def __repr__(self) -> str:
        return f"""Architecture '{self.name}' is registered more than once!

Each architecture owns exactly one generated table, so names must be unique.

{self.generic_error_name}"""
