from __future__ import annotations

from typing import TYPE_CHECKING, get_args

from .architecture import Architecture, ArchitectureName
from .exceptions import DuplicateArchitectureError, UnknownArchitectureError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class ArchitectureRegistry:
    """Ordered immutable set of architectures to generate syscall numbers for.

    Order of registry is order of blocks within generated header.
    """

    __slots__ = ("_architectures",)

    _architectures: tuple[Architecture, ...]

    def __init__(self, architectures: Iterable[Architecture]) -> None:
        architectures = tuple(architectures)
        seen: set[str] = set()
        for architecture in architectures:
            if architecture.name in seen:
                raise DuplicateArchitectureError(name=architecture.name)
            seen.add(architecture.name)
        self._architectures = architectures

    def __iter__(self) -> Iterator[Architecture]:
        return iter(self._architectures)

    def __len__(self) -> int:
        return len(self._architectures)

    def __contains__(self, name: object) -> bool:
        return any(a.name == name for a in self._architectures)

    def __repr__(self) -> str:
        return f"ArchitectureRegistry({', '.join(self.names)})"

    @property
    def names(self) -> list[str]:
        return [a.name for a in self._architectures]

    def get(self, name: str) -> Architecture:
        for architecture in self._architectures:
            if architecture.name == name:
                return architecture
        raise UnknownArchitectureError(name=name, names_available=self.names)

    def select(self, names: Iterable[str]) -> ArchitectureRegistry:
        """Get registry with only given architectures, preserving order of that registry."""
        wanted = set(names)
        for name in wanted:
            self.get(name)  # Validate early
        return ArchitectureRegistry(a for a in self._architectures if a.name in wanted)


def default_architecture_registry() -> ArchitectureRegistry:
    """Registry of all supported architectures in conventional order."""
    return ArchitectureRegistry(
        Architecture.from_name(name) for name in get_args(ArchitectureName.__value__)
    )
