from .architecture import Architecture, ArchitectureName
from .registry import ArchitectureRegistry, default_architecture_registry

__all__ = [
    "Architecture",
    "ArchitectureName",
    "ArchitectureRegistry",
    "default_architecture_registry",
]
