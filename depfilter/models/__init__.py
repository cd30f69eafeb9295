from depfilter.models.archive import Archive, Module
from depfilter.models.errors import (
    DependencyFilterError,
    UnknownModuleError,
    UnresolvedArchiveError,
)
from depfilter.models.location import Dependency, Location

__all__ = [
    "Archive",
    "Dependency",
    "DependencyFilterError",
    "Location",
    "Module",
    "UnknownModuleError",
    "UnresolvedArchiveError",
]
