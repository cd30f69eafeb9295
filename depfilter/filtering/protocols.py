"""
Filter Capabilities.

The edge-level and archive-level stages are separate capabilities.
One filter value implements both; the driver decides which to call
and when.
"""

from typing import Protocol, runtime_checkable

from depfilter.models.archive import Archive
from depfilter.models.location import Dependency, Location


@runtime_checkable
class EdgeFilter(Protocol):
    """Stage one: decided per edge while class files are parsed."""

    def accepts(self, dependency: Dependency) -> bool: ...


@runtime_checkable
class ArchiveFilter(Protocol):
    """Stage two: decided once archive and module membership is known."""

    def accepts_archive(
        self,
        origin: Location,
        origin_archive: Archive,
        target: Location,
        target_archive: Archive,
    ) -> bool: ...
