"""
Two-Stage Filtering Driver.

Stage one runs the edge-level filter over raw edges.
Stage two runs the archive-level filter once every endpoint's archive
is resolved. Callers may run either stage alone.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from depfilter.filtering.dependency_filter import DependencyFilter
from depfilter.filtering.protocols import ArchiveFilter, EdgeFilter
from depfilter.models.archive import Archive
from depfilter.models.errors import UnresolvedArchiveError
from depfilter.models.location import Dependency, Location

logger = logging.getLogger(__name__)

# Resolves the archive containing a class; None if unknown
ArchiveResolver = Callable[[Location], Archive | None]


@dataclass
class FilterPassMetrics:
    """Counts recorded per two-stage pass."""

    total_edges: int = 0
    after_edge_filter: int = 0
    after_archive_filter: int = 0


def filter_dependencies(
    edges: Iterable[Dependency],
    edge_filter: EdgeFilter,
) -> list[Dependency]:
    """Stage one: keep edges accepted by the edge-level filter."""
    return [d for d in edges if edge_filter.accepts(d)]


def _resolve(archive_of: ArchiveResolver, location: Location, role: str) -> Archive:
    archive = archive_of(location)
    if archive is None:
        raise UnresolvedArchiveError(location.class_name, role)
    return archive


def filter_resolved(
    edges: Iterable[Dependency],
    archive_filter: ArchiveFilter,
    archive_of: ArchiveResolver,
) -> list[Dependency]:
    """
    Stage two: keep edges accepted by the archive-level filter.

    Raises:
        UnresolvedArchiveError: If either endpoint has no archive
    """
    accepted: list[Dependency] = []
    for d in edges:
        origin_archive = _resolve(archive_of, d.origin, "origin")
        target_archive = _resolve(archive_of, d.target, "target")
        if archive_filter.accepts_archive(d.origin, origin_archive, d.target, target_archive):
            accepted.append(d)
    return accepted


def run_two_stage(
    edges: Iterable[Dependency],
    dep_filter: DependencyFilter,
    archive_of: ArchiveResolver,
) -> tuple[list[Dependency], FilterPassMetrics]:
    """
    Apply both stages in order.

    Returns:
        Tuple of (accepted edges, metrics)
    """
    edges = list(edges)
    metrics = FilterPassMetrics(total_edges=len(edges))

    parsed = filter_dependencies(edges, dep_filter)
    metrics.after_edge_filter = len(parsed)

    accepted = filter_resolved(parsed, dep_filter, archive_of)
    metrics.after_archive_filter = len(accepted)

    logger.info(
        "dependency_filter_pass",
        extra={
            "total": metrics.total_edges,
            "after_edge": metrics.after_edge_filter,
            "after_archive": metrics.after_archive_filter,
        },
    )
    return accepted, metrics


def select_roots(archives: Iterable[Archive], dep_filter: DependencyFilter) -> list[Archive]:
    """Archives to scan eagerly: included modules that match the include criteria."""
    roots = [a for a in archives if dep_filter.include_module(a) and dep_filter.matches_archive(a)]
    logger.debug("Selected %d root archives", len(roots))
    return roots
