from depfilter.analysis.passes import (
    ArchiveResolver,
    FilterPassMetrics,
    filter_dependencies,
    filter_resolved,
    run_two_stage,
    select_roots,
)

__all__ = [
    "ArchiveResolver",
    "FilterPassMetrics",
    "filter_dependencies",
    "filter_resolved",
    "run_two_stage",
    "select_roots",
]
