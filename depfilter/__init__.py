"""Dependency filtering engine for class-level dependency analysis."""

from depfilter.filtering import DEFAULT_FILTER, DependencyFilter, FilterBuilder
from depfilter.options import FilterOptions, build_filter

__all__ = [
    "DEFAULT_FILTER",
    "DependencyFilter",
    "FilterBuilder",
    "FilterOptions",
    "build_filter",
]
