"""
Dependency filtering for class-level dependency analysis.

Edge-level filtering runs while class files are parsed.
Archive-level filtering runs after archive/module resolution.
The include matcher decides the eager scan scope.
"""

from depfilter.filtering.builder import DEFAULT_FILTER, FilterBuilder
from depfilter.filtering.dependency_filter import DependencyFilter
from depfilter.filtering.matchers import (
    PackageTargetMatcher,
    RegexTargetMatcher,
    TargetMatcher,
)
from depfilter.filtering.protocols import ArchiveFilter, EdgeFilter

__all__ = [
    "DEFAULT_FILTER",
    "ArchiveFilter",
    "DependencyFilter",
    "EdgeFilter",
    "FilterBuilder",
    "PackageTargetMatcher",
    "RegexTargetMatcher",
    "TargetMatcher",
]
