"""
Filter Builder — Accumulate Criteria, Produce One Frozen Filter.

Setters only record; every decision is made in build():
- A regex target matcher takes precedence over the package set
- Required system modules install the system-module include default,
  unless an explicit include_system_modules pattern was given (in any order)
"""

import logging
import re
from collections.abc import Iterable

from depfilter.config import SYSTEM_MODULE_PATTERN
from depfilter.filtering.dependency_filter import DependencyFilter
from depfilter.filtering.matchers import (
    PackageTargetMatcher,
    RegexTargetMatcher,
    TargetMatcher,
)

logger = logging.getLogger(__name__)


class FilterBuilder:
    """
    Fluent accumulator for DependencyFilter.

    Usage:
        dep_filter = (
            FilterBuilder()
            .packages({"com.example.api"})
            .filter_same(same_package=True, same_archive=False)
            .build()
        )
    """

    def __init__(self) -> None:
        self._regex: re.Pattern[str] | None = None
        self._exclude: re.Pattern[str] | None = None
        self._filter_same_package = False
        self._filter_same_archive = False
        self._find_jdk_internals = False
        self._include_pattern: re.Pattern[str] | None = None
        self._include_system_modules: re.Pattern[str] | None = None
        self._match_subpackages = False
        self._requires: set[str] = set()
        self._target_packages: set[str] = set()
        # Names checked against SYSTEM_MODULE_PATTERN at build time
        self._system_candidates: list[str] = []

    def packages(self, package_names: Iterable[str] | None) -> "FilterBuilder":
        if package_names:
            self._target_packages.update(package_names)
        return self

    def match_subpackages(self, value: bool) -> "FilterBuilder":
        self._match_subpackages = value
        return self

    def regex(self, pattern: re.Pattern[str] | None) -> "FilterBuilder":
        self._regex = pattern
        return self

    def exclude(self, pattern: re.Pattern[str] | None) -> "FilterBuilder":
        """Drop edges whose target package matches pattern."""
        self._exclude = pattern
        return self

    def filter_same(self, same_package: bool, same_archive: bool) -> "FilterBuilder":
        self._filter_same_package = same_package
        self._filter_same_archive = same_archive
        return self

    def filter_default(self) -> "FilterBuilder":
        """Drop both same-package and same-archive edges."""
        return self.filter_same(same_package=True, same_archive=True)

    def requires(self, name: str, package_names: Iterable[str] | None) -> "FilterBuilder":
        """Target the packages of a required module."""
        self._requires.add(name)
        self.packages(package_names)
        return self.include_if_system_module(name)

    def find_jdk_internals(self, value: bool) -> "FilterBuilder":
        self._find_jdk_internals = value
        return self

    def include_pattern(self, pattern: re.Pattern[str] | None) -> "FilterBuilder":
        self._include_pattern = pattern
        return self

    def include_system_modules(self, pattern: re.Pattern[str] | None) -> "FilterBuilder":
        self._include_system_modules = pattern
        return self

    def include_if_system_module(self, name: str) -> "FilterBuilder":
        """Analyze system modules if name is one, unless a pattern is set explicitly."""
        self._system_candidates.append(name)
        return self

    def _resolve_system_modules(self) -> re.Pattern[str] | None:
        if self._include_system_modules is not None:
            return self._include_system_modules
        if any(SYSTEM_MODULE_PATTERN.fullmatch(n) for n in self._system_candidates):
            return SYSTEM_MODULE_PATTERN
        return None

    def _resolve_target_matcher(self) -> TargetMatcher | None:
        if self._regex is not None:
            if self._target_packages:
                logger.debug(
                    "Regex target filter overrides %d target packages",
                    len(self._target_packages),
                )
            return RegexTargetMatcher(self._regex)
        if self._target_packages:
            return PackageTargetMatcher.of(self._target_packages, self._match_subpackages)
        return None

    def build(self) -> DependencyFilter:
        """Produce the frozen filter. Does not modify the builder."""
        return DependencyFilter(
            target_matcher=self._resolve_target_matcher(),
            exclude_pattern=self._exclude,
            filter_same_package=self._filter_same_package,
            filter_same_archive=self._filter_same_archive,
            find_jdk_internals=self._find_jdk_internals,
            include_pattern=self._include_pattern,
            include_system_modules=self._resolve_system_modules(),
            requires=frozenset(self._requires),
        )


DEFAULT_FILTER = FilterBuilder().filter_default().build()
