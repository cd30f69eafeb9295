"""
Dependency Filter — Frozen Policy for Reporting and Scan Scope.

Combines the configured criteria into one immutable value with three
independent capabilities:

1. Edge-level filter (accepts): applied while class files are parsed.
   Needs only the two locations. Rejected edges are never stored.
2. Archive-level filter (accepts_archive): applied during aggregation,
   once the containing archive and module of every class is known.
3. Include matcher (matches_class, matches_archive, include_module):
   decides which classes and archives are eagerly scanned.

INVARIANTS:
- Built once by FilterBuilder, never mutated
- Every predicate is a pure function of its arguments and the fields
- Predicates are total: they return False, they do not raise
"""

import re
from dataclasses import dataclass

from depfilter.config import MODULE_DESCRIPTOR_ENTRY
from depfilter.filtering.matchers import TargetMatcher
from depfilter.models.archive import Archive
from depfilter.models.location import SEPARATOR, Dependency, Location


@dataclass(frozen=True, slots=True)
class DependencyFilter:
    """
    Immutable filter configuration.

    Attributes:
        target_matcher: Regex or package-set matcher over targets (or None)
        exclude_pattern: Target packages matching this are dropped
        filter_same_package: Drop edges within one package
        filter_same_archive: Drop edges within one archive
        find_jdk_internals: Keep only edges onto non-exported platform packages
        include_pattern: Class names to eagerly scan (None means all)
        include_system_modules: System modules to analyze despite the default
        requires: Module names whose packages seeded the target matcher
    """

    target_matcher: TargetMatcher | None = None
    exclude_pattern: re.Pattern[str] | None = None
    filter_same_package: bool = False
    filter_same_archive: bool = False
    find_jdk_internals: bool = False
    include_pattern: re.Pattern[str] | None = None
    include_system_modules: re.Pattern[str] | None = None
    requires: frozenset[str] = frozenset()

    # ----- Edge-level filter -----

    def accepts(self, dependency: Dependency) -> bool:
        """
        Decide an edge from its locations alone.

        Order (first match wins):
        1. Self reference → reject
        2. Same package (if enabled) → reject
        3. Target package matches exclude pattern → reject
        4. Target matcher result, or accept when none is configured
        """
        origin, target = dependency.origin, dependency.target
        if origin == target:
            return False

        pn = target.package_name
        if self.filter_same_package and origin.package_name == pn:
            return False

        if self.exclude_pattern is not None and self.exclude_pattern.fullmatch(pn):
            return False

        if self.target_matcher is None:
            return True
        return self.target_matcher.accepts(dependency)

    # ----- Archive-level filter -----

    def accepts_archive(
        self,
        origin: Location,  # noqa: ARG002
        origin_archive: Archive,
        target: Location,
        target_archive: Archive,
    ) -> bool:
        """
        Decide an edge from the archives its endpoints belong to.

        JDK-internals mode wins over same-archive filtering when both are set.
        """
        if self.find_jdk_internals:
            # Only references from outside onto a platform module's
            # non-exported packages
            module = target_archive.module
            return (
                origin_archive is not target_archive
                and module.is_jdk
                and not module.is_exported(target.package_name)
            )
        if self.filter_same_archive:
            return origin_archive is not target_archive
        return True

    # ----- Include matcher -----

    def matches_class(self, class_name: str) -> bool:
        """Check a dotted class name against the include pattern."""
        if self.include_pattern is None:
            return True
        return self.include_pattern.fullmatch(class_name) is not None

    def matches_archive(self, archive: Archive) -> bool:
        """
        Check if an archive should be eagerly processed.

        With an include pattern, any member entry must match it. Without one,
        every archive is of interest as soon as any target filter exists.
        """
        if self.include_pattern is not None:
            return any(
                self.matches_class(name)
                for name in (e.replace(SEPARATOR, ".") for e in archive.entries)
                if name != MODULE_DESCRIPTOR_ENTRY
            )
        return self.has_target_filter

    def include_module(self, archive: Archive) -> bool:
        """System modules are skipped unless the system-module pattern names them."""
        module = archive.module
        if not module.is_system:
            return True
        return (
            self.include_system_modules is not None
            and self.include_system_modules.fullmatch(module.name) is not None
        )

    # ----- Queries -----

    @property
    def has_target_filter(self) -> bool:
        return self.target_matcher is not None

    @property
    def has_include_pattern(self) -> bool:
        return self.include_pattern is not None or self.include_system_modules is not None

    @property
    def requires_filter(self) -> frozenset[str]:
        return self.requires

    def describe(self) -> str:
        """Multi-line summary for logs and diagnostics."""
        include = self.include_pattern.pattern if self.include_pattern else None
        return (
            f"include pattern: {include}\n"
            f"filter same archive: {self.filter_same_archive}\n"
            f"filter same package: {self.filter_same_package}\n"
            f"requires: {sorted(self.requires)}\n"
        )
