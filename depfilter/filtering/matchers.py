"""
Target Matchers — Select Dependencies by Target.

A target matcher answers "is this edge's target one we asked about?".
At most one is active per filter: a regex over the target class name,
or a set of target package names.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from depfilter.models.location import Dependency


class TargetMatcher(Protocol):
    """Predicate over the target side of a dependency."""

    def accepts(self, dependency: Dependency) -> bool: ...


@dataclass(frozen=True, slots=True)
class RegexTargetMatcher:
    """Accepts edges whose target class name fully matches the pattern."""

    pattern: re.Pattern[str]

    def accepts(self, dependency: Dependency) -> bool:
        return self.pattern.fullmatch(dependency.target.class_name) is not None


@dataclass(frozen=True, slots=True)
class PackageTargetMatcher:
    """
    Accepts edges whose target package is one of the given packages.

    With match_subpackages, "a.b" also matches "a.b.c" (but not "a.bc").
    """

    packages: frozenset[str]
    match_subpackages: bool = False

    def __post_init__(self) -> None:
        """Reject empty package names."""
        if "" in self.packages:
            raise ValueError("Package name must not be empty")

    @classmethod
    def of(cls, packages: Iterable[str], match_subpackages: bool = False) -> "PackageTargetMatcher":
        return cls(packages=frozenset(packages), match_subpackages=match_subpackages)

    def accepts(self, dependency: Dependency) -> bool:
        pn = dependency.target.package_name
        if pn in self.packages:
            return True
        if self.match_subpackages:
            return any(pn.startswith(p + ".") for p in self.packages)
        return False
