"""
Filter Options — Command-Line Style Flags to a Filter.

FilterOptions mirrors the analyzer's flags. Patterns are compiled during
validation, so a malformed regex fails here (pydantic.ValidationError)
before any builder exists.

Filter mode mapping:
- unset   → default policy (same package and same archive)
- none    → keep same-package and same-archive edges
- package → drop same-package edges
- archive → drop same-package and same-archive edges
"""

import logging
import re
from collections.abc import Mapping, Set
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from depfilter.config import settings
from depfilter.filtering.builder import FilterBuilder
from depfilter.filtering.dependency_filter import DependencyFilter
from depfilter.models.errors import UnknownModuleError

logger = logging.getLogger(__name__)

# Module name -> packages the module contains
ModulePackages = Mapping[str, Set[str]]


class FilterMode(str, Enum):
    """Values of the same-package / same-archive filter flag."""

    NONE = "none"
    PACKAGE = "package"
    ARCHIVE = "archive"


class FilterOptions(BaseModel):
    """Primitive filter options assembled once per run."""

    packages: list[str] = Field(default_factory=list, description="Target packages")
    regex: re.Pattern[str] | None = Field(default=None, description="Target class regex")
    filter_regex: re.Pattern[str] | None = Field(
        default=None,
        description="Drop targets whose package matches",
    )
    filter_mode: FilterMode | None = None
    requires: list[str] = Field(default_factory=list, description="Required module names")
    include: re.Pattern[str] | None = Field(default=None, description="Classes to scan")
    include_system_modules: re.Pattern[str] | None = None
    jdk_internals: bool = False
    match_subpackages: bool = Field(default_factory=lambda: settings.match_subpackages)

    @field_validator("packages")
    @classmethod
    def reject_empty_packages(cls, value: list[str]) -> list[str]:
        """An empty name would denote the unnamed package, which cannot be targeted."""
        if any(not name for name in value):
            raise ValueError("Package name must not be empty")
        return value


def _same_flags(mode: FilterMode | None) -> tuple[bool, bool]:
    if mode is None or mode is FilterMode.ARCHIVE:
        return True, True
    if mode is FilterMode.PACKAGE:
        return True, False
    return False, False


def configure(options: FilterOptions, module_packages: ModulePackages) -> FilterBuilder:
    """
    Assemble a builder from options.

    Args:
        options: Validated options
        module_packages: Packages of every known module, for requires expansion

    Raises:
        UnknownModuleError: If a required module is not in module_packages
    """
    builder = (
        FilterBuilder()
        .packages(options.packages)
        .match_subpackages(options.match_subpackages)
        .regex(options.regex)
        .exclude(options.filter_regex)
        .filter_same(*_same_flags(options.filter_mode))
        .find_jdk_internals(options.jdk_internals)
        .include_system_modules(options.include_system_modules)
    )

    for name in options.requires:
        if name not in module_packages:
            raise UnknownModuleError(name, known=len(module_packages))
        builder.requires(name, module_packages[name])

    include = options.include
    if include is None and options.jdk_internals:
        # Internal API usage can come from any class
        include = re.compile(".*")
    builder.include_pattern(include)
    return builder


def build_filter(
    options: FilterOptions,
    module_packages: ModulePackages | None = None,
) -> DependencyFilter:
    """Build the frozen filter for one analysis run."""
    dep_filter = configure(options, module_packages or {}).build()
    logger.debug("Dependency filter configured:\n%s", dep_filter.describe())
    return dep_filter
