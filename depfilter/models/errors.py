"""
Errors raised around the filter.

The predicates never raise. These errors belong to the seams where
options are turned into a filter and where resolved archives are
handed to the archive-level stage.
"""


class DependencyFilterError(Exception):
    """Base class for filter configuration and resolution failures."""


class UnknownModuleError(DependencyFilterError):
    """Raised when a required module has no known package list."""

    def __init__(self, module_name: str, known: int) -> None:
        self.module_name = module_name
        self.known = known
        super().__init__(
            f"Module '{module_name}' not found; cannot expand it to packages "
            f"({known} modules known)"
        )


class UnresolvedArchiveError(DependencyFilterError):
    """Raised when a dependency endpoint has no resolved archive."""

    def __init__(self, class_name: str, role: str) -> None:
        self.class_name = class_name
        self.role = role
        super().__init__(f"No archive resolved for {role} class '{class_name}'")
