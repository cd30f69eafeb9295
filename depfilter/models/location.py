"""
Dependency Value Objects.

A Location names one class by its internal binary name (``a/b/C``).
A Dependency is an ordered (origin, target) pair produced by the class
file parser.

INVARIANTS:
- Both types are frozen (immutable after construction)
- Package name is derived, never stored separately
"""

from dataclasses import dataclass

SEPARATOR = "/"


@dataclass(frozen=True, slots=True)
class Location:
    """
    A class referenced by a dependency edge.

    Attributes:
        name: Internal binary name, e.g. "java/util/Map$Entry"
    """

    name: str

    @classmethod
    def of(cls, class_name: str) -> "Location":
        """Build a location from a dotted class name."""
        return cls(name=class_name.replace(".", SEPARATOR))

    @property
    def class_name(self) -> str:
        """Fully-qualified dotted class name."""
        return self.name.replace(SEPARATOR, ".")

    @property
    def package_name(self) -> str:
        """Dotted package name; empty for the unnamed package."""
        i = self.name.rfind(SEPARATOR)
        return self.name[:i].replace(SEPARATOR, ".") if i > 0 else ""

    def __str__(self) -> str:
        return self.class_name


@dataclass(frozen=True, slots=True)
class Dependency:
    """One class-to-class edge: origin references target."""

    origin: Location
    target: Location

    @classmethod
    def of(cls, origin: str, target: str) -> "Dependency":
        """Build an edge from two dotted class names."""
        return cls(origin=Location.of(origin), target=Location.of(target))

    def __str__(self) -> str:
        return f"{self.origin} -> {self.target}"
