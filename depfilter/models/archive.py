"""
Archive and Module Metadata.

Archives and modules are resolved by the loader before the archive-level
filter runs. The filter only reads them.

INVARIANTS:
- Module is frozen; export data never changes during a run
- Archive identity is object identity: two archives with equal names
  and entries are still distinct archives
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from depfilter.config import SYSTEM_MODULE_PATTERN


@dataclass(frozen=True, slots=True)
class Module:
    """
    Module metadata attached to an archive.

    Attributes:
        name: Module name ("" for the unnamed module)
        is_system: True for modules in the reserved platform namespaces
        is_platform: True for modules shipped with the runtime image
        exports: Packages the module exports unqualified
    """

    name: str
    is_system: bool = False
    is_platform: bool = False
    exports: frozenset[str] = frozenset()

    @classmethod
    def named(
        cls,
        name: str,
        exports: Iterable[str] = (),
        is_platform: bool | None = None,
    ) -> "Module":
        """
        Build a module, classifying it by name.

        A name in the reserved namespaces makes the module a system module.
        Platform defaults to the same classification unless given.
        """
        is_system = bool(name) and SYSTEM_MODULE_PATTERN.fullmatch(name) is not None
        return cls(
            name=name,
            is_system=is_system,
            is_platform=is_system if is_platform is None else is_platform,
            exports=frozenset(exports),
        )

    @classmethod
    def unnamed(cls) -> "Module":
        """The module of classes loaded from the class path."""
        return cls(name="")

    @property
    def is_jdk(self) -> bool:
        """True if the module belongs to the platform itself."""
        return self.is_system or self.is_platform

    def is_exported(self, package_name: str) -> bool:
        """Check if a package is exported by this module."""
        return package_name in self.exports


@dataclass(eq=False, slots=True)
class Archive:
    """
    A packaged unit of classes (a jar, a module image, a directory).

    Attributes:
        name: Display name (usually the file name)
        module: The module this archive defines
        entries: Member entry names using "/" separators
    """

    name: str
    module: Module = field(default_factory=Module.unnamed)
    entries: tuple[str, ...] = ()

    def __repr__(self) -> str:
        return f"Archive({self.name!r}, module={self.module.name!r})"
