import pytest

from depfilter.models import Archive, Dependency, Module


@pytest.fixture
def base_module() -> Module:
    """A platform module exporting only its public API."""
    return Module.named("java.base", exports={"java.lang", "java.util"})


@pytest.fixture
def jdk_archive(base_module: Module) -> Archive:
    """Archive for java.base with one exported and one internal class."""
    return Archive(
        name="java.base",
        module=base_module,
        entries=(
            "module-info.class",
            "java/lang/Object.class",
            "sun/misc/Unsafe.class",
        ),
    )


@pytest.fixture
def app_archive() -> Archive:
    """Class-path archive of the application under analysis."""
    return Archive(
        name="app.jar",
        entries=("com/example/app/Main.class", "com/example/util/Strings.class"),
    )


@pytest.fixture
def lib_archive() -> Archive:
    """Class-path archive of a third-party library."""
    return Archive(name="lib.jar", entries=("org/lib/Parser.class",))


@pytest.fixture
def same_package_edge() -> Dependency:
    return Dependency.of("com.example.app.Main", "com.example.app.Config")


@pytest.fixture
def cross_package_edge() -> Dependency:
    return Dependency.of("com.example.app.Main", "com.example.util.Strings")
