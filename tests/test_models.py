"""
Tests for dependency value objects and archive metadata.
"""

import dataclasses

import pytest

from depfilter.models import Archive, Dependency, Location, Module


class TestLocation:
    def test_package_name_from_internal_name(self) -> None:
        assert Location("java/util/Map$Entry").package_name == "java.util"

    def test_unnamed_package(self) -> None:
        assert Location("Main").package_name == ""

    def test_class_name_is_dotted(self) -> None:
        assert Location("java/util/Map$Entry").class_name == "java.util.Map$Entry"

    def test_of_round_trips_dotted_name(self) -> None:
        loc = Location.of("a.b.C")
        assert loc.name == "a/b/C"
        assert loc == Location("a/b/C")

    def test_is_frozen(self) -> None:
        loc = Location("a/b/C")
        with pytest.raises(dataclasses.FrozenInstanceError):
            loc.name = "x/Y"  # type: ignore[misc]


class TestDependency:
    def test_str(self) -> None:
        assert str(Dependency.of("a.A", "b.B")) == "a.A -> b.B"

    def test_value_equality(self) -> None:
        assert Dependency.of("a.A", "b.B") == Dependency.of("a.A", "b.B")


class TestModule:
    @pytest.mark.parametrize("name", ["java.base", "jdk.compiler", "javafx.graphics"])
    def test_reserved_namespaces_are_system(self, name: str) -> None:
        module = Module.named(name)
        assert module.is_system
        assert module.is_jdk

    @pytest.mark.parametrize("name", ["com.example", "javax.inject", "java"])
    def test_other_names_are_not_system(self, name: str) -> None:
        assert not Module.named(name).is_system

    def test_unnamed_module_is_not_system(self) -> None:
        assert not Module.unnamed().is_system

    def test_platform_flag_can_be_given(self) -> None:
        module = Module.named("com.vendor.runtime", is_platform=True)
        assert not module.is_system
        assert module.is_jdk

    def test_is_exported(self, base_module: Module) -> None:
        assert base_module.is_exported("java.lang")
        assert not base_module.is_exported("sun.misc")


class TestArchive:
    def test_identity_not_value_equality(self) -> None:
        first = Archive(name="dup.jar", entries=("a/A.class",))
        second = Archive(name="dup.jar", entries=("a/A.class",))
        assert first != second
        assert first == first

    def test_hashable(self, app_archive: Archive) -> None:
        assert {app_archive: 1}[app_archive] == 1

    def test_defaults_to_unnamed_module(self, app_archive: Archive) -> None:
        assert app_archive.module.name == ""
