"""
Tests for the two-stage filtering driver.
"""

import logging
import re

import pytest

from depfilter.analysis import (
    filter_dependencies,
    filter_resolved,
    run_two_stage,
    select_roots,
)
from depfilter.filtering import DEFAULT_FILTER, FilterBuilder
from depfilter.models import Archive, Dependency, Location, UnresolvedArchiveError


@pytest.fixture
def archive_x() -> Archive:
    return Archive(name="x.jar", entries=("a/b/Origin.class", "c/d/Target.class"))


@pytest.fixture
def archive_y() -> Archive:
    return Archive(name="y.jar", entries=("e/f/Remote.class",))


@pytest.fixture
def archive_of(archive_x: Archive, archive_y: Archive):
    index = {
        "a.b": archive_x,
        "c.d": archive_x,
        "e.f": archive_y,
    }

    def resolve(location: Location) -> Archive | None:
        return index.get(location.package_name)

    return resolve


@pytest.fixture
def edges() -> list[Dependency]:
    return [
        Dependency.of("a.b.Origin", "a.b.Sibling"),
        Dependency.of("a.b.Origin", "c.d.Target"),
        Dependency.of("a.b.Origin", "e.f.Remote"),
    ]


class TestStages:
    def test_edge_stage(self, edges: list[Dependency]) -> None:
        assert filter_dependencies(edges, DEFAULT_FILTER) == edges[1:]

    def test_archive_stage_alone(self, edges: list[Dependency], archive_of) -> None:
        # Skipping the edge stage leaves same-package edges to the archive stage
        assert filter_resolved(edges, DEFAULT_FILTER, archive_of) == [edges[2]]

    def test_unresolved_archive_raises(self, archive_of) -> None:
        edge = Dependency.of("a.b.Origin", "z.Unknown")
        with pytest.raises(UnresolvedArchiveError) as exc_info:
            filter_resolved([edge], DEFAULT_FILTER, archive_of)
        assert exc_info.value.role == "target"
        assert exc_info.value.class_name == "z.Unknown"


class TestRunTwoStage:
    def test_default_policy(self, edges: list[Dependency], archive_of) -> None:
        accepted, metrics = run_two_stage(edges, DEFAULT_FILTER, archive_of)

        assert accepted == [edges[2]]
        assert metrics.total_edges == 3
        assert metrics.after_edge_filter == 2
        assert metrics.after_archive_filter == 1

    def test_logs_summary(
        self, edges: list[Dependency], archive_of, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="depfilter.analysis.passes"):
            run_two_stage(iter(edges), DEFAULT_FILTER, archive_of)
        record = next(r for r in caplog.records if r.getMessage() == "dependency_filter_pass")
        assert record.after_archive == 1


class TestSelectRoots:
    def test_no_target_filter_selects_nothing(
        self, archive_x: Archive, archive_y: Archive
    ) -> None:
        assert select_roots([archive_x, archive_y], DEFAULT_FILTER) == []

    def test_include_pattern_selects_matching(
        self, archive_x: Archive, archive_y: Archive
    ) -> None:
        dep_filter = FilterBuilder().include_pattern(re.compile(r"e\.f\..*")).build()
        assert select_roots([archive_x, archive_y], dep_filter) == [archive_y]

    def test_system_modules_skipped(self, jdk_archive: Archive, app_archive: Archive) -> None:
        dep_filter = FilterBuilder().packages({"java.lang"}).build()
        assert select_roots([jdk_archive, app_archive], dep_filter) == [app_archive]
