"""Tests for DependencySet normalization and matching."""

from hustler_rules.detection.models import DependencySet, DependencySource, DetectionReport


def test_normalizes_case_whitespace_and_duplicates() -> None:
    deps = DependencySet(["Sqlite3", "sqlite3", "  turbo-rails ", "", "   "])

    assert list(deps) == ["sqlite3", "turbo-rails"]
    assert len(deps) == 2


def test_membership_is_case_insensitive() -> None:
    deps = DependencySet(["postgresql"])

    assert "PostgreSQL" in deps
    assert " postgresql " not in deps
    assert "pg" not in deps
    assert 42 not in deps


def test_missing_preserves_requested_order_and_spelling() -> None:
    deps = DependencySet(["rails"])

    assert deps.missing(["Turbo-Rails", "rails", "Stimulus-Rails"]) == [
        "Turbo-Rails",
        "Stimulus-Rails",
    ]
    assert deps.missing(["RAILS"]) == []
    assert deps.missing([" rails "]) == [" rails "]
    assert deps.missing([]) == []


def test_order_independent_equality() -> None:
    assert DependencySet(["a", "b"]) == DependencySet(["B", "a", "a"])


def test_report_merges_all_sources() -> None:
    report = DetectionReport(
        contributions={
            DependencySource.GEMFILE_LOCK: ["rails", "sqlite3"],
            DependencySource.DATABASE: ["Sqlite3", "sqlite3"],
        }
    )

    assert list(report.dependencies) == ["rails", "sqlite3"]
    assert report.counts() == {
        DependencySource.GEMFILE_LOCK: 2,
        DependencySource.DATABASE: 2,
    }
