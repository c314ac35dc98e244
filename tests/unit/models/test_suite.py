"""Tests for suite models."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from boostsec.test_logger.models.suite import SuiteCounters, SuiteNode, SuiteSummary


def test_suite_counters_defaults() -> None:
    """SuiteCounters starts at zero."""
    counters = SuiteCounters()
    assert counters.total == 0
    assert counters.error == 0
    assert counters.duration == timedelta(0)


def test_suite_counters_total_must_match_outcomes() -> None:
    """SuiteCounters rejects a total that differs from the outcome counts."""
    with pytest.raises(ValidationError) as exc_info:
        SuiteCounters(total=3, passed=1, failed=1)
    assert "total" in str(exc_info.value)


def test_suite_counters_error_is_not_part_of_total() -> None:
    """Errors are counted apart from the total."""
    counters = SuiteCounters(total=1, passed=1, error=2)
    assert counters.error == 2


def test_suite_counters_rejects_negative_duration() -> None:
    """SuiteCounters rejects negative durations."""
    with pytest.raises(ValidationError) as exc_info:
        SuiteCounters(duration=timedelta(seconds=-1))
    assert "duration" in str(exc_info.value)


def test_suite_counters_addition() -> None:
    """Adding counters sums every field, including error and duration."""
    left = SuiteCounters(
        total=2, passed=1, failed=1, error=1, duration=timedelta(seconds=1.5)
    )
    right = SuiteCounters(
        total=2, skipped=1, inconclusive=1, duration=timedelta(seconds=2)
    )

    assert left + right == SuiteCounters(
        total=4,
        passed=1,
        failed=1,
        skipped=1,
        inconclusive=1,
        error=1,
        duration=timedelta(seconds=3.5),
    )


def test_suite_counters_sum_empty() -> None:
    """Summing no counters gives zero counters."""
    assert SuiteCounters.sum([]) == SuiteCounters()


def test_suite_counters_from_outcomes() -> None:
    """from_outcomes maps unknown outcomes to inconclusive."""
    counters = SuiteCounters.from_outcomes(
        ["passed", "passed", "failed", "skipped", "none", "not_found"],
        duration=timedelta(seconds=4),
    )
    assert counters == SuiteCounters(
        total=6,
        passed=2,
        failed=1,
        skipped=1,
        inconclusive=2,
        duration=timedelta(seconds=4),
    )


def test_suite_summary_name_defaults_to_last_segment() -> None:
    """SuiteSummary derives its name from the full name."""
    assert SuiteSummary(full_name="a.b.Type").name == "Type"
    assert SuiteSummary(full_name="Type").name == "Type"
    assert SuiteSummary(full_name="a.b", name="explicit").name == "explicit"


def test_suite_summary_is_immutable() -> None:
    """SuiteSummary cannot be changed after creation."""
    summary = SuiteSummary(full_name="a.b")
    with pytest.raises(ValidationError):
        summary.full_name = "c.d"  # type: ignore[misc]


def test_suite_node_from_summary() -> None:
    """from_summary builds a fixture carrying counters and payload."""
    counters = SuiteCounters(total=1, failed=1)
    node = SuiteNode.from_summary(
        SuiteSummary(full_name="ns.Type", counters=counters, payload={"cases": 1})
    )

    assert node.name == "Type"
    assert node.full_name == "ns.Type"
    assert node.node_type == "TestFixture"
    assert node.counters == counters
    assert node.payload == {"cases": 1}
    assert node.children == []
    assert node.result == "Failed"


def test_suite_node_rejects_unknown_type() -> None:
    """SuiteNode only accepts known node types."""
    with pytest.raises(ValidationError) as exc_info:
        SuiteNode(
            name="a",
            full_name="a",
            node_type="Namespace",  # type: ignore[arg-type]
            counters=SuiteCounters(),
        )
    assert "node_type" in str(exc_info.value)


def test_suite_node_walk_is_depth_first() -> None:
    """walk yields the node and its descendants in order."""
    leaf1 = SuiteNode(
        name="c", full_name="a.b.c", node_type="TestFixture", counters=SuiteCounters()
    )
    leaf2 = SuiteNode(
        name="d", full_name="a.d", node_type="TestFixture", counters=SuiteCounters()
    )
    b = SuiteNode(
        name="b",
        full_name="a.b",
        node_type="TestSuite",
        counters=SuiteCounters(),
        children=[leaf1],
    )
    a = SuiteNode(
        name="a",
        full_name="a",
        node_type="TestSuite",
        counters=SuiteCounters(),
        children=[b, leaf2],
    )

    assert [node.full_name for node in a.walk()] == ["a", "a.b", "a.b.c", "a.d"]
