"""Models for per-type suite summaries and the aggregated suite tree."""

from collections.abc import Iterable
from datetime import timedelta
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from boostsec.test_logger.models.test_record import TestOutcome
from boostsec.test_logger.string_utils import substring_after_dot

NodeType = Literal["TestSuite", "TestFixture", "Assembly"]


class SuiteCounters(BaseModel):
    """Outcome counters and accumulated duration of a group of tests."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, ge=0, description="Number of tests")
    passed: int = Field(default=0, ge=0, description="Passed tests")
    failed: int = Field(default=0, ge=0, description="Failed tests")
    skipped: int = Field(default=0, ge=0, description="Skipped tests")
    inconclusive: int = Field(
        default=0, ge=0, description="Tests without a definite outcome"
    )
    error: int = Field(default=0, ge=0, description="Errored tests, kept apart")
    duration: timedelta = Field(
        default=timedelta(0), description="Accumulated test duration"
    )

    @field_validator("duration")
    @classmethod
    def _duration_not_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("duration must not be negative")
        return value

    @model_validator(mode="after")
    def _total_matches_outcomes(self) -> "SuiteCounters":
        outcomes = self.passed + self.failed + self.skipped + self.inconclusive
        if self.total != outcomes:
            raise ValueError(
                f"total ({self.total}) must equal passed + failed + skipped + "
                f"inconclusive ({outcomes})"
            )
        return self

    def __add__(self, other: "SuiteCounters") -> "SuiteCounters":
        if not isinstance(other, SuiteCounters):
            return NotImplemented
        return SuiteCounters(
            total=self.total + other.total,
            passed=self.passed + other.passed,
            failed=self.failed + other.failed,
            skipped=self.skipped + other.skipped,
            inconclusive=self.inconclusive + other.inconclusive,
            error=self.error + other.error,
            duration=self.duration + other.duration,
        )

    @classmethod
    def sum(cls, counters: Iterable["SuiteCounters"]) -> "SuiteCounters":
        """Element-wise sum of any number of counters."""
        result = cls()
        for item in counters:
            result = result + item
        return result

    @classmethod
    def from_outcomes(
        cls, outcomes: Iterable[TestOutcome], duration: timedelta = timedelta(0)
    ) -> "SuiteCounters":
        """Count outcomes, mapping "none" and "not_found" to inconclusive."""
        counts = {"passed": 0, "failed": 0, "skipped": 0, "inconclusive": 0}
        for outcome in outcomes:
            if outcome in ("passed", "failed", "skipped"):
                counts[outcome] += 1
            else:
                counts["inconclusive"] += 1
        return cls(total=sum(counts.values()), duration=duration, **counts)


class SuiteSummary(BaseModel):
    """Leaf input of the aggregation: one grouping of tests by type."""

    model_config = ConfigDict(frozen=True)

    full_name: str = Field(..., description="Dot separated full name")
    name: str = Field(default="", description="Last segment of full_name")
    counters: SuiteCounters = Field(
        default_factory=SuiteCounters, description="Counters of the grouped tests"
    )
    payload: Any = Field(
        default=None, description="Opaque data carried through to the tree"
    )

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name"):
            data = {**data, "name": substring_after_dot(data.get("full_name") or "")}
        return data


class SuiteNode(BaseModel):
    """Node of the aggregated suite tree."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Last segment of full_name")
    full_name: str = Field(..., description="Dot separated full name")
    node_type: NodeType = Field(..., description="Kind of suite")
    counters: SuiteCounters = Field(..., description="Rolled-up counters")
    children: list["SuiteNode"] = Field(
        default_factory=list, description="Ordered child suites"
    )
    payload: Any = Field(default=None, description="Payload of a leaf summary")

    @property
    def result(self) -> Literal["Passed", "Failed"]:
        """Rolled-up suite result."""
        return "Failed" if self.counters.failed > 0 else "Passed"

    @classmethod
    def from_summary(cls, summary: SuiteSummary) -> "SuiteNode":
        """Build a fixture node from a leaf summary."""
        return cls(
            name=summary.name,
            full_name=summary.full_name,
            node_type="TestFixture",
            counters=summary.counters,
            payload=summary.payload,
        )

    def walk(self) -> Iterable["SuiteNode"]:
        """Yield this node and all descendants, depth first, in order."""
        stack: list[SuiteNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
