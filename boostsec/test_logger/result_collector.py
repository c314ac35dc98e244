"""Turn raw test records into parsed results and per-type suite summaries."""

import logging
import re
from collections.abc import Callable, Iterable, Sequence
from datetime import timedelta
from typing import Any

from boostsec.test_logger.models.logger_options import (
    FailureBodyFormat,
    MethodFormat,
)
from boostsec.test_logger.models.suite import SuiteCounters, SuiteSummary
from boostsec.test_logger.models.test_record import TestCaseResult, TestRecord
from boostsec.test_logger.name_parser import DiagnosticSink, parse_identifier

logger = logging.getLogger(__name__)

PayloadFactory = Callable[[list[TestCaseResult]], Any]

_INDENT = "    "
_LINE_BREAK = re.compile(r"\r|\n")


def collect_results(
    records: Iterable[TestRecord], on_diagnostic: DiagnosticSink | None = None
) -> list[TestCaseResult]:
    """Parse the identifier of every record, keeping the input order."""
    results = [
        TestCaseResult(
            record=record,
            identifier=parse_identifier(record.fully_qualified_name, on_diagnostic),
        )
        for record in records
    ]
    logger.info(f"Collected {len(results)} test results")
    return results


def summarize_by_type(
    results: Sequence[TestCaseResult], payload_factory: PayloadFactory | None = None
) -> list[SuiteSummary]:
    """Build one leaf summary per distinct namespace and type.

    Args:
        results: Parsed test results
        payload_factory: Builds the payload of a leaf from its results.
            By default the payload is the tuple of results itself.

    Returns:
        Leaf summaries sorted by full type name

    """
    groups: dict[str, list[TestCaseResult]] = {}
    for result in results:
        groups.setdefault(result.full_type_name, []).append(result)

    summaries = []
    for full_type_name, group in sorted(groups.items()):
        counters = SuiteCounters.from_outcomes(
            (result.record.outcome for result in group),
            duration=sum((result.record.duration for result in group), timedelta(0)),
        )
        payload = payload_factory(group) if payload_factory else tuple(group)
        summaries.append(
            SuiteSummary(
                full_name=full_type_name,
                name=group[0].type,
                counters=counters,
                payload=payload,
            )
        )

    logger.debug(f"Summarized {len(results)} results into {len(summaries)} types")
    return summaries


def format_test_name(result: TestCaseResult, method_format: MethodFormat) -> str:
    """Name of a test case according to the configured method format."""
    if method_format == "Full":
        return f"{result.full_type_name}.{result.name}"
    if method_format == "Class":
        return f"{result.type}.{result.name}"
    return result.name


def format_failure_body(
    result: TestCaseResult, failure_body_format: FailureBodyFormat
) -> str:
    """Text describing a failed test.

    The default body is the stack trace. The verbose body adds the error
    message and, when the test wrote any, its output.
    """
    record = result.record
    lines: list[str] = []
    verbose = failure_body_format == "Verbose"

    if verbose:
        lines.append(record.error_message or "")
        lines.append("Stack Trace:")

    lines.append(record.error_stack_trace or "")

    if verbose and record.messages:
        lines.append("Standard Output:")
        lines.append(indent_messages(record.messages))

    return "\n".join(lines).strip()


def indent_messages(messages: Iterable[str]) -> str:
    """Indent messages consistently, one non-blank line per output line."""
    lines = [
        line.strip()
        for message in messages
        for line in _LINE_BREAK.split(message)
        if line.strip()
    ]
    return _INDENT + f"\n{_INDENT}".join(lines)
