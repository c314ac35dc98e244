"""CLI entry point for test logger."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import typer

from boostsec.test_logger.models.identifier import ParseDiagnostic
from boostsec.test_logger.models.logger_options import (
    FAILURE_BODY_FORMAT_KEY,
    METHOD_FORMAT_KEY,
    LoggerOptions,
    parse_parameter,
)
from boostsec.test_logger.models.suite import SuiteCounters, SuiteNode
from boostsec.test_logger.models.test_record import TestCaseResult
from boostsec.test_logger.record_loader import load_test_records
from boostsec.test_logger.result_collector import (
    collect_results,
    format_failure_body,
    format_test_name,
    summarize_by_type,
)
from boostsec.test_logger.suite_aggregator import aggregate, wrap_in_assembly

# Configure logging - force reconfiguration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,  # Force reconfiguration even if already set up
)
logger = logging.getLogger(__name__)

app = typer.Typer()


@app.command()
def main(
    results_file: Path = typer.Option(..., help="YAML or JSON file with test results"),  # noqa: B008
    method_format: str | None = typer.Option(
        None, help="Test case name format (Default, Class, Full)"
    ),
    failure_body_format: str | None = typer.Option(
        None, help="Failure body format (Default, Verbose)"
    ),
    parameter: list[str] | None = typer.Option(  # noqa: B008
        None, help="Logger parameter as key=value, may be repeated"
    ),
    assembly: str | None = typer.Option(
        None, help="Wrap all root suites in an assembly with this name"
    ),
) -> None:
    """Build the suite tree of a test run and print it as JSON."""
    try:
        parameters = dict(parse_parameter(p) for p in parameter or [])
    except ValueError as e:
        logger.error(f"Invalid logger parameter: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if method_format is not None:
        parameters[METHOD_FORMAT_KEY] = method_format
    if failure_body_format is not None:
        parameters[FAILURE_BODY_FORMAT_KEY] = failure_body_format
    options = LoggerOptions.from_parameters(parameters)

    logger.info(f"Results file: {results_file}")
    try:
        records = load_test_records(results_file)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load test results: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    diagnostics: list[ParseDiagnostic] = []
    results = collect_results(records, on_diagnostic=diagnostics.append)
    for diagnostic in diagnostics:
        logger.warning(diagnostic.message)

    leaves = summarize_by_type(
        results, payload_factory=lambda group: _test_cases(group, options)
    )
    roots = aggregate(leaves)
    if assembly:
        roots = [wrap_in_assembly(roots, assembly)]

    totals = SuiteCounters.sum(root.counters for root in roots)
    output = {
        "total": totals.total,
        "passed": totals.passed,
        "failed": totals.failed,
        "skipped": totals.skipped,
        "inconclusive": totals.inconclusive,
        "duration": totals.duration.total_seconds(),
        "suites": [_node_to_dict(root) for root in roots],
    }

    typer.echo(json.dumps(output, indent=2))

    if totals.failed:
        logger.error(f"Tests failed: {totals.failed}/{totals.total}")
        raise typer.Exit(code=1)


def _node_to_dict(node: SuiteNode) -> dict[str, Any]:
    """Render a suite node and its subtree."""
    data: dict[str, Any] = {
        "type": node.node_type,
        "name": node.name,
        "fullname": node.full_name,
        "total": node.counters.total,
        "passed": node.counters.passed,
        "failed": node.counters.failed,
        "skipped": node.counters.skipped,
        "inconclusive": node.counters.inconclusive,
        "result": node.result,
        "duration": node.counters.duration.total_seconds(),
        "children": [_node_to_dict(child) for child in node.children],
    }
    if node.payload is not None:
        data["testcases"] = node.payload
    return data


def _test_cases(
    group: list[TestCaseResult], options: LoggerOptions
) -> list[dict[str, Any]]:
    """Render the test cases of one type."""
    cases = []
    for result in group:
        case: dict[str, Any] = {
            "classname": result.full_type_name,
            "name": format_test_name(result, options.method_format),
            "time": result.record.duration.total_seconds(),
            "outcome": result.record.outcome,
        }
        if result.record.outcome == "failed":
            case["failure"] = {
                "message": result.record.error_message,
                "body": format_failure_body(result, options.failure_body_format),
            }
        cases.append(case)
    return cases


if __name__ == "__main__":  # pragma: no cover
    app()
