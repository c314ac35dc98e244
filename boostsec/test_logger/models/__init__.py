"""Data models for test records, parsed identifiers and suite trees."""

from boostsec.test_logger.models.identifier import (
    UNKNOWN_NAMESPACE,
    UNKNOWN_TYPE,
    ParsedIdentifier,
    ParseDiagnostic,
)
from boostsec.test_logger.models.logger_options import LoggerOptions
from boostsec.test_logger.models.suite import SuiteCounters, SuiteNode, SuiteSummary
from boostsec.test_logger.models.test_record import TestCaseResult, TestRecord

__all__ = [
    "UNKNOWN_NAMESPACE",
    "UNKNOWN_TYPE",
    "LoggerOptions",
    "ParseDiagnostic",
    "ParsedIdentifier",
    "SuiteCounters",
    "SuiteNode",
    "SuiteSummary",
    "TestCaseResult",
    "TestRecord",
]
