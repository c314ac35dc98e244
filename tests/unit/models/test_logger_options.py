"""Tests for logger options."""

import logging

import pytest

from boostsec.test_logger.models.logger_options import LoggerOptions, parse_parameter


def test_logger_options_defaults() -> None:
    """LoggerOptions defaults both formats."""
    options = LoggerOptions.from_parameters({})
    assert options.method_format == "Default"
    assert options.failure_body_format == "Default"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("Class", "Class"), (" full ", "Full"), ("DEFAULT", "Default")],
)
def test_logger_options_method_format(value: str, expected: str) -> None:
    """Method format values are trimmed and case insensitive."""
    options = LoggerOptions.from_parameters({"MethodFormat": value})
    assert options.method_format == expected


def test_logger_options_failure_body_format() -> None:
    """Failure body format accepts Verbose."""
    options = LoggerOptions.from_parameters({"FailureBodyFormat": "verbose"})
    assert options.failure_body_format == "Verbose"


def test_logger_options_unrecognized_value(caplog: pytest.LogCaptureFixture) -> None:
    """Unrecognized values keep the default and log a warning."""
    with caplog.at_level(logging.WARNING):
        options = LoggerOptions.from_parameters(
            {"MethodFormat": "Fancy", "FailureBodyFormat": "Loud"}
        )

    assert options.method_format == "Default"
    assert options.failure_body_format == "Default"
    assert "Method Format 'Fancy' is not a recognized option" in caplog.text
    assert "Failure Body Format 'Loud' is not a recognized option" in caplog.text


def test_logger_options_unknown_key(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are reported, since key names are case sensitive."""
    with caplog.at_level(logging.WARNING):
        options = LoggerOptions.from_parameters({"methodformat": "Full"})

    assert options.method_format == "Default"
    assert "'methodformat' is not valid and will be ignored" in caplog.text


def test_parse_parameter() -> None:
    """parse_parameter splits on the first '='."""
    assert parse_parameter("MethodFormat=Class") == ("MethodFormat", "Class")
    assert parse_parameter(" Key =a=b") == ("Key", "a=b")


@pytest.mark.parametrize("parameter", ["MethodFormat", "=Class", ""])
def test_parse_parameter_invalid(parameter: str) -> None:
    """parse_parameter rejects parameters without key or '='."""
    with pytest.raises(ValueError, match="expected key=value"):
        parse_parameter(parameter)
