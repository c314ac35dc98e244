"""Decompose fully qualified test names into namespace, type and method.

The fully qualified name is built by whatever test adapter ran the test, and
nothing enforces that it starts with the namespace or follows any format.
The only anchored part is the end of the string (the method, optionally
followed by parenthesized arguments), so the name is scanned right to left.

Because the input space is large and the parser is simple, some nonsense
names such as "#.#.#" still parse successfully.
"""

import logging
from collections.abc import Callable
from enum import Enum

from boostsec.test_logger.models.identifier import (
    UNKNOWN_NAMESPACE,
    UNKNOWN_TYPE,
    ParsedIdentifier,
    ParseDiagnostic,
    ParseFailureReason,
)

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[ParseDiagnostic], None]


class _Step(Enum):
    FIND_METHOD = "find_method"
    FIND_TYPE = "find_type"
    FIND_NAMESPACE = "find_namespace"


class _State(Enum):
    DEFAULT = "default"
    PARENTHESIS = "parenthesis"
    STRING = "string"


class _MalformedNameError(ValueError):
    """Raised internally when the name cannot be decomposed."""


def parse_identifier(
    fully_qualified_name: str, on_diagnostic: DiagnosticSink | None = None
) -> ParsedIdentifier:
    """Parse a namespace, type and method out of a fully qualified test name.

    A result is always returned. When the name cannot be fully parsed, the
    fallback values are used and a single diagnostic is sent to
    ``on_diagnostic``. Without a sink the diagnostic is logged as a warning
    on this module's logger, which is shared by every caller; concurrent
    callers that need their own diagnostics must pass their own sink.

    Args:
        fully_qualified_name: String like 'namespace.type.method', where type
            and/or method may be followed by parentheses holding argument values
        on_diagnostic: Callable receiving the diagnostic of a failed parse

    Returns:
        Parsed identifier, possibly holding fallback values

    Raises:
        TypeError: If fully_qualified_name is not a string

    """
    if not isinstance(fully_qualified_name, str):
        raise TypeError(
            "fully_qualified_name must be a str, "
            f"got {type(fully_qualified_name).__name__}"
        )

    try:
        namespace, type_name, method = _scan(fully_qualified_name)
    except _MalformedNameError as e:
        logger.debug(f"Malformed test name {fully_qualified_name!r}: {e}")
        namespace = type_name = method = ""

    reason: ParseFailureReason
    if not type_name.strip():
        reason = "FullFailure"
        parsed = ParsedIdentifier(
            namespace=UNKNOWN_NAMESPACE,
            type=UNKNOWN_TYPE,
            method=fully_qualified_name,
            is_fully_resolved=False,
        )
    elif not namespace.strip():
        reason = "NamespaceOnlyFailure"
        parsed = ParsedIdentifier(
            namespace=UNKNOWN_NAMESPACE,
            type=type_name,
            method=method,
            is_fully_resolved=False,
        )
    else:
        return ParsedIdentifier(namespace=namespace, type=type_name, method=method)

    diagnostic = ParseDiagnostic(
        raw_input=fully_qualified_name, reason=reason, fallback=parsed
    )
    if on_diagnostic is None:
        logger.warning(diagnostic.message)
    else:
        on_diagnostic(diagnostic)
    return parsed


def _scan(name: str) -> tuple[str, str, str]:  # noqa: C901
    """Scan the name right to left, returning (namespace, type, method).

    Segments that were not reached are returned empty.

    Raises:
        _MalformedNameError: On characters or structure that cannot be valid

    """
    segments: list[str] = []
    step = _Step.FIND_METHOD
    state = _State.DEFAULT
    depth = 0
    buffer: list[str] = []

    for i in range(len(name) - 1, -1, -1):
        char = name[i]

        if step is _Step.FIND_NAMESPACE:
            # No more structure to find, everything left is the namespace.
            buffer.append(char)
        elif state is _State.DEFAULT:
            if char in "(\"\\":
                raise _MalformedNameError(f"unexpected {char!r} at {i}")
            elif char == ")":
                if buffer:
                    raise _MalformedNameError(
                        f"')' at {i} is not the last character of its segment"
                    )
                state = _State.PARENTHESIS
                depth = 1
                buffer.append(char)
            elif char == ".":
                if not buffer:
                    raise _MalformedNameError(f"empty segment before {i}")
                segments.append("".join(reversed(buffer)))
                buffer = []
                step = (
                    _Step.FIND_TYPE
                    if step is _Step.FIND_METHOD
                    else _Step.FIND_NAMESPACE
                )
            else:
                buffer.append(char)
        elif state is _State.PARENTHESIS:
            if char == "\\":
                raise _MalformedNameError(f"unexpected '\\' at {i}")
            elif char == ")":
                depth += 1
            elif char == "(":
                depth -= 1
                if depth == 0:
                    state = _State.DEFAULT
            elif char == '"':
                # Scanning backwards, this quote ends a string literal.
                state = _State.STRING
            buffer.append(char)
        else:
            if char == '"' and not (i > 0 and name[i - 1] == "\\"):
                state = _State.PARENTHESIS
            buffer.append(char)

    if step is not _Step.FIND_NAMESPACE and state is not _State.DEFAULT:
        raise _MalformedNameError("unbalanced parentheses or quotes")

    if step is _Step.FIND_METHOD:
        return "", "", ""

    segments.append("".join(reversed(buffer)))
    if step is _Step.FIND_TYPE:
        method, type_name = segments
        return "", type_name, method

    method, type_name, namespace = segments
    return namespace, type_name, method
