"""Logger options, configurable through key=value logger parameters."""

import logging
from collections.abc import Mapping
from typing import Literal, get_args

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

MethodFormat = Literal["Default", "Class", "Full"]
FailureBodyFormat = Literal["Default", "Verbose"]

METHOD_FORMAT_KEY = "MethodFormat"
FAILURE_BODY_FORMAT_KEY = "FailureBodyFormat"
KNOWN_KEYS = (METHOD_FORMAT_KEY, FAILURE_BODY_FORMAT_KEY)


class LoggerOptions(BaseModel):
    """Options controlling how test names and failures are rendered."""

    method_format: MethodFormat = Field(
        default="Default",
        description="Default: method only, Class: type.method, Full: namespace.type.method",
    )
    failure_body_format: FailureBodyFormat = Field(
        default="Default",
        description="Default: stack trace only, Verbose: message, trace and output",
    )

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, str]) -> "LoggerOptions":
        """Build options from logger parameters.

        Args:
            parameters: Key/value pairs (e.g., {"MethodFormat": "Class"}).
                Keys are case sensitive, values are not.

        Returns:
            Options with unknown keys and unrecognized values ignored

        """
        for key in parameters:
            if key not in KNOWN_KEYS:
                logger.warning(
                    f"The provided configuration item '{key}' is not valid and "
                    "will be ignored. Note, names are case sensitive."
                )

        options = cls()

        if METHOD_FORMAT_KEY in parameters:
            method_format = _match_choice(
                parameters[METHOD_FORMAT_KEY], get_args(MethodFormat)
            )
            if method_format is None:
                logger.warning(
                    f"The provided Method Format '{parameters[METHOD_FORMAT_KEY]}' "
                    "is not a recognized option. Using default"
                )
            else:
                options = options.model_copy(update={"method_format": method_format})

        if FAILURE_BODY_FORMAT_KEY in parameters:
            failure_format = _match_choice(
                parameters[FAILURE_BODY_FORMAT_KEY], get_args(FailureBodyFormat)
            )
            if failure_format is None:
                logger.warning(
                    "The provided Failure Body Format "
                    f"'{parameters[FAILURE_BODY_FORMAT_KEY]}' is not a recognized "
                    "option. Using default"
                )
            else:
                options = options.model_copy(
                    update={"failure_body_format": failure_format}
                )

        return options


def parse_parameter(parameter: str) -> tuple[str, str]:
    """Split a 'key=value' logger parameter.

    Raises:
        ValueError: If the parameter has no '=' or an empty key

    """
    key, sep, value = parameter.partition("=")
    if not sep or not key.strip():
        raise ValueError(f"Invalid logger parameter '{parameter}', expected key=value")
    return key.strip(), value


def _match_choice(value: str, choices: tuple[str, ...]) -> str | None:
    wanted = value.strip().lower()
    for choice in choices:
        if choice.lower() == wanted:
            return choice
    return None
