"""Models for decomposed test identifiers and parse diagnostics."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_NAMESPACE = "UnknownNamespace"
UNKNOWN_TYPE = "UnknownType"

PARSE_ERROR_TEMPLATE = (
    "Unable to parse the test name '{raw}' into a namespace type and method. "
    "Using Namespace='{namespace}', Type='{type}' and Method='{method}'"
)

ParseFailureReason = Literal["FullFailure", "NamespaceOnlyFailure"]


class ParsedIdentifier(BaseModel):
    """Namespace, type and method recovered from a fully qualified test name."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., description="Dotted namespace of the test type")
    type: str = Field(..., description="Type (class) name, may carry arguments")
    method: str = Field(..., description="Method name, may carry arguments")
    is_fully_resolved: bool = Field(
        default=True, description="False when any fallback value was substituted"
    )


class ParseDiagnostic(BaseModel):
    """Notification emitted when an identifier could not be fully parsed."""

    model_config = ConfigDict(frozen=True)

    raw_input: str = Field(..., description="Identifier exactly as received")
    reason: ParseFailureReason = Field(..., description="Severity of the failure")
    fallback: ParsedIdentifier = Field(..., description="Values used instead")

    @property
    def message(self) -> str:
        """Human readable description of the substitution."""
        return PARSE_ERROR_TEMPLATE.format(
            raw=self.raw_input,
            namespace=self.fallback.namespace,
            type=self.fallback.type,
            method=self.fallback.method,
        )
