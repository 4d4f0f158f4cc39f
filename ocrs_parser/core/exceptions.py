"""Exception hierarchy for the OCRS parser.

All exceptions inherit from BaseError and provide structured error information
compatible with RFC 7807 Problem Details for HTTP APIs.

Two families matter to the pipeline:

- ``InputError``: the caller's text is unusable. Raised before any extraction
  attempt and never retried.
- ``AttemptError``: one extraction attempt went wrong (backend failure,
  schema mismatch, domain-rule violation). The orchestrator turns its
  ``messages`` into correction feedback for the next attempt.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from ocrs_parser.domain.models import SemanticFinding, ValidationIssue


class ErrorCategory(str, Enum):
    """Error categories for classification and monitoring."""

    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    EXTERNAL_SERVICE = "external_service"
    VALIDATION = "validation"
    BUSINESS_LOGIC = "business_logic"


class BaseError(Exception):
    """Base exception for all OCRS parser errors.

    Attributes:
        message: Human-readable error message
        error_code: Application-specific error code
        category: Error category for classification
        http_status: HTTP status code to return
        details: Additional context (dict)
        retryable: Whether the operation can be retried
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory,
        http_status: int,
        details: Optional[dict[str, Any]] = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.http_status = http_status
        self.details = details or {}
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Convert to RFC 7807 Problem Details format."""
        return {
            "type": f"/errors/{self.error_code}",
            "title": self.message,
            "status": self.http_status,
            "code": self.error_code,
            "detail": self.details.get("detail"),
            "category": self.category.value,
            "retryable": self.retryable,
        }


class ConfigurationError(BaseError):
    """Settings or packaged resources are unusable (500)."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            category=ErrorCategory.SERVER_ERROR,
            http_status=500,
            **kwargs,
        )


class ClientError(BaseError):
    """Base for client errors (4xx). Not retryable."""

    def __init__(self, message: str, error_code: str, **kwargs):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.CLIENT_ERROR,
            http_status=kwargs.pop("http_status", 400),
            retryable=False,
            **kwargs,
        )


class InputError(ClientError):
    """Raw recipe text rejected by the preprocessor."""


class EmptyInputError(InputError):
    def __init__(self) -> None:
        super().__init__(message="Input text is empty", error_code="EMPTY_INPUT")


class InputTooLargeError(InputError):
    """Input longer than the preprocessing ceiling (413).

    Args:
        max_length: Maximum allowed length in characters
        actual_length: Length of the trimmed input
    """

    def __init__(self, max_length: int, actual_length: int):
        super().__init__(
            message=f"Input text exceeds maximum length of {max_length} characters",
            error_code="INPUT_TOO_LARGE",
            http_status=413,
            details={"max_length": max_length, "actual_length": actual_length},
        )


class AttemptError(BaseError):
    """Failure local to a single extraction attempt.

    ``messages`` are the lines fed back to the provider on the next attempt
    and, for the final attempt, the errors reported to the caller.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory,
        messages: Sequence[str],
        http_status: int = 422,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=category,
            http_status=http_status,
            details=details,
            retryable=True,
        )
        self.messages = list(messages)


class ProviderError(AttemptError):
    """Extraction backend failed or answered with an unusable response.

    Args:
        message: Recorded verbatim as the attempt's only error
        error_type: "timeout", "unavailable", "http_error", "empty_response"
            or "malformed_response"
        details: Additional error context (http_code, body snippet, ...)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "error",
        details: Optional[dict[str, Any]] = None,
    ):
        additional_details = dict(details or {})
        additional_details["error_type"] = error_type
        super().__init__(
            message=message,
            error_code=f"PROVIDER_{error_type.upper()}",
            category=ErrorCategory.EXTERNAL_SERVICE,
            messages=[message],
            http_status=504 if error_type == "timeout" else 502,
            details=additional_details,
        )
        self.error_type = error_type


class StructuralError(AttemptError):
    """Extracted record does not conform to the canonical schema."""

    def __init__(self, issues: Sequence["ValidationIssue"]):
        self.issues = list(issues)
        super().__init__(
            message=f"Extracted record failed schema validation ({len(self.issues)} issues)",
            error_code="STRUCTURAL_INVALID",
            category=ErrorCategory.VALIDATION,
            messages=[f"Schema error at {i.path}: {i.message}" for i in self.issues],
        )


class SemanticError(AttemptError):
    """Structurally valid record violates one or more domain rules."""

    def __init__(self, findings: Sequence["SemanticFinding"]):
        self.findings = list(findings)
        super().__init__(
            message=f"Extracted record failed {len(self.findings)} semantic checks",
            error_code="SEMANTIC_INVALID",
            category=ErrorCategory.BUSINESS_LOGIC,
            messages=[f.message for f in self.findings],
            details={"rules": sorted({f.rule for f in self.findings})},
        )
