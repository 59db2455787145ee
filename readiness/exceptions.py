"""Custom exceptions for the scoring engine."""

from typing import Any


class ReadinessError(Exception):
    """Base exception for the AI readiness engine."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ValidationError(ReadinessError):
    """Caller supplied input that violates the engine's contract."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            code="validation_error",
            details=details,
        )


class InvalidWeightsError(ValidationError):
    """Dimension weight override rejected at the boundary."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message=message, field="weights")
        self.code = "invalid_weights"
        if errors:
            self.details["errors"] = errors


class UnknownIssueCodeError(ReadinessError):
    """An issue code that is not present in the registry."""

    def __init__(self, issue_code: str):
        super().__init__(
            message=f"Issue code '{issue_code}' is not registered",
            code="unknown_issue_code",
            details={"issue_code": issue_code},
        )
