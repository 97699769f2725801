"""
Shared exceptions for the statement extraction pipeline.

Each error knows the HTTP status and JSON body it is reported with, so the
handler can map any pipeline failure to a response in one place.
"""

from typing import Any


class StatementExtractionError(Exception):
    """Base class for failures that terminate an extraction request."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_content(self) -> dict[str, Any]:
        """Return the JSON error body for this failure."""
        return {"error": self.message}


class MethodNotAllowedError(StatementExtractionError):
    """Raised for any HTTP verb other than POST or OPTIONS."""

    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class InvalidRequestError(StatementExtractionError):
    """Raised when the request body is missing required fields or malformed."""

    status_code = 400


class MissingFieldsError(InvalidRequestError):
    """Raised when pdfBase64 or apiKey is absent or empty."""

    def __init__(self, message: str = "Missing pdfBase64 or apiKey"):
        super().__init__(message)


class UpstreamAPIError(StatementExtractionError):
    """Raised when the Anthropic API answers with a non-success status."""


class UpstreamResponseError(StatementExtractionError):
    """Raised when a successful upstream envelope lacks a text content block."""


class ResponseParseError(StatementExtractionError):
    """Raised when no JSON document can be recovered from the model output."""

    def __init__(self, raw: str, message: str = "Could not parse AI response"):
        super().__init__(message)
        self.raw = raw

    def to_content(self) -> dict[str, Any]:
        return {"error": self.message, "raw": self.raw}


class NoTransactionsError(StatementExtractionError):
    """Raised when the model output holds no transactions."""

    status_code = 400

    def __init__(self, message: str = "No transactions found in statement"):
        super().__init__(message)
