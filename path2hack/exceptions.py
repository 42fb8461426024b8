"""
Path2Hack Backend: Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the failure classes the API knows about.
How:   Each exception carries a public message, an HTTP status code and an optional
       context dict. Global exception handlers (registered in main.py) turn them
       into `{"error": <message>}` JSON responses.
Who:   Raised by services; caught by the global handlers.

Exception Hierarchy:
    Path2HackError (base)          → 500
    ├── ConflictError              → 400 (duplicate project name)
    ├── MalformedInputError        → 500 (e.g. techStack is not a JSON array)
    ├── UpstreamServiceError       → 500
    │   ├── LLMServiceError        (Gemini call failed)
    │   ├── GitHubServiceError     (repository listing failed)
    │   └── PageFetchError         (scrape target unreachable or non-2xx)
    ├── DatabaseError              → 500
    └── FileStorageError           → 500

    Malformed input and upstream failures deliberately share the generic 500:
    the caller only ever sees the static message, the details stay in the logs.
"""

from typing import Any, Dict, Optional


class Path2HackError(Exception):
    """
    Base exception for all Path2Hack application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status the global handler responds with
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ConflictError(Path2HackError):
    """
    Raised when an insert collides with an existing record's unique key.

    HTTP: 400 Bad Request. The frontend already treats 400 as "name taken",
    so this keeps that contract rather than switching to 409.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Record already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class MalformedInputError(Path2HackError):
    """Raised when a form field cannot be decoded (e.g. invalid techStack JSON)."""

    def __init__(
        self,
        message: str = "Malformed input",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UpstreamServiceError(Path2HackError):
    """
    Raised when a third-party dependency fails.

    No retries are attempted anywhere; the first failure is final.
    """

    def __init__(
        self,
        message: str = "An upstream service is unavailable",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class LLMServiceError(UpstreamServiceError):
    """Raised when the Gemini call errors or returns no usable text."""

    def __init__(
        self,
        message: str = "AI generation service is unavailable",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class GitHubServiceError(UpstreamServiceError):
    """
    Raised when the GitHub repository listing cannot be read.

    Covers unknown users (404), rate limiting (403) and unexpected payloads
    alike; callers do not distinguish between them.
    """

    def __init__(
        self,
        message: str = "Could not read GitHub repositories",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class PageFetchError(UpstreamServiceError):
    """Raised when a scrape target cannot be fetched or answers with a non-2xx status."""

    def __init__(
        self,
        message: str = "Could not fetch the requested page",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(Path2HackError):
    """
    Raised when database operations fail unexpectedly.

    Security Note:
        The message returned to the client is always generic. Constraint names,
        SQL and driver errors are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FileStorageError(Path2HackError):
    """Raised when an uploaded file cannot be written to the upload directory."""

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
