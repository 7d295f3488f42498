"""Error Hierarchy — typed, categorized exceptions for the people API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_envelope() produces the same {message, logref, links.self} shape as
      the HTTP error handlers

Design Decisions:
    - Single hierarchy with PeopleApiError base: one global handler catches all
    - Absent person is a domain error raised by the route, not by PersonResource
      (get_by_key returns None; the HTTP layer decides it is a 404)
"""

from enum import Enum

from people_api.schemas.envelope import ErrorEnvelope


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"


class PeopleApiError(Exception):
    """Base exception for all people API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_envelope(self, uri: str) -> ErrorEnvelope:
        """Convert to the REST error envelope linked to the request URI."""
        return ErrorEnvelope.for_request(self.message, uri, logref=self.code)


class PersonNotFoundError(PeopleApiError):
    """No person stored under the requested key."""
    def __init__(self, key: str):
        super().__init__(
            f"Person '{key}' not found",
            "PERSON_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.key = key
