"""Error Handlers — ordered (predicate, handler) chain for every failure path.

Invariants:
    - Every error response is an ErrorEnvelope: message, logref, links.self
    - links.self is the request URI (path plus query string)
    - First matching predicate wins; the last entry matches everything
    - The catch-all never leaks tracebacks, only the fault's message

Design Decisions:
    - One explicit ERROR_CHAIN over per-type decorators: the priority order
      (body parse → not found → domain → other HTTP → catch-all) is visible
      in one place and testable without an app
    - Key-absent and no-route both answer 404 "Page Not Found"; logref tells
      them apart (PERSON_NOT_FOUND vs ROUTE_NOT_FOUND)
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from people_api.core.error_translation import (
    describe_fault,
    describe_validation_errors,
    malformed_body,
    not_found,
    unhandled_fault,
)
from people_api.core.errors import ErrorSeverity, PeopleApiError, PersonNotFoundError
from people_api.schemas.envelope import ErrorEnvelope

logger = logging.getLogger(__name__)

Predicate = Callable[[Exception], bool]
Handler = Callable[[Request, Exception], JSONResponse]


def request_uri(request: Request) -> str:
    """Path plus query string, as the client sent it."""
    uri = request.url.path
    if request.url.query:
        uri = f"{uri}?{request.url.query}"
    return uri


def register_error_handlers(app: FastAPI) -> None:
    """Route every handled exception type through dispatch_error."""
    for exc_type in (
        RequestValidationError, StarletteHTTPException, PeopleApiError, Exception,
    ):
        app.add_exception_handler(exc_type, dispatch_error)


async def dispatch_error(request: Request, exc: Exception) -> JSONResponse:
    """Walk ERROR_CHAIN and answer with the first matching handler."""
    for matches, handler in ERROR_CHAIN:
        if matches(exc):
            return handler(request, exc)
    return _handle_unhandled_fault(request, exc)


def _respond(
    status_code: int, envelope: ErrorEnvelope, headers: dict | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=envelope.to_response(), headers=headers,
    )


# ─── Predicates ─────────────────────────────────────────────────

def _is_body_parse_error(exc: Exception) -> bool:
    return isinstance(exc, RequestValidationError) and any(
        tuple(e.get("loc", ()))[:1] == ("body",) for e in exc.errors()
    )


def _is_request_validation_error(exc: Exception) -> bool:
    return isinstance(exc, RequestValidationError)


def _is_route_not_found(exc: Exception) -> bool:
    return (
        isinstance(exc, StarletteHTTPException)
        and exc.status_code == status.HTTP_404_NOT_FOUND
    )


def _is_domain_error(exc: Exception) -> bool:
    return isinstance(exc, PeopleApiError)


def _is_http_error(exc: Exception) -> bool:
    return isinstance(exc, StarletteHTTPException)


def _always(exc: Exception) -> bool:
    return True


# ─── Handlers ───────────────────────────────────────────────────

def _handle_malformed_body(request: Request, exc: Exception) -> JSONResponse:
    description = describe_validation_errors(exc.errors())
    logger.warning(
        f"Malformed body on {request.url.path}: {description}",
        extra={"error_code": "INVALID_JSON", "path": request.url.path,
               "status_code": 400},
    )
    return _respond(*malformed_body(request_uri(request), description))


def _handle_invalid_request(request: Request, exc: Exception) -> JSONResponse:
    description = describe_validation_errors(exc.errors())
    logger.warning(
        f"Validation error on {request.url.path}: {description}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path,
               "status_code": 400},
    )
    return _respond(400, ErrorEnvelope.for_request(
        description, request_uri(request), logref="VALIDATION_ERROR",
    ))


def _handle_route_not_found(request: Request, exc: Exception) -> JSONResponse:
    logger.warning(
        f"No route for {request.method} {request.url.path}",
        extra={"error_code": "ROUTE_NOT_FOUND", "path": request.url.path,
               "status_code": 404},
    )
    return _respond(*not_found(request_uri(request)))


def _handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    level = logging.ERROR if exc.severity == ErrorSeverity.ERROR else logging.WARNING
    logger.log(
        level,
        f"PeopleApiError: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path,
               "status_code": exc.http_status,
               "severity": exc.severity.value,
               "category": exc.category.value},
    )
    uri = request_uri(request)
    if isinstance(exc, PersonNotFoundError):
        return _respond(*not_found(uri, logref=exc.code))
    return _respond(exc.http_status, exc.to_envelope(uri))


def _handle_http_error(request: Request, exc: Exception) -> JSONResponse:
    logger.warning(
        f"HTTP {exc.status_code} on {request.method} {request.url.path}",
        extra={"error_code": f"HTTP_{exc.status_code}", "path": request.url.path,
               "status_code": exc.status_code},
    )
    envelope = ErrorEnvelope.for_request(
        str(exc.detail), request_uri(request), logref=f"HTTP_{exc.status_code}",
    )
    return _respond(exc.status_code, envelope, headers=exc.headers)


def _handle_unhandled_fault(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {describe_fault(exc)}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path,
               "status_code": 500},
    )
    return _respond(*unhandled_fault(request_uri(request), exc))


ERROR_CHAIN: list[tuple[Predicate, Handler]] = [
    (_is_body_parse_error, _handle_malformed_body),
    (_is_request_validation_error, _handle_invalid_request),
    (_is_route_not_found, _handle_route_not_found),
    (_is_domain_error, _handle_domain_error),
    (_is_http_error, _handle_http_error),
    (_always, _handle_unhandled_fault),
]
