"""Error Translation — pure mapping from failure kind to (status, envelope).

Invariants:
    - malformed_body → 400, "Invalid JSON: <description>"
    - unhandled_fault → 500, "Bad Things Happened: <fault>"; never raises
    - not_found → 404, fixed "Page Not Found" message
    - Every envelope links back to the request URI

Design Decisions:
    - No Request objects here: the HTTP layer extracts the URI and the
      description, so translators stay testable without an app
"""

from people_api.schemas.envelope import ErrorEnvelope

NOT_FOUND_MESSAGE = "Page Not Found"


def malformed_body(uri: str, description: str) -> tuple[int, ErrorEnvelope]:
    """Inbound body could not be parsed into the expected shape."""
    return 400, ErrorEnvelope.for_request(
        f"Invalid JSON: {description}", uri, logref="INVALID_JSON",
    )


def unhandled_fault(uri: str, fault: BaseException) -> tuple[int, ErrorEnvelope]:
    """Global fallback for anything no other handler claimed."""
    return 500, ErrorEnvelope.for_request(
        f"Bad Things Happened: {describe_fault(fault)}", uri,
        logref="INTERNAL_ERROR",
    )


def not_found(uri: str, logref: str = "ROUTE_NOT_FOUND") -> tuple[int, ErrorEnvelope]:
    """No route matched, or the addressed person does not exist."""
    return 404, ErrorEnvelope.for_request(NOT_FOUND_MESSAGE, uri, logref=logref)


def describe_fault(fault: BaseException) -> str:
    """str(fault), falling back to the class name if __str__ itself fails."""
    try:
        return str(fault)
    except Exception:
        return type(fault).__name__


def describe_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic/FastAPI error dicts into one line.

    JSON decode errors carry the decoder's reason in ctx["error"]
    (e.g. "Expecting value"); it is appended to the generic msg.
    """
    parts = []
    for e in errors:
        text = e.get("msg", "invalid input")
        detail = (e.get("ctx") or {}).get("error")
        if detail:
            text = f"{text}: {detail}"
        parts.append(text)
    return "; ".join(parts) or "unparseable body"
