"""Error Envelope — the JSON body of every error response.

Invariants:
    - links.self is the URI of the request that failed (path plus query)
    - Built fresh per error, never stored
"""

from pydantic import BaseModel, ConfigDict, Field


class Links(BaseModel):
    """Hypermedia links carried by an envelope."""
    self_: str = Field(alias="self")

    model_config = ConfigDict(populate_by_name=True)


class ErrorEnvelope(BaseModel):
    """Human-readable message, optional log reference, self-link."""
    message: str
    logref: str | None = None
    links: Links

    @classmethod
    def for_request(
        cls, message: str, uri: str, logref: str | None = None,
    ) -> "ErrorEnvelope":
        return cls(message=message, logref=logref, links=Links(self_=uri))

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)
