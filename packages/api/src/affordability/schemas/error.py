# This project was developed with assistance from AI tools.
"""Problem Details body for HTTP errors (RFC 7807).

Calculator input errors are not HTTP errors: they come back as a 200 with
``valid=false``. This body covers malformed requests, unknown routes and
unexpected failures. For malformed requests ``errors`` uses the same
field -> reason shape as ``CalculationResponse.errors``.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """See https://datatracker.ietf.org/doc/html/rfc7807"""

    type: str = "about:blank"
    title: str
    status: int
    detail: str = ""
    request_id: str = Field(default="", description="Echoed x-request-id, or a generated one.")
    errors: dict[str, str] = Field(
        default_factory=dict,
        description="Request field -> reason, for 422 responses.",
    )
