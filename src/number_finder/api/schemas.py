"""
Pydantic v2 response schemas for the number-finder API.

Schemas are separate from the core dataclasses in ``number_finder.core``
to provide a stable, explicit API contract. Internal representations may
change without affecting the API surface.

Naming convention:
    - Response schemas: ``<Resource>Response``
    - Error bodies:     ``ErrorResponse`` (nested under ``detail``)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from number_finder.core import LookupResult


# ---------------------------------------------------------------------------
# Shared / error
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """
    Structured error body returned for all 4xx responses.

    Matches the CLI error format (error type, human message, optional hint).
    """

    error: str = Field(..., description="Machine-readable error type")
    message: str = Field(..., description="Human-readable error description")
    details: str | None = Field(None, description="Additional technical context")
    hint: str | None = Field(None, description="Suggested remediation action")


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class LookupResponse(BaseModel):
    """
    Response for ``GET /api/number/{number}``.

    Serialised with camelCase ``isApproximate``; accepts either spelling
    on input.
    """

    model_config = ConfigDict(populate_by_name=True)

    index: int = Field(..., ge=0, description="Zero-based position in the dataset")
    value: int = Field(..., description="Value stored at ``index``")
    is_approximate: bool = Field(
        ...,
        alias="isApproximate",
        description="True when ``value`` is a neighbour accepted within the threshold",
    )

    @classmethod
    def from_result(cls, result: LookupResult) -> LookupResponse:
        """Build the response from an engine hit."""
        return cls(
            index=result.index,
            value=result.value,
            is_approximate=result.is_approximate,
        )


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Response for ``GET /api/health``."""

    status: str = "ok"
    version: str
