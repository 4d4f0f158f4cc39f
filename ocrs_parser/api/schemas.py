"""Pydantic request/response schemas for API endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ParseRequest(BaseModel):
    # Length limits are enforced by the preprocessor so that oversized
    # input surfaces as INPUT_TOO_LARGE rather than a generic 422.
    text: str = Field(..., description="Free-form cheesemaking recipe text")


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    See: https://www.rfc-editor.org/rfc/rfc7807
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary of the problem")
    status: int = Field(..., description="HTTP status code for this problem")
    detail: Optional[str] = Field(
        None, description="Human-readable explanation specific to this occurrence"
    )
    instance: Optional[str] = Field(
        None, description="URI reference identifying this specific occurrence (e.g., request path)"
    )

    # Extension members (allowed by RFC 7807)
    code: str = Field(..., description="Application-specific error code")
    category: str = Field(..., description="Error category (client_error, server_error, etc.)")
    retryable: bool = Field(default=False, description="Whether the request can be retried")
    request_id: Optional[str] = Field(None, description="X-Request-ID of the failed request")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "/errors/EMPTY_INPUT",
                "title": "Input text is empty",
                "status": 400,
                "instance": "/v1/recipes/parse",
                "code": "EMPTY_INPUT",
                "category": "client_error",
                "retryable": False,
                "request_id": "3f2b9c0d6f4e4f1b8f0e7c6a5d4b3a21",
            }
        }
    )


class HealthResponse(BaseModel):
    status: str = Field(..., description="healthy | unhealthy")
    service: str
    version: str
    max_attempts: Optional[int] = Field(
        None, description="Extraction attempts per request, when the pipeline is ready"
    )
