from typing import Any, Literal, Union
from pydantic import BaseModel, Field


class NotConfigured(BaseModel):
    """No database connection target was supplied."""
    kind: Literal["not_configured"] = "not_configured"


class Success(BaseModel):
    """Connection succeeded; `timestamp` is whatever the probe query returned."""
    kind: Literal["success"] = "success"
    timestamp: Any = Field(..., description="Server-reported current date-time")


class Failure(BaseModel):
    """Token acquisition, connection open or query execution failed."""
    kind: Literal["failure"] = "failure"
    message: str = Field(..., description="Human-readable error message")


ProbeResult = Union[NotConfigured, Success, Failure]


class HealthResponse(BaseModel):
    """Response model for the liveness endpoint."""
    status: str = Field("healthy", description="Static liveness status")
