"""Pydantic models for test page endpoints."""
from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field


class FormHandlerResponse(BaseModel):
    """Response model for the form submission echo."""
    success: bool = Field(..., description="Whether the submission was accepted")
    message: str = Field(..., description="Operation message")
    data: Any = Field(..., description="Posted body, parsed according to its content type")
    timestamp: str = Field(..., description="Server timestamp (ISO 8601, UTC)")
    headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Echoed request headers (content-type, user-agent, origin, referer) when present"
    )


class IframeInfoResponse(BaseModel):
    """Response model describing frame-related security headers."""
    model_config = ConfigDict(populate_by_name=True)

    server_origin: str = Field(..., alias="serverOrigin", description="Origin header of the caller, or 'unknown'")
    security_headers: Dict[str, str] = Field(..., alias="securityHeaders", description="Header name to meaning")
    common_restrictions: List[str] = Field(..., alias="commonRestrictions", description="General cross-origin restrictions")
