"""Pydantic models for API requests and responses."""

from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Health
# =============================================================================


class HealthResponse(BaseModel):
    """Response body for the health check."""

    status: str
    version: str
    loader: str | None = None


# =============================================================================
# Render
# =============================================================================


class RenderRequest(BaseModel):
    """Request body for rendering a template."""

    template: str = Field(..., description="Template markup")
    data: Any = Field(default_factory=dict, description="JSON data (root context)")
    partials: dict[str, str] = Field(
        default_factory=dict,
        description="Inline partials by include identifier, tried before the configured loader",
    )
    target: str | None = Field(
        default=None,
        description="Markup of a single mount element; output is mounted into it",
    )
    replace: bool = Field(default=False, description="Replace the target's children")


class RenderResponse(BaseModel):
    """Response body for a render."""

    html: str


# =============================================================================
# Directives
# =============================================================================


class DirectiveResponse(BaseModel):
    """One directive of the template vocabulary."""

    name: str
    attributes: list[str]
    syntax: str
    description: str


class DirectiveListResponse(BaseModel):
    """The full directive vocabulary, in processing order."""

    directives: list[DirectiveResponse]
    placeholder: str
    synthetic_keys: list[str]
