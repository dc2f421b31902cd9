"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime

from tinylink.shortcode import CODE_RULE


class CreateLinkRequest(BaseModel):
    """Request to create a short link.

    ``target`` is optional at the schema level so a missing value is reported
    by the registry as a 400 instead of a generic validation error.
    """

    target: Optional[str] = Field(None, description="Absolute http/https URL to redirect to")
    code: Optional[str] = Field(None, description=f"Optional custom code ({CODE_RULE})")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "target": "https://example.com/very/long/path/to/resource",
                    "code": None
                },
                {
                    "target": "https://github.com/user/repo",
                    "code": "myRepo01"
                }
            ]
        }
    }


class LinkResponse(BaseModel):
    """A link with its usage metadata and public short URL."""

    code: str
    target: str
    short_url: str = Field(..., alias="shortUrl", description="The complete short URL")
    clicks: int
    created_at: datetime
    last_clicked: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True)


class LinkListResponse(BaseModel):
    """One page of links, newest first."""

    count: int
    rows: List[LinkResponse]


class DeleteResponse(BaseModel):
    deleted: str


class VisitDebugResponse(BaseModel):
    """Returned by GET /{code}?test=1 instead of a redirect."""

    message: str
    target: str


class HealthResponse(BaseModel):
    """Health check response."""

    ok: bool = Field(..., description="Overall status")
    version: str
    database: str = Field(..., description="Store status")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
