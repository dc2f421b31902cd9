"""API routes implementation."""

from typing import Optional

from fastapi import APIRouter, Query, Request, status

from tinylink.common.url_builder import build_short_url
from tinylink.database.models import Link

from .schemas import (
    CreateLinkRequest,
    DeleteResponse,
    ErrorResponse,
    LinkListResponse,
    LinkResponse,
)

router = APIRouter()


def to_response(link: Link, base_url: str) -> LinkResponse:
    return LinkResponse(
        code=link.code,
        target=link.target,
        short_url=build_short_url(link.code, base_url),
        clicks=link.clicks,
        created_at=link.created_at,
        last_clicked=link.last_clicked,
    )


@router.post(
    "/links",
    response_model=LinkResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid target or code"},
        409: {"model": ErrorResponse, "description": "Code already exists"},
        503: {"model": ErrorResponse, "description": "No free code found, retry"},
    },
    summary="Create short link",
    description="Create a short link. Optionally provide a custom code.",
)
async def create_link(request: Request, body: CreateLinkRequest):
    """Create a short link."""
    registry = request.app.state.service
    config = request.app.state.config

    link = await registry.create(body.target, body.code)
    return to_response(link, config.resolved_base_url)


@router.get(
    "/links",
    response_model=LinkListResponse,
    response_model_by_alias=True,
    summary="List links",
    description="List links newest first. limit defaults to 50 and is clamped to 1-100.",
)
async def list_links(
    request: Request,
    limit: Optional[str] = Query(None, description="Page size (1-100, default 50)"),
    offset: Optional[str] = Query(None, description="Rows to skip (default 0)"),
):
    """List links."""
    registry = request.app.state.service
    config = request.app.state.config

    links = await registry.list(limit, offset)
    rows = [to_response(link, config.resolved_base_url) for link in links]
    return LinkListResponse(count=len(rows), rows=rows)


@router.get(
    "/links/{code}",
    response_model=LinkResponse,
    response_model_by_alias=True,
    responses={
        404: {"model": ErrorResponse, "description": "Code not found"},
    },
    summary="Get link metadata",
    description="Get a link and its click statistics without counting a click.",
)
async def get_link(request: Request, code: str):
    """Get link metadata."""
    registry = request.app.state.service
    config = request.app.state.config

    link = await registry.get_metadata(code)
    return to_response(link, config.resolved_base_url)


@router.delete(
    "/links/{code}",
    response_model=DeleteResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Code not found"},
    },
    summary="Delete link",
)
async def delete_link(request: Request, code: str):
    """Hard-delete a link."""
    registry = request.app.state.service

    deleted = await registry.delete(code)
    return DeleteResponse(deleted=deleted)
