"""Redirect and health routes."""

from typing import Optional

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

import tinylink

from ..api.schemas import ErrorResponse, HealthResponse, VisitDebugResponse

router = APIRouter()


@router.get(
    "/healthz",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse, "description": "Store unreachable"}},
    summary="Health check",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    registry = request.app.state.service

    health = await registry.health_check()
    body = HealthResponse(
        ok=health["overall"],
        version=tinylink.__version__,
        database="healthy" if health["database"] else "unhealthy",
    )

    if not health["overall"]:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(),
        )
    return body


@router.get(
    "/{code}",
    responses={
        302: {"description": "Redirect to the target"},
        404: {"model": ErrorResponse, "description": "Code not found"},
    },
    summary="Visit short link",
    description="Count a click and redirect. With ?test=1 returns JSON instead of redirecting.",
)
async def visit(
    request: Request,
    code: str,
    test: Optional[str] = Query(None, description="Set to 1 to get JSON instead of a redirect"),
):
    """Redirect to the target, counting one click."""
    registry = request.app.state.service

    target = await registry.resolve_and_record_visit(code)

    if test == "1":
        return VisitDebugResponse(message="click updated", target=target)

    # 302 so browsers come back through us and every visit is counted
    return RedirectResponse(url=target, status_code=status.HTTP_302_FOUND)
