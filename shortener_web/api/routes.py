"""API routes implementation."""

from fastapi import APIRouter, Request, Response, status
from datetime import datetime, timezone

from .schemas import (
    URLRequest,
    URLRecordResponse,
    HealthResponse,
    ErrorResponse,
)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Short code not found"}}
INVALID = {400: {"model": ErrorResponse, "description": "Invalid URL or request body"}}
INTERNAL = {500: {"model": ErrorResponse, "description": "Internal server error"}}


@router.post(
    "/shorten",
    response_model=URLRecordResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**INVALID, **INTERNAL},
    summary="Create short URL",
)
async def create_short_url(request: Request, body: URLRequest):
    """Create a shortened URL."""
    service = request.app.state.service
    record = await service.create_short_url(body.url)
    return URLRecordResponse.model_validate(record)


@router.get(
    "/shorten/{short_code}",
    response_model=URLRecordResponse,
    responses={**NOT_FOUND, **INTERNAL},
    summary="Resolve short URL",
    description="Get the record for a short code and count the access.",
)
async def resolve_short_url(request: Request, short_code: str):
    """Resolve a short code."""
    service = request.app.state.service
    record = await service.resolve_short_url(short_code)
    return URLRecordResponse.model_validate(record)


@router.put(
    "/shorten/{short_code}",
    response_model=URLRecordResponse,
    responses={**INVALID, **NOT_FOUND, **INTERNAL},
    summary="Update short URL",
)
async def update_short_url(request: Request, short_code: str, body: URLRequest):
    """Point a short code at a new URL."""
    service = request.app.state.service
    record = await service.update_short_url(short_code, body.url)
    return URLRecordResponse.model_validate(record)


@router.delete(
    "/shorten/{short_code}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **INTERNAL},
    summary="Delete short URL",
)
async def delete_short_url(request: Request, short_code: str):
    """Delete a short URL."""
    service = request.app.state.service
    await service.delete_short_url(short_code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/shorten/{short_code}/stats",
    response_model=URLRecordResponse,
    responses={**NOT_FOUND, **INTERNAL},
    summary="Get URL statistics",
    description="Get the record for a short code without counting an access.",
)
async def get_url_stats(request: Request, short_code: str):
    """Get statistics for a short URL."""
    service = request.app.state.service
    record = await service.get_stats(short_code)
    return URLRecordResponse.model_validate(record)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
