"""
FastAPI routes for File Diff Finder.

Thin routes that delegate to the diff finder and the admission cache.
"""

import json

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import ValidationError

from api.schemas import ChangeRecordResponse, DiffRequest, DiffResponse, ErrorResponse
from diffing.cancellation import CancelSignal
from diffing.change_detector import FileDiffFinder
from diffing.exceptions import DiffCancelledError, PayloadError, VersionError
from services.metrics_tracker import metrics_tracker
from storage.cache import READINESS_KEY, InMemoryCache

logger = structlog.get_logger()

router = APIRouter()


def get_diff_finder(request: Request) -> FileDiffFinder:
    return request.app.state.diff_finder


def get_cache(request: Request) -> InMemoryCache:
    return request.app.state.cache


def get_diff_timeout(request: Request) -> float:
    return request.app.state.diff_timeout


def error_response(message: str, code: int) -> JSONResponse:
    """Build the JSON error body shared by all endpoints."""
    return JSONResponse(
        status_code=code,
        content=ErrorResponse(Message=message, Code=code).model_dump()
    )


# =============================================================================
# Diff
# =============================================================================

@router.api_route(
    "/diff",
    methods=["GET", "POST"],
    response_model=DiffResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def diff(
    request: Request,
    diff_finder: FileDiffFinder = Depends(get_diff_finder),
    cache: InMemoryCache = Depends(get_cache),
    diff_timeout: float = Depends(get_diff_timeout)
):
    """
    Compute the delta between the baseline file and the submitted text.

    The body is JSON `{"text": str, "version": int}`; the version must be
    exactly one past the baseline version. Only one diff per version may be
    in flight at a time.
    """
    try:
        payload = DiffRequest.model_validate(json.loads(await request.body()))
    except (ValueError, ValidationError):
        return error_response("error on parsing payload", 400)

    try:
        payload.validate_payload()
        diff_finder.validate_version(payload.version)
    except (PayloadError, VersionError) as e:
        return error_response(str(e), 400)

    key = str(payload.version)
    if not cache.add(key, True):
        return error_response("another process is getting the diff", 422)

    try:
        cancel_signal = CancelSignal.with_timeout(diff_timeout)
        delta = await diff_finder.diff_async(cancel_signal, payload.text)
    except DiffCancelledError as e:
        logger.error("error on running diff", error=str(e), version=payload.version)
        return error_response(str(e), 500)
    finally:
        cache.delete(key)

    logger.info(
        "Diff computed",
        current_version=diff_finder.version(),
        updated_version=payload.version,
        changes=len(delta)
    )

    return DiffResponse(
        delta=[ChangeRecordResponse.from_record(record) for record in delta],
        current_version=diff_finder.version(),
        updated_version=payload.version
    )


# =============================================================================
# Health and metrics
# =============================================================================

@router.get("/live")
async def liveness():
    return Response(status_code=200, media_type="application/json")


@router.get("/ready")
async def readiness(cache: InMemoryCache = Depends(get_cache)):
    """Ready while the cache still holds the readiness key."""
    _, exists = cache.get(READINESS_KEY)
    if not exists:
        logger.warning("cache has no readiness key, service is restarting")
        return error_response("error cache is not ok", 500)

    return Response(status_code=200, media_type="application/json")


@router.get("/metrics", response_class=PlainTextResponse)
async def metrics():
    return PlainTextResponse(
        metrics_tracker.export_prometheus(),
        media_type="text/plain; version=0.0.4"
    )
