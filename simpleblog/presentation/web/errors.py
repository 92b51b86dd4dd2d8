"""JSON API용 도메인 예외 → HTTP 응답 매핑."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from simpleblog.domain.exceptions import (
    PostNotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)


async def _not_found(request: Request, exc: PostNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def _validation(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"error": str(exc), "field": exc.field})


async def _upstream(request: Request, exc: UpstreamUnavailableError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} 저장소 접근 실패: {exc}")
    return JSONResponse(
        status_code=503, content={"error": "Backing store unavailable"}
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PostNotFoundError, _not_found)
    app.add_exception_handler(ValidationError, _validation)
    app.add_exception_handler(UpstreamUnavailableError, _upstream)
