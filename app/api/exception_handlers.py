"""Handlers de excecao para respostas padronizadas em JSON."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from app.api.middleware import TRACE_ID_HEADER
from app.api.schemas import ErrorResponse
from common.errors import CalculationError, InternalError


logger = structlog.get_logger("api.errors")


def _trace_id(request: Request) -> str | None:
    # Ausente apenas se a falha ocorreu antes do middleware.
    return getattr(request.state, "trace_id", None)


def _error_response(
    status_code: int, message: str, trace_id: str | None, *, headers: dict[str, str] | None = None
) -> JSONResponse:
    content = ErrorResponse(error=message, trace_id=trace_id).model_dump(by_alias=True)
    headers = dict(headers or {})
    if trace_id:
        headers[TRACE_ID_HEADER] = trace_id
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Registra handlers para erros comuns retornando JSON padronizado."""

    @app.exception_handler(CalculationError)
    async def calculation_error_handler(request: Request, exc: CalculationError):
        trace_id = _trace_id(request)
        logger.error("Calculation error", code=exc.code, error=exc.message, trace_id=trace_id)
        return _error_response(exc.status_code, exc.message, trace_id)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        trace_id = _trace_id(request)
        logger.info("http_exception", status_code=exc.status_code, detail=str(exc.detail), trace_id=trace_id)
        return _error_response(exc.status_code, str(exc.detail), trace_id, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception):
        trace_id = _trace_id(request)
        logger.exception("Unhandled error", error=str(exc), trace_id=trace_id)
        internal = InternalError()
        return _error_response(internal.status_code, internal.message, trace_id)
