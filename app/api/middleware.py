"""Middleware de logging e metricas de requisicoes HTTP para a API."""

from __future__ import annotations

import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import structlog

from app.services.metrics import MetricsAggregator


logger = structlog.get_logger("api")

TRACE_ID_HEADER = "X-Trace-Id"


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Atribui trace id, registra inicio/fim da requisicao e alimenta as metricas."""

    def __init__(self, app: ASGIApp, metrics: MetricsAggregator) -> None:
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next: Callable):
        """Processa a requisicao/resposta e emite os logs estruturados.
        - O registro de metricas e o log de conclusao rodam uma unica vez,
        inclusive quando o handler levanta excecao (status 500).
        """
        trace_id = str(uuid.uuid4())
        request.state.trace_id = trace_id
        path = request.url.path
        start = time.perf_counter()
        logger.info("Incoming request", method=request.method, path=path, trace_id=trace_id)

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[TRACE_ID_HEADER] = trace_id
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.metrics.record(path, elapsed_ms)
            logger.info(
                "Request completed",
                path=path,
                status_code=status_code,
                trace_id=trace_id,
                response_time_ms=round(elapsed_ms, 2),
            )
