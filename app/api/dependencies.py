"""Dependencias FastAPI compartilhadas pelas rotas."""

from __future__ import annotations

from fastapi import Request

from app.services.metrics import MetricsAggregator


def get_trace_id(request: Request) -> str:
    """Trace id atribuido pelo `RequestLogMiddleware` a esta requisicao."""
    return request.state.trace_id


def get_metrics(request: Request) -> MetricsAggregator:
    return request.app.state.metrics
