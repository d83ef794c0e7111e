"""Rotas de sistema: boas-vindas, saude e metricas do servico."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.api.dependencies import get_metrics
from app.api.schemas import HealthResponse, WelcomeResponse
from app.services.metrics import MetricsAggregator
from common.config import settings


router = APIRouter(prefix="", tags=["system"])


@router.get("/", response_model=WelcomeResponse, summary="Boas-vindas")
async def index() -> WelcomeResponse:
    return WelcomeResponse(message="Welcome to the DevOps Calculator API", version=settings.app_version)


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health() -> HealthResponse:
    """Retorna o estado do servico e o horario atual (UTC)."""
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc))


@router.get("/metrics", response_class=PlainTextResponse, summary="Métricas Prometheus por rota")
async def metrics(aggregator: MetricsAggregator = Depends(get_metrics)) -> PlainTextResponse:
    """Contagem e latência média por rota (memória local), em texto Prometheus."""
    return PlainTextResponse(aggregator.render_prometheus())
