"""Aplicação FastAPI que configura middlewares, dependências e roteadores.
- Importar este módulo apenas constrói a aplicação (`app`); o servidor só
sobe quando executado como processo (`python -m app.main` ou `calculator-api`).
"""

from __future__ import annotations

from fastapi import FastAPI
import structlog
import uvicorn

from app.api.exception_handlers import register_exception_handlers
from app.api.middleware import RequestLogMiddleware
from app.api.routes import calculator as calculator_routes
from app.api.routes import system as system_routes
from app.services.metrics import MetricsAggregator
from common.config import settings
from common.logging import setup_logging


setup_logging(settings.log_level)
logger = structlog.get_logger("api")

description = (
    "API de calculadora com logs estruturados e métricas Prometheus em memória.\n\n"
    "Fluxo: GET /{op}?a=..&b=.. → resultado + traceId; GET /metrics → contadores por rota."
)

openapi_tags = [
    {"name": "calculator", "description": "Operações add, subtract, multiply, divide e power."},
    {"name": "system", "description": "Boas-vindas, saúde do serviço e métricas."},
]


def create_app(metrics: MetricsAggregator | None = None) -> FastAPI:
    """Monta a aplicação com seu próprio agregador de métricas.
    - Parâmetros
        - metrics: Agregador a usar; um novo e vazio quando omitido.
    """
    if metrics is None:
        metrics = MetricsAggregator()
    app = FastAPI(
        title="Calculator API",
        version=settings.app_version,
        description=description,
        license_info={"name": "MIT"},
        openapi_tags=openapi_tags,
    )
    app.state.metrics = metrics
    app.add_middleware(RequestLogMiddleware, metrics=metrics)

    # Rotas literais antes do segmento livre /{op}.
    app.include_router(system_routes.router)
    app.include_router(calculator_routes.router)

    register_exception_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Sobe o servidor uvicorn em HOST:PORT."""
    logger.info(f"Calculator API running on port {settings.port}", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
