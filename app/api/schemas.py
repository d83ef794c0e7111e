"""Esquemas Pydantic usados pela API publica.
- Define os payloads de resposta dos endpoints FastAPI. O trace id e
serializado como `traceId`.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class WelcomeResponse(BaseModel):
    message: str
    version: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime


class CalculationResponse(BaseModel):
    """Resultado de uma operacao.
    - Atributos
        - operation: Nome da operacao pedida na rota.
        - a, b: Operandos ja convertidos para numero.
        - result: Resultado; `None` quando nao finito (inf/NaN nao existem em JSON).
        - trace_id: Trace id da requisicao.
    """

    operation: str
    a: float | None
    b: float | None
    result: float | None
    trace_id: str = Field(..., serialization_alias="traceId")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"operation": "add", "a": 5, "b": 3, "result": 8, "traceId": "6f1c..."},
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Corpo padrao de erro: mensagem legivel e trace id."""

    error: str
    trace_id: str | None = Field(default=None, serialization_alias="traceId")
