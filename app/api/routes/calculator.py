"""Rota de calculo: `GET /{op}?a=..&b=..`.
- Registrada depois das rotas de sistema para que `/`, `/health` e `/metrics`
tenham precedencia sobre o segmento livre.
"""

from __future__ import annotations

import math

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_trace_id
from app.api.schemas import CalculationResponse
from app.services.calculator import calculate, parse_operand


router = APIRouter(prefix="", tags=["calculator"])


def _json_number(value: float) -> float | None:
    return value if math.isfinite(value) else None


@router.get(
    "/{op}",
    response_model=CalculationResponse,
    summary="Executa uma operacao aritmetica",
    description=(
        "Operacoes: add, subtract, multiply, divide, power. "
        "Erros de calculo retornam 400 com a mensagem e o traceId."
    ),
)
async def run_operation(
    op: str,
    a: str | None = Query(default=None, description="Primeiro operando"),
    b: str | None = Query(default=None, description="Segundo operando"),
    trace_id: str = Depends(get_trace_id),
) -> CalculationResponse:
    result = calculate(op, a, b)
    return CalculationResponse(
        operation=op,
        a=_json_number(parse_operand(a)),
        b=_json_number(parse_operand(b)),
        result=_json_number(result),
        trace_id=trace_id,
    )
