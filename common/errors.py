"""Exceções específicas da aplicação para padronizar tratamento de erros."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class AppError(Exception):
    """Erro base da aplicação.
    - Atributos
        - code: Código curto e estável para identificação do erro.
        - message: Mensagem legível, devolvida ao cliente.
        - status_code: Código HTTP sugerido quando aplicável.
    """

    code: str
    message: str
    status_code: int = 400


class CalculationError(AppError):
    """Falha de cálculo; sempre um erro do cliente (400)."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(code=code, message=message, status_code=400)


class InvalidNumberError(CalculationError):
    def __init__(self, message: str = "Invalid numbers") -> None:
        super().__init__(code="INVALID_NUMBER", message=message)


class DivisionByZeroError(CalculationError):
    def __init__(self, message: str = "Division by zero") -> None:
        super().__init__(code="DIVISION_BY_ZERO", message=message)


class InvalidOperationError(CalculationError):
    def __init__(self, message: str = "Invalid operation") -> None:
        super().__init__(code="INVALID_OPERATION", message=message)


class InternalError(AppError):
    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(code="INTERNAL_ERROR", message=message, status_code=500)
