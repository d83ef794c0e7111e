"""Despacho das operações aritméticas expostas pela API."""

from __future__ import annotations

import math
import operator
import re
from typing import Callable

from common.errors import DivisionByZeroError, InvalidNumberError, InvalidOperationError


# Mesmo prefixo aceito pelo parseFloat do JavaScript: "5abc" -> 5, "  -1e3x" -> -1000.
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))", re.ASCII)


def parse_operand(raw: str | None) -> float:
    """Converte um operando textual em float.
    - Usa o maior prefixo numérico da string; sem prefixo válido (ou valor
    ausente) levanta `InvalidNumberError`.
    """
    if raw is None:
        raise InvalidNumberError()
    match = _NUMBER_PREFIX.match(raw)
    if not match:
        raise InvalidNumberError()
    return float(match.group(1).replace("Infinity", "inf"))


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def _power(a: float, b: float) -> float:
    """Exponenciação com semântica IEEE (inf/NaN em vez de exceções)."""
    if abs(a) == 1 and math.isinf(b):
        # Math.pow do JavaScript: (±1) ** ±Infinity é NaN, não 1.
        return math.nan
    try:
        return math.pow(a, b)
    except OverflowError:
        odd_exponent = b.is_integer() and b % 2 == 1
        return -math.inf if a < 0 and odd_exponent else math.inf
    except ValueError:
        if a == 0:
            # 0 elevado a expoente negativo
            odd_exponent = b.is_integer() and b % 2 == 1
            return math.copysign(math.inf, a) if odd_exponent else math.inf
        return math.nan


OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
    "divide": _divide,
    "power": _power,
}


def calculate(op: str, a: str | None, b: str | None) -> float:
    """Executa a operação `op` sobre os operandos `a` e `b`.
    - Parâmetros
        - op: Nome da operação (add, subtract, multiply, divide, power).
        - a, b: Operandos como recebidos na query string.
    - Os operandos são validados antes do nome da operação.
    - Levanta `InvalidNumberError`, `DivisionByZeroError` ou
    `InvalidOperationError`.
    """
    num_a = parse_operand(a)
    num_b = parse_operand(b)
    func = OPERATIONS.get(op)
    if func is None:
        raise InvalidOperationError()
    return func(num_a, num_b)
