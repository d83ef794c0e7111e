"""Configuração compartilhada de logs estruturados.
- Fornece `setup_logging`, que configura o `structlog` para emitir uma linha
JSON por evento com `timestamp`, `level` e `message`, além dos campos
estruturados de cada chamada (trace_id, path, status_code...).
"""

from __future__ import annotations
import logging
import sys
from typing import TextIO

import structlog


def setup_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> None:
    """Configura o `structlog` e o logging padrão.
    - Parâmetros
        - level: Nível mínimo de log (inteiro ou nome, ex.: "INFO").
        - stream: Destino das linhas JSON; padrão `sys.stdout`.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    stream = stream or sys.stdout

    logging.basicConfig(format="%(message)s", stream=stream, level=level)

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )
