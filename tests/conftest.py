"""Fixtures compartilhadas: app isolada por teste, cliente HTTP e logger de captura."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_app


class RecordingLogger:
    """Substitui um logger structlog guardando (nivel, evento, campos)."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict]] = []

    def _record(self, level: str):
        def _log(event: str, **kw) -> None:
            self.records.append((level, event, kw))

        return _log

    def __getattr__(self, level: str):
        if level in {"debug", "info", "warning", "error", "exception"}:
            return self._record(level)
        raise AttributeError(level)

    def events(self, event: str) -> list[dict]:
        return [kw for _, name, kw in self.records if name == event]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def api_client(app) -> AsyncIterator[AsyncClient]:
    # Erros nao tratados viram resposta 500 em vez de propagar para o teste.
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def access_log(monkeypatch) -> RecordingLogger:
    recorder = RecordingLogger()
    monkeypatch.setattr("app.api.middleware.logger", recorder)
    return recorder


@pytest.fixture
def error_log(monkeypatch) -> RecordingLogger:
    recorder = RecordingLogger()
    monkeypatch.setattr("app.api.exception_handlers.logger", recorder)
    return recorder
