"""Agregador de métricas HTTP em memória, exposto no formato Prometheus."""

from __future__ import annotations

from threading import Lock


def _escape_label(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


class MetricsAggregator:
    """Contagem e tempo acumulado de resposta por rota (memória do processo).
    - Cada path ganha as duas entradas juntas na primeira observação.
    - A ordem de iteração é a de primeira observação.
    - Não há reset: o estado vive enquanto a aplicação viver.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._requests: dict[str, int] = {}
        self._response_times: dict[str, float] = {}

    def record(self, path: str, elapsed_ms: float) -> None:
        with self._lock:
            self._requests[path] = self._requests.get(path, 0) + 1
            self._response_times[path] = self._response_times.get(path, 0.0) + float(elapsed_ms)

    def snapshot(self) -> dict[str, dict[str, float | int]]:
        """Retorna contagem, tempo total e média (2 casas) por path."""
        with self._lock:
            out: dict[str, dict[str, float | int]] = {}
            for path, count in self._requests.items():
                total = self._response_times[path]
                out[path] = {"count": count, "total_ms": total, "avg_ms": round(total / count, 2)}
            return out

    def render_prometheus(self) -> str:
        """Gera o texto de exposição: contador de requisições e média de latência."""
        with self._lock:
            items = [(path, count, self._response_times[path]) for path, count in self._requests.items()]

        lines = [
            "# HELP http_requests_total Total number of requests",
            "# TYPE http_requests_total counter",
        ]
        for path, count, _ in items:
            lines.append(f'http_requests_total{{path="{_escape_label(path)}"}} {count}')
        lines.append("# HELP http_response_time_ms Response time in milliseconds")
        lines.append("# TYPE http_response_time_ms gauge")
        for path, count, total in items:
            lines.append(f'http_response_time_ms{{path="{_escape_label(path)}"}} {total / count:.2f}')
        return "\n".join(lines) + "\n"
