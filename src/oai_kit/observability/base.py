# src/oai_kit/observability/base.py

"""Metrics sink used by the OpenAI clients.

Every client call reports through the hook it was built with:

- `record_latency(CLIENT_REQUEST_DURATION, ms, labels)` once per call
- `increment(CLIENT_REQUESTS_TOTAL, labels=labels)` once per call
- `increment(CLIENT_ERRORS_TOTAL, labels=labels)` when the call ends with
  `output.error` set or a non-2xx status
- `increment(CLIENT_TOKENS_*, n)` when the provider reports usage

`labels` is always `{"flavor": "platform" | "azure", "operation": <op>}` where
`<op>` is one of `completions`, `chat_completions`, `embeddings`.
Token counters carry no labels.
"""

from typing import Protocol


class MetricsHook(Protocol):
    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook for clients built without one."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass
