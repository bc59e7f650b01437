# src/oai_kit/clients/transport.py

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True)
class TransportResponse:
    """Raw outcome of one POST call.

    `error` is set only when the call itself failed (unencodable body, connect,
    timeout, ...).
    HTTP error statuses are reported through `status_code`, not `error`.
    """

    status_code: int
    body: bytes = b""
    error: Exception | None = None


class Transport(Protocol):
    def post_json(
        self, url: str, body: dict[str, Any], headers: dict[str, str]
    ) -> TransportResponse: ...


class HttpxTransport:
    """JSON-over-HTTP transport backed by a single `httpx.Client`.

    No retries. Safe to share across threads.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(timeout=timeout)
        logger.debug("Initialized HttpxTransport with timeout=%s", timeout)

    def post_json(
        self, url: str, body: dict[str, Any], headers: dict[str, str]
    ) -> TransportResponse:
        try:
            content = json.dumps(body, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.debug("Cannot encode body for POST %s: %s", url, e)
            return TransportResponse(status_code=0, error=e)

        try:
            resp = self._client.post(
                url,
                content=content,
                headers={"Content-Type": "application/json", **headers},
            )
        except httpx.HTTPError as e:
            logger.debug("POST %s failed: %s", url, e)
            return TransportResponse(status_code=0, error=e)
        return TransportResponse(status_code=resp.status_code, body=resp.content)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
