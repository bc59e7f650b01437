import json
from typing import Any

import pytest

from oai_kit.clients.transport import TransportResponse


class StubTransport:
    """Records every call and replays a canned response."""

    def __init__(self, response: TransportResponse) -> None:
        self.response = response
        self.calls: list[dict[str, Any]] = []

    def post_json(
        self, url: str, body: dict[str, Any], headers: dict[str, str]
    ) -> TransportResponse:
        self.calls.append({"url": url, "body": body, "headers": headers})
        return self.response


COMPLETIONS_BODY = {
    "id": "cmpl-123",
    "object": "text_completion",
    "created": 1680000000,
    "model": "text-davinci-003",
    "choices": [
        {
            "text": "\n\nScoop up happiness!",
            "index": 0,
            "finish_reason": "stop",
            "logprobs": None,
        },
        {
            "text": "\n\nChill out.",
            "index": 1,
            "finish_reason": "length",
            "logprobs": None,
        },
    ],
    "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21},
}

CHAT_BODY = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1680000001,
    "model": "gpt-3.5-turbo",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello there!"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 10, "completion_tokens": 3, "total_tokens": 13},
}

EMBEDDINGS_BODY = {
    "object": "list",
    "model": "text-embedding-ada-002",
    "data": [{"index": 0, "object": "embedding", "embedding": [0.1, -0.2, 0.3]}],
    "usage": {"prompt_tokens": 6, "total_tokens": 6},
}

ERROR_BODY = {
    "error": {
        "message": "Incorrect API key provided.",
        "type": "invalid_request_error",
        "param": None,
        "code": "invalid_api_key",
    }
}


def _ok(body: dict[str, Any]) -> StubTransport:
    return StubTransport(
        TransportResponse(status_code=200, body=json.dumps(body).encode())
    )


@pytest.fixture
def completions_transport() -> StubTransport:
    return _ok(COMPLETIONS_BODY)


@pytest.fixture
def chat_transport() -> StubTransport:
    return _ok(CHAT_BODY)


@pytest.fixture
def embeddings_transport() -> StubTransport:
    return _ok(EMBEDDINGS_BODY)


@pytest.fixture
def unauthorized_transport() -> StubTransport:
    return StubTransport(
        TransportResponse(status_code=401, body=json.dumps(ERROR_BODY).encode())
    )


@pytest.fixture
def stub_transport_factory():
    return StubTransport


@pytest.fixture
def completions_body() -> dict[str, Any]:
    return COMPLETIONS_BODY


@pytest.fixture
def chat_body() -> dict[str, Any]:
    return CHAT_BODY
