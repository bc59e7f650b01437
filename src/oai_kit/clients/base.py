# src/oai_kit/clients/base.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from oai_kit.observability.base import MetricsHook

from .models import ChatCompletionsOutput, CompletionsOutput, EmbeddingsOutput

DEFAULT_MAX_TOKENS = 100


class Flavor(str, Enum):
    """Which OpenAI API convention a client speaks."""

    PLATFORM_OPENAI = "platform"
    AZURE_OPENAI = "azure"


class Role(str, Enum):
    """Message role in a chat conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    FUNCTION = "function"


@dataclass
class PromptInput:
    """Input of a 'completions' call.

    Mutable: the client fills in defaults in place before sending.
    For Azure OpenAI, `model` is the deployment name.
    """

    prompt: str
    model: str = ""
    max_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    logit_bias: dict[str, int] = field(default_factory=dict)
    user: str = ""
    n: int = 0
    stream: bool = False
    logprobs: int = 0
    suffix: str = ""
    echo: bool = False
    stop: list[str] = field(default_factory=list)
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0
    best_of: int = 0

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "prompt": self.prompt,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "n": self.n,
            "stream": self.stream,
            "logprobs": self.logprobs,
            "echo": self.echo,
            "presence_penalty": self.presence_penalty,
            "frequency_penalty": self.frequency_penalty,
            "best_of": self.best_of,
        }
        _set_if(payload, "model", self.model)
        _set_if(payload, "logit_bias", self.logit_bias)
        _set_if(payload, "user", self.user)
        _set_if(payload, "suffix", self.suffix)
        _set_if(payload, "stop", self.stop)
        return payload


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str
    name: str | None = None

    def to_payload(self) -> dict[str, Any]:
        msg: dict[str, Any] = {"role": Role(self.role).value, "content": self.content}
        if self.name:
            msg["name"] = self.name
        return msg


@dataclass
class ChatInput:
    """Input of a 'chat/completions' call. Mutable, like PromptInput."""

    messages: list[ChatMessage]
    model: str = ""
    max_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    n: int = 0
    stream: bool = False
    stop: list[str] = field(default_factory=list)
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0
    logit_bias: dict[str, int] = field(default_factory=dict)
    user: str = ""

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "messages": [m.to_payload() for m in self.messages],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "n": self.n,
            "stream": self.stream,
            "presence_penalty": self.presence_penalty,
            "frequency_penalty": self.frequency_penalty,
        }
        _set_if(payload, "model", self.model)
        _set_if(payload, "stop", self.stop)
        _set_if(payload, "logit_bias", self.logit_bias)
        _set_if(payload, "user", self.user)
        return payload


@dataclass
class EmbeddingsInput:
    input: str
    model: str = ""
    input_type: str = ""
    user: str = ""

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"input": self.input}
        _set_if(payload, "model", self.model)
        _set_if(payload, "input_type", self.input_type)
        _set_if(payload, "user", self.user)
        return payload


def _set_if(payload: dict[str, Any], key: str, value: Any) -> None:
    if value:
        payload[key] = value


def _prepare_sampling(req: PromptInput | ChatInput) -> None:
    if req.max_tokens <= 0:
        req.max_tokens = DEFAULT_MAX_TOKENS
    if req.n < 1:
        req.n = 1

    if req.temperature == 0 and req.top_p == 0:
        req.temperature = 1.0
        req.top_p = 1.0
    if not 0 <= req.temperature <= 1:
        req.temperature = 1.0
    if not 0 <= req.top_p <= 1:
        req.top_p = 1.0
    # Only one of temperature/top_p may hold a fractional value
    if 0 < req.temperature < 1:
        req.top_p = 1.0
    if 0 < req.top_p < 1:
        req.temperature = 1.0


def prepare_prompt(prompt: PromptInput) -> PromptInput:
    """Apply defaults to a completions input, in place."""
    _prepare_sampling(prompt)
    if prompt.best_of < prompt.n:
        prompt.best_of = prompt.n
    return prompt


def prepare_chat(chat: ChatInput) -> ChatInput:
    """Apply defaults to a chat input, in place."""
    _prepare_sampling(chat)
    return chat


class Client(Protocol):
    """Protocol for OpenAI API clients.

    Design principles:
    - One request per call: no retries, no streaming
    - Errors as data: transport and decoding failures land in `output.error`
    - Requests are defaulted in place before sending
    """

    metrics_hook: MetricsHook

    def completions(self, prompt: PromptInput) -> CompletionsOutput:
        """Make a 'completions' API call."""
        ...

    def chat_completions(self, chat: ChatInput) -> ChatCompletionsOutput:
        """Make a 'chat/completions' API call."""
        ...

    def embeddings(self, input: EmbeddingsInput) -> EmbeddingsOutput:
        """Make an 'embeddings' API call."""
        ...
