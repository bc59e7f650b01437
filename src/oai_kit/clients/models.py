# src/oai_kit/clients/models.py

"""Response envelopes.

Body fields mirror the provider JSON verbatim. The envelope fields
(`error`, `status_code`) are attached by the client and never touch the wire.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class ApiError(BaseModel):
    """Error object some providers return in the body of a failed call."""

    message: str = ""
    type: str | None = None
    param: str | None = None
    code: str | int | None = None


class Usage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class Envelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    api_error: ApiError | None = Field(default=None, alias="error")

    _error: Exception | None = PrivateAttr(default=None)
    _status_code: int = PrivateAttr(default=0)

    @property
    def error(self) -> Exception | None:
        """Transport or decoding error. None on success."""
        return self._error

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def ok(self) -> bool:
        return self._error is None and 200 <= self._status_code < 300

    def _attach(self, error: Exception | None, status_code: int) -> None:
        self._error = error
        self._status_code = status_code


class CompletionChoice(BaseModel):
    text: str = ""
    index: int = 0
    finish_reason: str | None = None
    logprobs: dict[str, Any] | None = None


class CompletionsOutput(Envelope):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    usage: Usage | None = None
    choices: list[CompletionChoice] = Field(default_factory=list)


class ChatChoiceMessage(BaseModel):
    role: str = ""
    content: str | None = None
    name: str | None = None


class ChatChoice(BaseModel):
    index: int = 0
    message: ChatChoiceMessage = Field(default_factory=ChatChoiceMessage)
    finish_reason: str | None = None


class ChatCompletionsOutput(Envelope):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    usage: Usage | None = None
    choices: list[ChatChoice] = Field(default_factory=list)


class EmbeddingData(BaseModel):
    index: int = 0
    object: str = ""
    embedding: list[float] = Field(default_factory=list)


class EmbeddingsOutput(Envelope):
    object: str = ""
    model: str = ""
    data: list[EmbeddingData] = Field(default_factory=list)
    usage: Usage | None = None
