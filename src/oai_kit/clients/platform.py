# src/oai_kit/clients/platform.py

import logging

from oai_kit.observability.base import MetricsHook, NoOpMetricsHook
from oai_kit.options import OptionList

from ._shared import send
from .base import (
    ChatInput,
    Client,
    EmbeddingsInput,
    Flavor,
    PromptInput,
    prepare_chat,
    prepare_prompt,
)
from .config import PlatformConfig
from .models import ChatCompletionsOutput, CompletionsOutput, EmbeddingsOutput
from .transport import Transport

logger = logging.getLogger(__name__)


class PlatformOpenAIClient(Client):
    """platform.openai.com flavor of Client.

    Requires an API key. Organization and base URL are optional.
    """

    def __init__(
        self,
        options: OptionList,
        transport: Transport,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._config = PlatformConfig.from_options(options)
        self._transport = transport
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized PlatformOpenAIClient with base_url=%s, organization=%s",
            self._config.base_url,
            self._config.organization or "<none>",
        )

    @property
    def config(self) -> PlatformConfig:
        return self._config

    def _headers(self) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self._config.api_key}"}
        if self._config.organization:
            headers["OpenAI-Organization"] = self._config.organization
        return headers

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}/{path}"

    def completions(self, prompt: PromptInput) -> CompletionsOutput:
        prepare_prompt(prompt)
        return send(
            self._transport,
            CompletionsOutput,
            url=self._url("completions"),
            payload=prompt.to_payload(),
            headers=self._headers(),
            flavor=Flavor.PLATFORM_OPENAI.value,
            operation="completions",
            metrics_hook=self.metrics_hook,
        )

    def chat_completions(self, chat: ChatInput) -> ChatCompletionsOutput:
        prepare_chat(chat)
        return send(
            self._transport,
            ChatCompletionsOutput,
            url=self._url("chat/completions"),
            payload=chat.to_payload(),
            headers=self._headers(),
            flavor=Flavor.PLATFORM_OPENAI.value,
            operation="chat_completions",
            metrics_hook=self.metrics_hook,
        )

    def embeddings(self, input: EmbeddingsInput) -> EmbeddingsOutput:
        return send(
            self._transport,
            EmbeddingsOutput,
            url=self._url("embeddings"),
            payload=input.to_payload(),
            headers=self._headers(),
            flavor=Flavor.PLATFORM_OPENAI.value,
            operation="embeddings",
            metrics_hook=self.metrics_hook,
        )
