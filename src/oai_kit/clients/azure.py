# src/oai_kit/clients/azure.py

import logging
from urllib.parse import quote

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
from .config import AzureConfig
from .models import ChatCompletionsOutput, CompletionsOutput, EmbeddingsOutput
from .transport import Transport

logger = logging.getLogger(__name__)

URL_TEMPLATE = (
    "https://{resource_name}.openai.azure.com/openai/deployments/{model}"
    "/{operation}?api-version={api_version}"
)


class AzureOpenAIClient(Client):
    """Azure OpenAI flavor of Client.

    Requires a resource name and an API key. The `model` field of every
    input is the deployment name.
    """

    def __init__(
        self,
        options: OptionList,
        transport: Transport,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._config = AzureConfig.from_options(options)
        self._transport = transport
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized AzureOpenAIClient with resource_name=%s, api_version=%s",
            self._config.resource_name,
            self._config.api_version,
        )

    @property
    def config(self) -> AzureConfig:
        return self._config

    def _headers(self) -> dict[str, str]:
        return {"api-key": self._config.api_key}

    def _url(self, model: str, operation: str) -> str:
        return URL_TEMPLATE.format(
            resource_name=self._config.resource_name,
            model=quote(model, safe=""),
            operation=operation,
            api_version=self._config.api_version,
        )

    def completions(self, prompt: PromptInput) -> CompletionsOutput:
        prepare_prompt(prompt)
        return send(
            self._transport,
            CompletionsOutput,
            url=self._url(prompt.model, "completions"),
            payload=prompt.to_payload(),
            headers=self._headers(),
            flavor=Flavor.AZURE_OPENAI.value,
            operation="completions",
            metrics_hook=self.metrics_hook,
        )

    def chat_completions(self, chat: ChatInput) -> ChatCompletionsOutput:
        prepare_chat(chat)
        return send(
            self._transport,
            ChatCompletionsOutput,
            url=self._url(chat.model, "chat/completions"),
            payload=chat.to_payload(),
            headers=self._headers(),
            flavor=Flavor.AZURE_OPENAI.value,
            operation="chat_completions",
            metrics_hook=self.metrics_hook,
        )

    def embeddings(self, input: EmbeddingsInput) -> EmbeddingsOutput:
        return send(
            self._transport,
            EmbeddingsOutput,
            url=self._url(input.model, "embeddings"),
            payload=input.to_payload(),
            headers=self._headers(),
            flavor=Flavor.AZURE_OPENAI.value,
            operation="embeddings",
            metrics_hook=self.metrics_hook,
        )
