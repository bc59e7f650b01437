# src/oai_kit/clients/__init__.py

"""OpenAI API clients for oai-kit.

Two flavors behind one Client protocol: platform.openai.com and Azure OpenAI.

Design principles:
- Thin: inputs are defaulted, sent once, and decoded into typed outputs
- No retries: exactly one request per call
- Errors as data: check `output.error` and `output.status_code`

Example:
    >>> from oai_kit.clients import create_client, Flavor, PromptInput
    >>> from oai_kit.options import Option, OPT_OPENAI_API_KEY
    >>>
    >>> client = create_client(Flavor.PLATFORM_OPENAI, Option(OPT_OPENAI_API_KEY, "sk-..."))
    >>> output = client.completions(
    ...     PromptInput(model="text-davinci-003", prompt="Write a tagline.")
    ... )
    >>> if output.error is None and output.status_code == 200:
    ...     print(output.choices[0].text)
"""

from .azure import AzureOpenAIClient
from .base import (
    ChatInput,
    ChatMessage,
    Client,
    EmbeddingsInput,
    Flavor,
    PromptInput,
    Role,
    prepare_chat,
    prepare_prompt,
)
from .config import AzureConfig, ConfigurationError, PlatformConfig
from .factory import create_client
from .models import (
    ApiError,
    ChatCompletionsOutput,
    CompletionsOutput,
    EmbeddingsOutput,
    Usage,
)
from .platform import PlatformOpenAIClient
from .transport import HttpxTransport, Transport, TransportResponse

__all__ = [
    # Factory
    "create_client",
    # Protocol
    "Client",
    "Flavor",
    # Implementations
    "AzureOpenAIClient",
    "PlatformOpenAIClient",
    # Config
    "AzureConfig",
    "PlatformConfig",
    "ConfigurationError",
    # Inputs
    "PromptInput",
    "ChatInput",
    "ChatMessage",
    "Role",
    "EmbeddingsInput",
    "prepare_prompt",
    "prepare_chat",
    # Outputs
    "ApiError",
    "CompletionsOutput",
    "ChatCompletionsOutput",
    "EmbeddingsOutput",
    "Usage",
    # Transport
    "Transport",
    "TransportResponse",
    "HttpxTransport",
]
