# Clients
from .clients import (
    AzureOpenAIClient,
    ChatInput,
    ChatMessage,
    Client,
    ConfigurationError,
    EmbeddingsInput,
    Flavor,
    HttpxTransport,
    PlatformOpenAIClient,
    PromptInput,
    Role,
    create_client,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Options
from .options import Option, OptionList, OptionNotFoundError

# Tokens
from .tokens import count_tokens, estimate_tokens

# Vectors
from .vectors import Vector, cosine, dot, length

__all__ = [
    # Clients
    "AzureOpenAIClient",
    "ChatInput",
    "ChatMessage",
    "Client",
    "ConfigurationError",
    "EmbeddingsInput",
    "Flavor",
    "HttpxTransport",
    "PlatformOpenAIClient",
    "PromptInput",
    "Role",
    "create_client",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Options
    "Option",
    "OptionList",
    "OptionNotFoundError",
    # Tokens
    "count_tokens",
    "estimate_tokens",
    # Vectors
    "Vector",
    "cosine",
    "dot",
    "length",
]
