# src/oai_kit/clients/factory.py

from oai_kit.observability.base import MetricsHook, NoOpMetricsHook
from oai_kit.options import Option, OptionList

from .base import Client, Flavor
from .transport import DEFAULT_TIMEOUT, HttpxTransport, Transport


def create_client(
    flavor: Flavor,
    *options: Option,
    transport: Transport | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Client:
    """Create a client of the given flavor.

    Args:
        flavor: Which API convention to speak.
        *options: Client settings (API key, resource name, ...).
        transport: HTTP transport. Defaults to an HttpxTransport with `timeout`.
        timeout: Timeout in seconds for the default transport.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured Client implementation.

    Raises:
        ConfigurationError: If a required option is missing or empty.
        ValueError: If flavor is unknown.

    Example:
        >>> client = create_client(
        ...     Flavor.AZURE_OPENAI,
        ...     Option(OPT_AZURE_RESOURCE_NAME, "my-resource"),
        ...     Option(OPT_AZURE_API_KEY, "..."),
        ... )
        >>> output = client.completions(PromptInput(model="my-deployment", prompt="Hi"))
    """
    option_list = OptionList(options)

    if flavor == Flavor.AZURE_OPENAI:
        from .azure import AzureOpenAIClient

        return AzureOpenAIClient(
            option_list,
            transport=transport or HttpxTransport(timeout=timeout),
            metrics_hook=metrics_hook,
        )

    if flavor == Flavor.PLATFORM_OPENAI:
        from .platform import PlatformOpenAIClient

        return PlatformOpenAIClient(
            option_list,
            transport=transport or HttpxTransport(timeout=timeout),
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown flavor: {flavor}")
