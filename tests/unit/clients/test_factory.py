# tests/unit/clients/test_factory.py

from typing import Any
from unittest.mock import patch

import pytest

from oai_kit.clients import ConfigurationError, Flavor, PromptInput, create_client
from oai_kit.clients.azure import AzureOpenAIClient
from oai_kit.clients.config import DEFAULT_AZURE_API_VERSION
from oai_kit.clients.platform import PlatformOpenAIClient
from oai_kit.options import (
    OPT_AZURE_API_KEY,
    OPT_AZURE_RESOURCE_NAME,
    OPT_OPENAI_API_KEY,
    OPT_OPENAI_ORGANIZATION,
    Option,
)


class TestFactory:
    def test_create_azure_client(self, completions_transport: Any) -> None:
        client = create_client(
            Flavor.AZURE_OPENAI,
            Option(OPT_AZURE_RESOURCE_NAME, "res1"),
            Option(OPT_AZURE_API_KEY, "key1"),
            transport=completions_transport,
        )

        assert isinstance(client, AzureOpenAIClient)
        assert client.config.api_version == DEFAULT_AZURE_API_VERSION

    def test_create_platform_client(self, completions_transport: Any) -> None:
        client = create_client(
            Flavor.PLATFORM_OPENAI,
            Option(OPT_OPENAI_API_KEY, "sk-test"),
            Option(OPT_OPENAI_ORGANIZATION, "org-1"),
            transport=completions_transport,
        )

        assert isinstance(client, PlatformOpenAIClient)
        assert client.config.organization == "org-1"

    def test_platform_without_api_key_raises(self) -> None:
        with pytest.raises(ConfigurationError, match=OPT_OPENAI_API_KEY):
            create_client(Flavor.PLATFORM_OPENAI)

    def test_unknown_flavor_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown flavor"):
            create_client("bedrock")  # type: ignore[arg-type]

    def test_default_transport_uses_timeout(self) -> None:
        with patch("oai_kit.clients.factory.HttpxTransport") as mock_transport:
            create_client(
                Flavor.PLATFORM_OPENAI, Option(OPT_OPENAI_API_KEY, "k"), timeout=5.0
            )

            mock_transport.assert_called_once_with(timeout=5.0)

    def test_default_timeout_is_sixty_seconds(self) -> None:
        with patch("oai_kit.clients.factory.HttpxTransport") as mock_transport:
            create_client(Flavor.PLATFORM_OPENAI, Option(OPT_OPENAI_API_KEY, "k"))

            mock_transport.assert_called_once_with(timeout=60.0)

    def test_azure_end_to_end(
        self, completions_transport: Any, completions_body: dict[str, Any]
    ) -> None:
        client = create_client(
            Flavor.AZURE_OPENAI,
            Option(OPT_AZURE_RESOURCE_NAME, "res1"),
            Option(OPT_AZURE_API_KEY, "key1"),
            transport=completions_transport,
        )

        output = client.completions(PromptInput(model="deploy", prompt="Hi"))

        assert output.error is None
        assert output.status_code == 200
        assert [c.text for c in output.choices] == [
            c["text"] for c in completions_body["choices"]
        ]
