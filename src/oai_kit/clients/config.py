# src/oai_kit/clients/config.py

from dataclasses import dataclass, field

from oai_kit.options import (
    OPT_AZURE_API_KEY,
    OPT_AZURE_API_VERSION,
    OPT_AZURE_RESOURCE_NAME,
    OPT_OPENAI_API_KEY,
    OPT_OPENAI_BASE_URL,
    OPT_OPENAI_ORGANIZATION,
    OPT_OPENAI_ORGANIZATION_LEGACY,
    OptionList,
    OptionNotFoundError,
)

DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_AZURE_API_VERSION = "2023-03-15-preview"


class ConfigurationError(ValueError):
    """A required option is missing or empty."""

    def __init__(self, option: str, reason: str = "") -> None:
        self.option = option
        message = f"cannot parse setting <{option}>"
        if reason:
            message += f": {reason}"
        super().__init__(message)


def _required(options: OptionList, key: str) -> str:
    try:
        value = options.get_string(key)
    except OptionNotFoundError as e:
        raise ConfigurationError(key, str(e)) from e
    if not value:
        raise ConfigurationError(key, "empty value")
    return value


def _optional(options: OptionList, key: str, default: str = "") -> str:
    try:
        return options.get_string(key) or default
    except OptionNotFoundError:
        return default


@dataclass(frozen=True)
class PlatformConfig:
    """Settings of a platform.openai.com client.

    Immutable. Explicit. No magic defaults from environment.
    """

    api_key: str = field(repr=False)
    organization: str = ""
    base_url: str = DEFAULT_OPENAI_BASE_URL

    @classmethod
    def from_options(cls, options: OptionList) -> "PlatformConfig":
        return cls(
            api_key=_required(options, OPT_OPENAI_API_KEY),
            organization=_optional(options, OPT_OPENAI_ORGANIZATION)
            or _optional(options, OPT_OPENAI_ORGANIZATION_LEGACY),
            base_url=_optional(
                options, OPT_OPENAI_BASE_URL, DEFAULT_OPENAI_BASE_URL
            ).rstrip("/"),
        )


@dataclass(frozen=True)
class AzureConfig:
    """Settings of an Azure OpenAI client.

    Immutable. Explicit. No magic defaults from environment.
    """

    resource_name: str
    api_key: str = field(repr=False)
    api_version: str = DEFAULT_AZURE_API_VERSION

    @classmethod
    def from_options(cls, options: OptionList) -> "AzureConfig":
        return cls(
            resource_name=_required(options, OPT_AZURE_RESOURCE_NAME),
            api_key=_required(options, OPT_AZURE_API_KEY),
            api_version=_optional(
                options, OPT_AZURE_API_VERSION, DEFAULT_AZURE_API_VERSION
            ),
        )
