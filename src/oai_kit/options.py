# src/oai_kit/options.py

"""Key/value options used to configure clients and the token counter.

Keys are case-sensitive. The organization key is `openai-organization`;
the older `openai-Organization` spelling is accepted as a fallback.

Example:
    >>> opts = OptionList([Option(OPT_OPENAI_API_KEY, "sk-..."), Option("n", 2)])
    >>> opts.get_string("n")
    '2'
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

OptionValue = str | int | float | bool

# Azure OpenAI
OPT_AZURE_RESOURCE_NAME = "azure-resource-name"
OPT_AZURE_API_VERSION = "azure-api-version"
OPT_AZURE_API_KEY = "azure-api-key"

# platform.openai.com
OPT_OPENAI_API_KEY = "openai-api-key"
OPT_OPENAI_ORGANIZATION = "openai-organization"
# Older spelling, still honoured when the lowercase key is absent
OPT_OPENAI_ORGANIZATION_LEGACY = "openai-Organization"
OPT_OPENAI_BASE_URL = "openai-base-url"


class OptionNotFoundError(LookupError):
    """No option with a usable value matched the key."""


@dataclass(frozen=True)
class Option:
    """A single option. Keys are case-sensitive."""

    key: str
    value: OptionValue

    def as_string(self) -> str:
        """Return the option value as string.

        Raises:
            OptionNotFoundError: If the value is not a supported scalar.
        """
        value = self.value
        # bool first: bool is a subclass of int
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        raise OptionNotFoundError(
            f"option <{self.key}> has unsupported value type {type(value).__name__}"
        )


class OptionList:
    """Ordered, immutable sequence of options. First match wins."""

    def __init__(self, options: Iterable[Option] = ()) -> None:
        self._options: tuple[Option, ...] = tuple(options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"OptionList({list(self._options)!r})"

    def get_string(self, key: str) -> str:
        """Find the first option matching `key` and return its value as string.

        Raises:
            OptionNotFoundError: If no option matches or the value is not a scalar.
        """
        for option in self._options:
            if option.key == key:
                return option.as_string()
        raise OptionNotFoundError(f"option <{key}> not found")
