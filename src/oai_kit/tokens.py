# src/oai_kit/tokens.py

"""Token counting utilities.

`count_tokens` is exact and delegates to a byte-pair-encoding codec.
`estimate_tokens` is a crude, dependency-free approximation for tests and
illustration only.
"""

import logging
import math
import re
import threading
from typing import Protocol

import tiktoken

from .options import Option, OptionList, OptionNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "p50k_base"

# Go-compatible \w: ASCII letters, digits and underscore only
_RE_NON_WORDS = re.compile(r"[^\w\d]+", re.ASCII)
_RE_WORDS = re.compile(r"[\w\d]+", re.ASCII)


class CodecNotFoundError(LookupError):
    """No codec is registered for the requested model or encoding."""


class Codec(Protocol):
    def encode_ordinary(self, text: str) -> list[int]: ...


class CodecRegistry(Protocol):
    def for_model(self, model: str) -> Codec: ...

    def get_encoding(self, name: str) -> Codec: ...


class TiktokenRegistry:
    """Codec registry backed by tiktoken.

    Each codec is built at most once, even under concurrent first use.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._codecs: dict[str, Codec] = {}

    def for_model(self, model: str) -> Codec:
        try:
            name = tiktoken.encoding_name_for_model(model)
        except KeyError as e:
            raise CodecNotFoundError(f"no codec for model <{model}>") from e
        return self.get_encoding(name)

    def get_encoding(self, name: str) -> Codec:
        codec = self._codecs.get(name)
        if codec is not None:
            return codec
        with self._lock:
            codec = self._codecs.get(name)
            if codec is None:
                try:
                    codec = tiktoken.get_encoding(name)
                except (ValueError, OSError) as e:
                    raise CodecNotFoundError(f"no codec for encoding <{name}>") from e
                self._codecs[name] = codec
            return codec


_default_registry = TiktokenRegistry()


def _resolve_codec(options: OptionList, registry: CodecRegistry) -> Codec | None:
    for key, lookup in (
        ("model", registry.for_model),
        ("encoding", registry.get_encoding),
    ):
        try:
            name = options.get_string(key)
        except OptionNotFoundError:
            continue
        if not name:
            continue
        try:
            return lookup(name)
        except CodecNotFoundError as e:
            logger.debug("Codec lookup by %s failed: %s", key, e)

    try:
        return registry.get_encoding(DEFAULT_ENCODING)
    except CodecNotFoundError as e:
        logger.debug("Default codec unavailable: %s", e)
        return None


def count_tokens(
    text: str,
    *options: Option,
    registry: CodecRegistry | None = None,
) -> int:
    """Return the number of BPE tokens in `text`, or -1 if no codec resolves.

    Args:
        text: Input text.
        *options: Optional `model` and/or `encoding` options selecting the codec.
        registry: Codec registry. Defaults to a process-wide tiktoken registry.

    Example:
        >>> count_tokens("Hello world, this is so beautiful!")
        8
    """
    codec = _resolve_codec(OptionList(options), registry or _default_registry)
    if codec is None:
        return -1
    return len(codec.encode_ordinary(text))


def _byte_len(s: str) -> int:
    return len(s.encode("utf-8", "surrogatepass"))


def estimate_tokens(text: str) -> int:
    """Estimate the number of tokens in `text`.

    For testing purposes only. Use `count_tokens` instead.
    """
    num_words = 0
    for word in _RE_NON_WORDS.split(text):
        if word:
            num_words += math.ceil(_byte_len(word) / 4.0)

    num_non_words = 0
    for piece in _RE_WORDS.split(text):
        if piece:
            num_non_words += _byte_len(piece)

    num_bytes = _byte_len(text)
    return ((num_words * 4 // 3 + num_non_words) + num_bytes // 4) // 2
