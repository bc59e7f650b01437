# src/oai_kit/clients/_shared.py

"""Internal helpers shared by the client flavors.

Plain functions, not a base class: each flavor owns its config, URLs and headers.
"""

import logging
from time import monotonic
from typing import Any, TypeVar

from pydantic import ValidationError

from oai_kit.observability import names
from oai_kit.observability.base import MetricsHook

from .models import Envelope
from .transport import Transport, TransportResponse

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Envelope)

_MAX_LOGGED_BODY = 1000


def build_output(output_cls: type[E], resp: TransportResponse) -> E:
    """Map a raw transport response into a typed envelope.

    The body is decoded only when the transport reported no error.
    The status code is always recorded.
    """
    error = resp.error
    output = None
    if error is None:
        try:
            output = output_cls.model_validate_json(resp.body)
        except ValidationError as e:
            error = e
    if output is None:
        output = output_cls()
    output._attach(error, resp.status_code)
    return output


def send(
    transport: Transport,
    output_cls: type[E],
    *,
    url: str,
    payload: dict[str, Any],
    headers: dict[str, str],
    flavor: str,
    operation: str,
    metrics_hook: MetricsHook,
) -> E:
    """Issue exactly one POST and return the typed output."""
    start = monotonic()
    logger.debug(
        "Calling %s %s: url=%s, model=%s",
        flavor,
        operation,
        url,
        payload.get("model", ""),
    )

    resp = transport.post_json(url, payload, headers)
    output = build_output(output_cls, resp)

    elapsed_ms = 1000 * (monotonic() - start)
    labels = {"flavor": flavor, "operation": operation}
    metrics_hook.record_latency(names.CLIENT_REQUEST_DURATION, elapsed_ms, labels)
    metrics_hook.increment(names.CLIENT_REQUESTS_TOTAL, labels=labels)

    if not output.ok:
        metrics_hook.increment(names.CLIENT_ERRORS_TOTAL, labels=labels)
        logger.warning(
            "%s %s failed: status=%d, error=%s, body=%s",
            flavor,
            operation,
            resp.status_code,
            output.error,
            resp.body[:_MAX_LOGGED_BODY].decode("utf-8", "replace"),
        )

    usage = getattr(output, "usage", None)
    if usage is not None:
        metrics_hook.increment(names.CLIENT_TOKENS_PROMPT, usage.prompt_tokens)
        metrics_hook.increment(
            names.CLIENT_TOKENS_COMPLETION, usage.completion_tokens
        )
        metrics_hook.increment(names.CLIENT_TOKENS_TOTAL, usage.total_tokens)

    logger.info(
        "%s %s: status=%d, latency=%.0fms",
        flavor,
        operation,
        resp.status_code,
        elapsed_ms,
    )
    return output
