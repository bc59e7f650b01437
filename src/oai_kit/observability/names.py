# src/oai_kit/observability/names.py

"""Standard metric names for oai-kit observability.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Client Metrics
# ============================================================================

# Duration
CLIENT_REQUEST_DURATION = "client_request_duration"

# Counters (labelled with flavor and operation)
CLIENT_REQUESTS_TOTAL = "client_requests_total"
CLIENT_ERRORS_TOTAL = "client_errors_total"

# Counters (token usage reported by the provider)
CLIENT_TOKENS_PROMPT = "client_tokens_prompt"
CLIENT_TOKENS_COMPLETION = "client_tokens_completion"
CLIENT_TOKENS_TOTAL = "client_tokens_total"
