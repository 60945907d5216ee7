"""Base shared constants for the client.

Central location to avoid scattering magic strings across the codec, the
client, and the transport.

Security
--------
This module contains only generic sentinel strings. There are no credentials
or tokens embedded.
"""
from __future__ import annotations

# Endpoint path appended to the configured base URL.
CHAT_COMPLETIONS_SUFFIX = "/chat/completions"

# Standardized error messages
ERR_STREAM_NOT_SUPPORTED = (
    "streaming is not supported with this method, please use a streaming client"
)
ERR_UNSUPPORTED_MODEL = (
    "this model is not supported with this method, please use the completions endpoint instead"
)
ERR_PARTS_CONFLICT = "text and parts are mutually exclusive"

# Header names sent by the HTTP transport
HEADER_ORGANIZATION = "OpenAI-Organization"
JSON_CONTENT_TYPE = "application/json"

__all__ = [
    "CHAT_COMPLETIONS_SUFFIX",
    "ERR_STREAM_NOT_SUPPORTED",
    "ERR_UNSUPPORTED_MODEL",
    "ERR_PARTS_CONFLICT",
    "HEADER_ORGANIZATION",
    "JSON_CONTENT_TYPE",
]
