"""Chat client core: conversation state, HTTP transport and the glue between them.

Responsibilities:
    - Ordered, append-only chat history and input draft
    - One-shot POST exchange with the configured chat endpoint
    - Posting network completions back onto the UI loop
    - Bottom-aware autoscroll decisions

Contains no UI code. The NiceGUI page only talks to ChatController.
"""

from talknative.client.controller import ChatController
from talknative.client.errors import (
    DecodeError,
    InvalidConfigurationError,
    NetworkError,
    TransportError,
)
from talknative.client.store import ConversationStore
from talknative.client.transport import ChatTransportClient, build_endpoint_url
from talknative.client.viewport import ViewportTracker

__all__ = [
    "ChatController",
    "ChatTransportClient",
    "ConversationStore",
    "DecodeError",
    "InvalidConfigurationError",
    "NetworkError",
    "TransportError",
    "ViewportTracker",
    "build_endpoint_url",
]
