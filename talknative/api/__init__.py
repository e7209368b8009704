"""Development echo server speaking the chat wire protocol.

Endpoints:
    - GET /health: Service health status
    - POST /chat/message: Replies with the posted message as plain text
"""

from talknative.api.app import app, create_app

__all__ = ["app", "create_app"]
