"""TalkNative - single-screen chat client for a remote chat endpoint.

Combines NiceGUI for the chat screen, httpx for the HTTP exchange,
Pydantic for data models and configuration, and FastAPI for a local
echo server used during development.

Components:
    - client: Conversation store, HTTP transport and the glue between them
    - ui: NiceGUI chat screen
    - api: Development echo server speaking the chat wire protocol
    - models: Messages, notices and request schemas
"""

__version__ = "0.1.0"
