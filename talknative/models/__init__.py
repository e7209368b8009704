"""Pydantic models shared by the client, the UI and the echo endpoint.

Models:
    - Message: Immutable chat turn authored by the user or the bot
    - SystemNotice: Failed exchange surfaced to the user
    - ChatMessageRequest: Wire payload for POST /chat/message
    - Sender, ViewState, NoticeKind: Enumerations
"""

from talknative.models.schemas import (
    ChatMessageRequest,
    Message,
    NoticeKind,
    Sender,
    SystemNotice,
    ViewState,
)

__all__ = [
    "ChatMessageRequest",
    "Message",
    "NoticeKind",
    "Sender",
    "SystemNotice",
    "ViewState",
]
