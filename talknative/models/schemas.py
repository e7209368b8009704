import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sender(str, Enum):
    """Who authored a chat message."""

    USER = "user"
    BOT = "bot"


class ViewState(str, Enum):
    """Screen states. CHATTING is terminal."""

    INTRO = "intro"
    CHATTING = "chatting"


class NoticeKind(str, Enum):
    """Failure categories surfaced to the user as system notices."""

    CONFIGURATION = "configuration"
    NETWORK = "network"
    DECODE = "decode"


def _new_id() -> str:
    return str(uuid.uuid4())


class Message(BaseModel):
    """A single chat turn.

    Attributes:
        id: Unique identifier, never shared between two messages.
        text: The message text exactly as sent or received.
        sender: Whether the user or the bot authored it.
        created_at: Local creation time, used for the bubble time label.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    text: str
    sender: Sender
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER


class SystemNotice(BaseModel):
    """A failed exchange, shown apart from the bot's replies.

    Attributes:
        id: Unique identifier.
        text: Human-readable description of the failure.
        kind: Which part of the exchange failed.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    text: str
    kind: NoticeKind
    created_at: datetime = Field(default_factory=datetime.now)


class ChatMessageRequest(BaseModel):
    """Request payload for POST /chat/message.

    Attributes:
        message: The user's message text.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v
