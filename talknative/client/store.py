"""Conversation state for one chat screen.

The store is the only writer of chat history, the draft text and the
intro/chat view state. It is created on the UI event loop thread and may
only be mutated from that thread; network completions have to be posted
back onto the loop first (see ChatController).
"""

import logging
import threading
from collections.abc import Callable

from talknative.client.errors import (
    DecodeError,
    InvalidConfigurationError,
    NetworkError,
    TransportError,
)
from talknative.models.schemas import Message, NoticeKind, Sender, SystemNotice, ViewState

logger = logging.getLogger(__name__)

ScrollTarget = Message | SystemNotice


def _always_at_bottom() -> bool:
    return True


def notice_from_error(error: TransportError) -> SystemNotice:
    """Build the user-facing notice for a failed exchange."""
    if isinstance(error, InvalidConfigurationError):
        return SystemNotice(text=f"Configuration error: {error}", kind=NoticeKind.CONFIGURATION)
    if isinstance(error, DecodeError):
        return SystemNotice(text="Could not parse response", kind=NoticeKind.DECODE)
    if isinstance(error, NetworkError):
        return SystemNotice(text=f"Network error: {error}", kind=NoticeKind.NETWORK)
    return SystemNotice(text=f"Error: {error}", kind=NoticeKind.NETWORK)


class ConversationStore:
    """Ordered chat history plus the input draft and view state.

    Signals are plain callbacks:
        on_send(text): a user message was accepted and needs a reply.
        on_scroll(item): the display should scroll to ``item``.
        on_change(): something visible changed.
        is_near_bottom(): whether the viewport is currently at the bottom.
    """

    def __init__(
        self,
        on_send: Callable[[str], None] | None = None,
        on_scroll: Callable[[ScrollTarget], None] | None = None,
        on_change: Callable[[], None] | None = None,
        is_near_bottom: Callable[[], bool] | None = None,
    ) -> None:
        self.on_send = on_send
        self.on_scroll = on_scroll
        self.on_change = on_change
        self.is_near_bottom = is_near_bottom or _always_at_bottom

        self._messages: list[Message] = []
        self._notices: list[SystemNotice] = []
        self._timeline: list[ScrollTarget] = []
        self._draft_text = ""
        self._view_state = ViewState.INTRO
        self._owner_thread = threading.get_ident()

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def notices(self) -> tuple[SystemNotice, ...]:
        return tuple(self._notices)

    @property
    def timeline(self) -> tuple[ScrollTarget, ...]:
        """Messages and notices interleaved in the order they were recorded."""
        return tuple(self._timeline)

    @property
    def draft_text(self) -> str:
        return self._draft_text

    @draft_text.setter
    def draft_text(self, value: str | None) -> None:
        self._check_writer()
        self._draft_text = value or ""

    @property
    def view_state(self) -> ViewState:
        return self._view_state

    @property
    def has_started_chat(self) -> bool:
        return self._view_state is ViewState.CHATTING

    def append_user_message(self, text: str | None = None) -> Message | None:
        """Accept a user message for sending.

        Args:
            text: Message text. Defaults to the current draft.

        Returns:
            The new message, or None if the text was empty or whitespace.
        """
        self._check_writer()
        if text is None:
            text = self._draft_text
        if not text.strip():
            return None

        message = Message(text=text, sender=Sender.USER)
        self._messages.append(message)
        self._timeline.append(message)
        self._enter_chatting()
        self._draft_text = ""
        logger.debug(f"Accepted user message {message.id} ({len(text)} chars)")

        self._notify_change()
        if self.on_send is not None:
            self.on_send(text)
        self._scroll_to(message)
        return message

    def append_bot_message(self, text: str) -> Message:
        """Append a reply. Scrolls only if the viewport was at the bottom."""
        self._check_writer()
        was_at_bottom = self.is_near_bottom()
        message = Message(text=text, sender=Sender.BOT)
        self._messages.append(message)
        self._timeline.append(message)

        self._notify_change()
        if was_at_bottom:
            self._scroll_to(message)
        return message

    def report_error(self, error: TransportError) -> SystemNotice:
        """Record a failed exchange on the notice channel."""
        self._check_writer()
        was_at_bottom = self.is_near_bottom()
        notice = notice_from_error(error)
        self._notices.append(notice)
        self._timeline.append(notice)

        self._notify_change()
        if was_at_bottom:
            self._scroll_to(notice)
        return notice

    def _enter_chatting(self) -> None:
        # One-way: INTRO -> CHATTING, never back.
        if self._view_state is ViewState.INTRO:
            self._view_state = ViewState.CHATTING
            logger.info("Conversation started")

    def _notify_change(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _scroll_to(self, item: ScrollTarget) -> None:
        if self.on_scroll is not None:
            self.on_scroll(item)

    def _check_writer(self) -> None:
        if threading.get_ident() != self._owner_thread:
            raise RuntimeError(
                "ConversationStore mutated off its owning thread; "
                "post the update onto the UI loop instead"
            )
