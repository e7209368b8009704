"""Glue between the conversation store and the transport.

Each accepted user message starts one exchange task on the running loop.
The task awaits the transport, then posts its outcome back onto the loop
with ``call_soon_threadsafe``; only that posted callable touches the store.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from talknative.client.errors import TransportError
from talknative.client.store import ConversationStore, ScrollTarget
from talknative.client.transport import ChatTransportClient
from talknative.client.viewport import ViewportTracker
from talknative.models.schemas import Message, SystemNotice

logger = logging.getLogger(__name__)


class ChatController:
    """Runs send/receive exchanges for one conversation.

    Concurrent sends are allowed. Replies are appended in the order they
    arrive, which may differ from the order the messages were sent.
    """

    def __init__(
        self,
        transport: ChatTransportClient,
        viewport: ViewportTracker | None = None,
        on_change: Callable[[], None] | None = None,
        on_scroll: Callable[[ScrollTarget], None] | None = None,
        on_notice: Callable[[SystemNotice], None] | None = None,
    ) -> None:
        self.transport = transport
        self.viewport = viewport or ViewportTracker()
        self.on_notice = on_notice
        self.store = ConversationStore(
            on_send=self._dispatch,
            on_scroll=on_scroll,
            on_change=on_change,
            is_near_bottom=self.viewport.is_near_bottom,
        )
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def submit(self, text: str | None = None) -> Message | None:
        """Send ``text`` (or the current draft). Must run on the UI loop."""
        return self.store.append_user_message(text)

    async def drain(self) -> None:
        """Wait until every in-flight exchange has been applied."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _dispatch(self, text: str) -> None:
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._exchange(text, loop))
        self._pending.add(task)
        task.add_done_callback(self._on_done)

    async def _exchange(self, text: str, loop: asyncio.AbstractEventLoop) -> None:
        try:
            reply = await self.transport.send(text)
        except TransportError as e:
            logger.warning(f"Chat exchange failed ({e.__class__.__name__}): {e}")
            await self._post(loop, self._apply_error, e)
            return

        await self._post(loop, self.store.append_bot_message, reply)

    def _apply_error(self, error: TransportError) -> SystemNotice:
        notice = self.store.report_error(error)
        if self.on_notice is not None:
            self.on_notice(notice)
        return notice

    @staticmethod
    async def _post(loop: asyncio.AbstractEventLoop, fn: Callable[..., Any], *args: Any) -> Any:
        """Run ``fn`` as a callback on ``loop`` and wait for its result."""
        applied = loop.create_future()

        def apply() -> None:
            try:
                applied.set_result(fn(*args))
            except Exception as e:
                applied.set_exception(e)

        loop.call_soon_threadsafe(apply)
        return await applied

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        if (error := task.exception()) is not None:
            logger.error(f"Chat exchange crashed: {error!r}")
