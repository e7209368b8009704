"""Echo chat endpoint for local development.

Speaks the same wire protocol as the real chat server so the client can be
exercised end-to-end without one.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from talknative.models.schemas import ChatMessageRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/message", response_class=PlainTextResponse)
async def post_message(request: ChatMessageRequest) -> PlainTextResponse:
    """Reply with the received message text.

    Args:
        request: Validated payload with a non-empty, stripped message.

    Returns:
        The message as UTF-8 plain text.

    Raises:
        422: Missing, empty or whitespace-only message.
    """
    logger.info(f"Echoing message ({len(request.message)} chars)")
    return PlainTextResponse(request.message, media_type="text/plain; charset=utf-8")
