"""HTTP transport for the chat endpoint.

One POST per message, no retries. The response body is returned verbatim
as the bot's reply whatever the status code, so server-side error pages
reach the user as-is.
"""

import json
import logging

import httpx

from talknative.client.errors import DecodeError, InvalidConfigurationError, NetworkError

logger = logging.getLogger(__name__)

CHAT_PATH = "/chat/message"
REQUEST_HEADERS = {"Content-Type": "application/json; charset=utf-8"}


def build_endpoint_url(base_url: str | None) -> str:
    """Join the configured base URL with the chat path.

    Args:
        base_url: Server base URL, optionally with a path prefix.

    Returns:
        Absolute URL of the chat endpoint.

    Raises:
        InvalidConfigurationError: If the base URL is unset, unparsable,
            not an absolute http(s) URL, or carries a
            query or fragment.
    """
    if not base_url or not base_url.strip():
        raise InvalidConfigurationError(
            "Chat endpoint is not configured. Set TALKNATIVE_API_BASE_URL in .env"
        )

    base_url = base_url.strip()
    try:
        parsed = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise InvalidConfigurationError(f"Invalid chat endpoint URL {base_url!r}: {e}") from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidConfigurationError(
            f"Invalid chat endpoint URL {base_url!r}: expected http(s)://host[:port]"
        )
    if parsed.query or parsed.fragment:
        raise InvalidConfigurationError(
            f"Invalid chat endpoint URL {base_url!r}: query and fragment are not allowed"
        )

    return f"{base_url.rstrip('/')}{CHAT_PATH}"


def _describe(error: httpx.RequestError) -> str:
    detail = str(error).strip()
    if isinstance(error, httpx.TimeoutException):
        return f"Request timed out{': ' + detail if detail else ''}"
    return detail or error.__class__.__name__


class ChatTransportClient:
    """Sends user messages to the chat endpoint.

    Each call to ``send`` opens its own client and issues exactly one
    request, following any redirects the server answers with. Nothing is
    cached between calls.
    """

    def __init__(
        self,
        base_url: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport client.

        Args:
            base_url: Chat server base URL. Validated lazily on each send so a
                bad value is reported per exchange instead of at startup.
            transport: Optional httpx transport, used to route requests to an
                in-process app in tests.
        """
        self._base_url = base_url
        self._transport = transport

    @property
    def base_url(self) -> str | None:
        return self._base_url

    async def send(self, text: str) -> str:
        """POST a message and return the raw reply text.

        Args:
            text: The user's message, sent as-is.

        Returns:
            Response body decoded as UTF-8.

        Raises:
            InvalidConfigurationError: If the endpoint is unset or malformed.
            NetworkError: If the request fails at the transport level.
            DecodeError: If the response body is not valid UTF-8.
        """
        url = build_endpoint_url(self._base_url)
        body = json.dumps({"message": text}, ensure_ascii=False).encode("utf-8")

        async with httpx.AsyncClient(transport=self._transport, follow_redirects=True) as client:
            try:
                response = await client.post(url, content=body, headers=REQUEST_HEADERS)
            except httpx.RequestError as e:
                raise NetworkError(_describe(e)) from e

        logger.debug(f"POST {url} -> {response.status_code} ({len(response.content)} bytes)")

        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Response from {url} is not valid UTF-8 text") from e
