"""Failures of a single send/receive exchange."""


class TransportError(Exception):
    """Base class for errors raised by the chat transport."""

    pass


class InvalidConfigurationError(TransportError):
    """Raised when the chat endpoint is unset or malformed."""

    pass


class NetworkError(TransportError):
    """Raised when the request could not reach the server or got no reply."""

    pass


class DecodeError(TransportError):
    """Raised when the response body is not valid UTF-8 text."""

    pass
