# Token service errors - closed hierarchy raised by the client.
# Created: 2026-10-18

from __future__ import annotations


class TokenServiceError(Exception):
    """Base class for every error raised by twitchoauth."""


class RequestError(TokenServiceError):
    """The request never produced a response (DNS, connect, TLS, timeout)."""


class DecodeError(TokenServiceError):
    """A response arrived but its body does not match the expected shape.

    Attributes:
        status_code: HTTP status of the response.
        body: Raw response body.
        detail: Parser diagnostic.
    """

    def __init__(self, status_code: int, body: str, detail: str = ""):
        self.status_code = status_code
        self.body = body
        self.detail = detail
        super().__init__(f"HTTP {status_code}: could not decode response: {detail}")


class RemoteError(DecodeError):
    """The authorization server answered with a non-2xx status.

    ``message`` holds the server's own explanation when its error body
    could be read, e.g. ``"invalid access token"``.
    """

    def __init__(self, status_code: int, body: str, message: str | None = None):
        super().__init__(status_code, body, message or "")
        self.message = message
        self.args = (f"HTTP {status_code}: {message or 'request rejected'}",)
