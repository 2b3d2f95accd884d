from typing import Optional


class HttpActionsError(Exception):
    """Base class for every error raised by the HTTP actions client."""


class AuthParseError(HttpActionsError, ValueError):
    """Raised when an authorization value cannot be turned into a descriptor.

    Raised before any request is built, so no network call is ever made for
    a value that fails to parse.
    """

    def __init__(self, token: object, message: Optional[str] = None):
        self.token = token
        self.message = message or f"Invalid authorization type: {token!r}"
        super().__init__(self.message)


class RequestFailure(HttpActionsError):
    """Raised when the server answers with a non-2xx status code.

    Carries everything needed to diagnose the failed call: the status code,
    the response body text, the requested URL and the HTTP method.
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        url: str,
        method: str,
        reason: str = "",
    ):
        self.status_code = status_code
        self.body = body
        self.url = url
        self.method = method
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        self.message = f"{status}: {body} (URL: {url}, VERB: {method})"
        super().__init__(self.message)


class TransportError(HttpActionsError):
    """Raised when the request did not produce a usable response.

    Wraps connection failures, DNS errors, timeouts, redirect loops and
    undecodable bodies. The underlying ``httpx`` exception is available as
    ``__cause__``.
    """

    def __init__(self, method: str, url: str, detail: str):
        self.method = method
        self.url = url
        self.detail = detail
        self.message = f"{method} {url} failed: {detail}"
        super().__init__(self.message)


class RequestCancelledError(TransportError):
    """Raised when the caller's cancellation signal fires before a response arrives."""

    def __init__(self, method: str, url: str):
        super().__init__(method, url, "request was cancelled")


class SerializationError(HttpActionsError):
    """Raised when a payload cannot be encoded or a body cannot be decoded as JSON."""
