from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import TransportError


@contextmanager
def handle_errors(method: str, url: str) -> Generator[None, None, None]:
    """Context manager converting request-level failures of a single request.

    Wraps the send of a request and turns every ``httpx.RequestError``
    (connection refused, DNS failure, timeouts, protocol errors, redirect
    loops, undecodable bodies) into :class:`TransportError` carrying the
    method and URL. Status code failures are not handled here; they are
    classified once a response exists.

    Raises:
        TransportError: When the request could not be completed.
    """
    try:
        yield
    except httpx.RequestError as e:
        raise TransportError(method, url, str(e) or type(e).__name__) from e
