"""Sanitization utilities for logged request data."""

from typing import Iterable, Mapping

from .constants import HEADER_AUTHORIZATION, MASKED_VALUE


def sanitize_headers(
    headers: Mapping[str, str], sensitive: Iterable[str] = ()
) -> dict[str, str]:
    """Mask credential headers before they are logged.

    ``Authorization`` is always masked; ``sensitive`` names further headers,
    such as a custom API-key header. Names are compared case-insensitively.

    Examples:
        >>> sanitize_headers({"Authorization": "Bearer abc", "Accept": "application/json"})
        {'Authorization': '***', 'Accept': 'application/json'}
    """
    masked = {HEADER_AUTHORIZATION.lower(), *(name.lower() for name in sensitive)}
    return {
        name: MASKED_VALUE if name.lower() in masked else value
        for name, value in headers.items()
    }
