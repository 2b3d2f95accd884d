"""Authenticated JSON HTTP actions for webhook processing.

Exposes :class:`HttpActions`, the verb-oriented client, together with the
authorization descriptors, the retry helper and the error types it raises.
"""

from ._config import HttpActionsConfig
from ._http_actions import HttpActions
from ._services import RequestExecutor
from ._utils._query import merge_query
from ._utils._retry import retry_on_fail
from .models import (
    ApiKeyAuth,
    ApiKeyLocation,
    AttachApiKeyOptions,
    AuthorizationDescriptor,
    AuthorizationType,
    AuthParseError,
    BasicAuth,
    BearerAuth,
    HttpActionsError,
    NoAuth,
    RequestCancelledError,
    RequestFailure,
    SerializationError,
    TransportError,
    WebRequestData,
    apply_authorization,
    authorization_headers,
    parse_authorization,
    resolve_authorization,
)

__all__ = [
    "HttpActions",
    "HttpActionsConfig",
    "RequestExecutor",
    "merge_query",
    "retry_on_fail",
    "ApiKeyAuth",
    "ApiKeyLocation",
    "AttachApiKeyOptions",
    "AuthorizationDescriptor",
    "AuthorizationType",
    "BasicAuth",
    "BearerAuth",
    "NoAuth",
    "WebRequestData",
    "apply_authorization",
    "authorization_headers",
    "parse_authorization",
    "resolve_authorization",
    "AuthParseError",
    "HttpActionsError",
    "RequestCancelledError",
    "RequestFailure",
    "SerializationError",
    "TransportError",
]
