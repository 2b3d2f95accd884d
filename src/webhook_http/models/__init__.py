"""Public models for the HTTP actions client."""

from .auth import (
    ApiKeyAuth,
    ApiKeyLocation,
    AttachApiKeyOptions,
    AuthorizationDescriptor,
    AuthorizationInput,
    AuthorizationType,
    BasicAuth,
    BearerAuth,
    NoAuth,
    apply_authorization,
    authorization_headers,
    parse_authorization,
    resolve_authorization,
)
from .errors import (
    AuthParseError,
    HttpActionsError,
    RequestCancelledError,
    RequestFailure,
    SerializationError,
    TransportError,
)
from .web_request import WebRequestData

__all__ = [
    "ApiKeyAuth",
    "ApiKeyLocation",
    "AttachApiKeyOptions",
    "AuthorizationDescriptor",
    "AuthorizationInput",
    "AuthorizationType",
    "BasicAuth",
    "BearerAuth",
    "NoAuth",
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
    "WebRequestData",
]
