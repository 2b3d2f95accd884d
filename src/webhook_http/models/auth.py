"""Authorization descriptors for outgoing requests.

A request is authorized by exactly one descriptor variant. Descriptors come
either from the structured models below or from the compact
``"<AuthType>:<value>"`` string form, and both are resolved once, before a
request is built, by :func:`resolve_authorization`.
"""

import base64
from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .._utils.constants import (
    APPLICATION_JSON,
    AUTH_SCHEME_BASIC,
    AUTH_SCHEME_BEARER,
    AUTH_STRING_SEPARATOR,
    HEADER_ACCEPT,
    HEADER_API_KEY,
    HEADER_AUTHORIZATION,
)
from .errors import AuthParseError


class AuthorizationType(str, Enum):
    """Supported authorization schemes, named as they appear in the string form."""

    NO_AUTH = "NoAuth"
    BEARER = "Bearer"
    BASIC = "Basic"
    XAPIKEY = "XAPIKey"


class ApiKeyLocation(str, Enum):
    """Where an API key is attached to the request."""

    HEADER = "header"
    QUERY = "query"


class AttachApiKeyOptions(BaseModel):
    """Placement options for an API key.

    Only header placement is implemented. ``QUERY`` is accepted here so that
    configurations can be written ahead of time, but authorizing a request
    with it raises ``NotImplementedError``.
    """

    model_config = ConfigDict(frozen=True)

    attach_as: ApiKeyLocation = ApiKeyLocation.HEADER
    query_parameter_name: Optional[str] = None


class NoAuth(BaseModel):
    model_config = ConfigDict(frozen=True)

    auth_type: Literal[AuthorizationType.NO_AUTH] = AuthorizationType.NO_AUTH


class BasicAuth(BaseModel):
    """HTTP basic authorization.

    Built from ``username``/``password`` the credentials are base64 encoded
    when the header is produced. Built from the string form (``"Basic:<value>"``)
    only ``encoded_credentials`` is set and it is sent verbatim, without
    re-encoding. The two paths are not equivalent: a ``user:pass`` pair passed
    through the string form is sent as-is, not encoded.
    """

    model_config = ConfigDict(frozen=True)

    auth_type: Literal[AuthorizationType.BASIC] = AuthorizationType.BASIC
    username: str = ""
    password: str = Field(default="", repr=False)
    encoded_credentials: Optional[str] = Field(default=None, repr=False)

    @property
    def credentials(self) -> str:
        if self.encoded_credentials is not None:
            return self.encoded_credentials
        raw = f"{self.username}:{self.password}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")


class BearerAuth(BaseModel):
    model_config = ConfigDict(frozen=True)

    auth_type: Literal[AuthorizationType.BEARER] = AuthorizationType.BEARER
    token: str = Field(repr=False)


class ApiKeyAuth(BaseModel):
    model_config = ConfigDict(frozen=True)

    auth_type: Literal[AuthorizationType.XAPIKEY] = AuthorizationType.XAPIKEY
    header_name: str = HEADER_API_KEY
    header_value: str = Field(repr=False)
    options: AttachApiKeyOptions = Field(default_factory=AttachApiKeyOptions)


AuthorizationDescriptor = Annotated[
    Union[NoAuth, BasicAuth, BearerAuth, ApiKeyAuth],
    Field(discriminator="auth_type"),
]

AuthorizationInput = Union[NoAuth, BasicAuth, BearerAuth, ApiKeyAuth, str, Mapping[str, Any], None]

_descriptor_adapter: TypeAdapter[AuthorizationDescriptor] = TypeAdapter(
    AuthorizationDescriptor
)

_DESCRIPTOR_TYPES = (NoAuth, BasicAuth, BearerAuth, ApiKeyAuth)


def parse_authorization(value: str) -> AuthorizationDescriptor:
    """Parse the compact ``"<AuthType>:<value>"`` form into a descriptor.

    The string is split on the first ``:`` only, so the value may itself
    contain colons. The type name is matched case-sensitively.

    Args:
        value: The encoded authorization, e.g. ``"Bearer:abc123"``.

    Returns:
        The matching descriptor variant.

    Raises:
        AuthParseError: If the separator is missing or the type is unknown.

    Examples:
        >>> parse_authorization("Bearer:abc123")
        BearerAuth(auth_type=<AuthorizationType.BEARER: 'Bearer'>)
    """
    auth_type, separator, auth_value = value.partition(AUTH_STRING_SEPARATOR)
    if not separator:
        raise AuthParseError(
            value, f"Authorization must use the '<AuthType>:<value>' form, got {value!r}"
        )

    try:
        parsed_type = AuthorizationType(auth_type)
    except ValueError:
        raise AuthParseError(auth_type) from None

    match parsed_type:
        case AuthorizationType.NO_AUTH:
            return NoAuth()
        case AuthorizationType.BASIC:
            return BasicAuth(encoded_credentials=auth_value)
        case AuthorizationType.BEARER:
            return BearerAuth(token=auth_value)
        case AuthorizationType.XAPIKEY:
            return ApiKeyAuth(header_name=HEADER_API_KEY, header_value=auth_value)


def resolve_authorization(value: AuthorizationInput) -> AuthorizationDescriptor:
    """Turn any accepted authorization input into a single descriptor.

    ``None`` means no authorization. Strings use the compact form, mappings
    are validated against the tagged descriptor models (keyed by
    ``auth_type``) and descriptors are returned unchanged.
    """
    if value is None:
        return NoAuth()
    if isinstance(value, _DESCRIPTOR_TYPES):
        return value
    if isinstance(value, str):
        return parse_authorization(value)
    if isinstance(value, Mapping):
        try:
            return _descriptor_adapter.validate_python(value)
        except ValidationError as e:
            raise AuthParseError(
                value.get("auth_type"), f"Invalid authorization descriptor: {e}"
            ) from e
    raise AuthParseError(
        type(value).__name__,
        f"Invalid authorization parameter type: {type(value).__name__}",
    )


def authorization_headers(descriptor: AuthorizationDescriptor) -> dict[str, str]:
    """Headers a descriptor adds to a request.

    ``Accept: application/json`` is always present; NoAuth adds nothing else.
    """
    headers = {HEADER_ACCEPT: APPLICATION_JSON}

    match descriptor.auth_type:
        case AuthorizationType.BASIC:
            headers[HEADER_AUTHORIZATION] = f"{AUTH_SCHEME_BASIC} {descriptor.credentials}"
        case AuthorizationType.BEARER:
            headers[HEADER_AUTHORIZATION] = f"{AUTH_SCHEME_BEARER} {descriptor.token}"
        case AuthorizationType.XAPIKEY:
            # TODO: honour ApiKeyLocation.QUERY by appending query_parameter_name to the URL
            if descriptor.options.attach_as is not ApiKeyLocation.HEADER:
                raise NotImplementedError(
                    "Attaching an API key as a query parameter is not supported"
                )
            headers[descriptor.header_name] = descriptor.header_value

    return headers


def apply_authorization(
    headers: Mapping[str, str], descriptor: AuthorizationDescriptor
) -> dict[str, str]:
    """Return a copy of ``headers`` with the descriptor's headers set on it."""
    return {**headers, **authorization_headers(descriptor)}
