import base64

import pytest

from webhook_http import (
    ApiKeyAuth,
    ApiKeyLocation,
    AttachApiKeyOptions,
    AuthorizationType,
    AuthParseError,
    BasicAuth,
    BearerAuth,
    NoAuth,
    apply_authorization,
    authorization_headers,
    parse_authorization,
    resolve_authorization,
)


class TestAuthorizationHeaders:
    def test_no_auth_sets_only_accept(self) -> None:
        assert authorization_headers(NoAuth()) == {"Accept": "application/json"}

    def test_basic_auth_encodes_username_and_password(self) -> None:
        expected = base64.b64encode(b"user:pass").decode("ascii")

        headers = authorization_headers(BasicAuth(username="user", password="pass"))

        assert headers == {
            "Accept": "application/json",
            "Authorization": f"Basic {expected}",
        }

    def test_bearer_auth(self) -> None:
        headers = authorization_headers(BearerAuth(token="xyz"))

        assert headers == {
            "Accept": "application/json",
            "Authorization": "Bearer xyz",
        }

    def test_api_key_auth_uses_custom_header(self) -> None:
        descriptor = ApiKeyAuth(header_name="X-Webhook-Key", header_value="secret")

        headers = authorization_headers(descriptor)

        assert headers == {
            "Accept": "application/json",
            "X-Webhook-Key": "secret",
        }

    def test_api_key_query_placement_is_not_implemented(self) -> None:
        descriptor = ApiKeyAuth(
            header_value="secret",
            options=AttachApiKeyOptions(
                attach_as=ApiKeyLocation.QUERY, query_parameter_name="api_key"
            ),
        )

        with pytest.raises(NotImplementedError):
            authorization_headers(descriptor)

    def test_apply_authorization_returns_new_mapping(self) -> None:
        original = {"X-Trace": "1", "Accept": "text/plain"}

        headers = apply_authorization(original, BearerAuth(token="xyz"))

        assert headers == {
            "X-Trace": "1",
            "Accept": "application/json",
            "Authorization": "Bearer xyz",
        }
        assert original == {"X-Trace": "1", "Accept": "text/plain"}


class TestParseAuthorization:
    @pytest.mark.parametrize(
        "value, descriptor",
        [
            ("Bearer:xyz", BearerAuth(token="xyz")),
            ("NoAuth:", NoAuth()),
            (
                "XAPIKey:secret",
                ApiKeyAuth(header_name="X-Api-Key", header_value="secret"),
            ),
        ],
    )
    def test_string_form_matches_struct_form(self, value, descriptor) -> None:
        parsed = parse_authorization(value)

        assert parsed == descriptor
        assert authorization_headers(parsed) == authorization_headers(descriptor)

    def test_basic_string_form_is_sent_verbatim(self) -> None:
        parsed = parse_authorization("Basic:dXNlcjpwYXNz")

        assert isinstance(parsed, BasicAuth)
        assert parsed.encoded_credentials == "dXNlcjpwYXNz"
        assert authorization_headers(parsed)["Authorization"] == "Basic dXNlcjpwYXNz"

    def test_basic_string_form_does_not_reencode(self) -> None:
        parsed = parse_authorization("Basic:user:pass")

        assert authorization_headers(parsed)["Authorization"] == "Basic user:pass"
        assert authorization_headers(parsed) != authorization_headers(
            BasicAuth(username="user", password="pass")
        )

    def test_splits_on_first_separator_only(self) -> None:
        parsed = parse_authorization("Bearer:a:b:c")

        assert parsed == BearerAuth(token="a:b:c")

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(AuthParseError) as exc_info:
            parse_authorization("Foo:bar")

        assert exc_info.value.token == "Foo"
        assert "Foo" in str(exc_info.value)

    def test_type_name_is_case_sensitive(self) -> None:
        with pytest.raises(AuthParseError):
            parse_authorization("bearer:xyz")

    def test_missing_separator_raises(self) -> None:
        with pytest.raises(AuthParseError):
            parse_authorization("Bearer")


class TestResolveAuthorization:
    def test_none_is_no_auth(self) -> None:
        assert resolve_authorization(None) == NoAuth()

    def test_descriptor_is_returned_unchanged(self) -> None:
        descriptor = BearerAuth(token="xyz")

        assert resolve_authorization(descriptor) is descriptor

    def test_string_is_parsed(self) -> None:
        assert resolve_authorization("Bearer:xyz") == BearerAuth(token="xyz")

    def test_mapping_is_validated_by_auth_type(self) -> None:
        descriptor = resolve_authorization(
            {"auth_type": "Basic", "username": "user", "password": "pass"}
        )

        assert descriptor == BasicAuth(username="user", password="pass")
        assert descriptor.auth_type == AuthorizationType.BASIC

    def test_invalid_mapping_raises(self) -> None:
        with pytest.raises(AuthParseError):
            resolve_authorization({"auth_type": "Foo"})

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(AuthParseError, match="int"):
            resolve_authorization(42)  # type: ignore[arg-type]


class TestDescriptorRepr:
    def test_secrets_are_hidden(self) -> None:
        assert "xyz" not in repr(BearerAuth(token="xyz"))
        assert "pass" not in repr(BasicAuth(username="user", password="pass"))
        assert "secret" not in repr(ApiKeyAuth(header_value="secret"))
