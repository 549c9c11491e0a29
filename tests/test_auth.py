"""Tests for the identity endpoint exchange."""
import json

import pytest

from feishu_openapi.core.auth import fetch_access_token
from feishu_openapi.errors import AuthError, RemoteAPIError, TransportError

from conftest import APP_TOKEN_URL, TENANT_TOKEN_URL, token_body


class TestFetchAccessToken:
    """Test fetch_access_token parsing and failure mapping."""

    def test_posts_credentials(self, transport, clock):
        token = fetch_access_token(transport, TENANT_TOKEN_URL, "tenant_access_token",
                                   "a", "b", clock=clock)

        call = transport.calls[0]
        assert call["method"] == "POST"
        assert call["url"] == TENANT_TOKEN_URL
        assert json.loads(call["data"]) == {"app_id": "a", "app_secret": "b"}
        assert call["headers"]["Content-Type"].startswith("application/json")
        assert "Authorization" not in call["headers"]
        assert token.value == "t-tenant"
        assert token.expires_at == clock() + 7200

    def test_app_access_token_field(self, transport, clock):
        token = fetch_access_token(transport, APP_TOKEN_URL, "app_access_token",
                                   "a", "b", clock=clock)
        assert token.value == "a-app"

    def test_expires_in_accepted(self, transport, clock):
        transport.reply(TENANT_TOKEN_URL, {"code": 0, "tenant_access_token": "T1", "expires_in": 60})
        token = fetch_access_token(transport, TENANT_TOKEN_URL, "tenant_access_token",
                                   "a", "b", clock=clock)
        assert token.expires_at == clock() + 60

    def test_missing_credentials(self, transport):
        with pytest.raises(AuthError):
            fetch_access_token(transport, TENANT_TOKEN_URL, "tenant_access_token", "", "b")
        assert transport.calls == []

    def test_error_code(self, transport):
        transport.reply(TENANT_TOKEN_URL, {"code": 10014, "msg": "app secret invalid"})
        with pytest.raises(AuthError) as exc_info:
            fetch_access_token(transport, TENANT_TOKEN_URL, "tenant_access_token", "a", "b")
        assert exc_info.value.code == 10014
        assert exc_info.value.msg == "app secret invalid"

    @pytest.mark.parametrize("body", [
        b"<html>bad gateway</html>",
        b"[]",
        b'{"code": 0, "expire": 7200}',
        b'{"code": 0, "tenant_access_token": "T1"}',
        b'{"code": 0, "tenant_access_token": "T1", "expire": "7200"}',
        b'{"code": 0, "tenant_access_token": "T1", "expire": 0}',
    ])
    def test_malformed_body(self, transport, body):
        transport.reply(TENANT_TOKEN_URL, body)
        with pytest.raises(AuthError):
            fetch_access_token(transport, TENANT_TOKEN_URL, "tenant_access_token", "a", "b")

    def test_transport_error_becomes_auth_error(self, transport):
        def fail(call):
            raise TransportError("connection refused", url=call["url"])

        transport.route(TENANT_TOKEN_URL, fail)
        with pytest.raises(AuthError) as exc_info:
            fetch_access_token(transport, TENANT_TOKEN_URL, "tenant_access_token", "a", "b")
        assert isinstance(exc_info.value.__cause__, TransportError)

    def test_http_error_becomes_auth_error(self, transport):
        def fail(call):
            raise RemoteAPIError("HTTP 503", status_code=503, body=b"")

        transport.route(TENANT_TOKEN_URL, fail)
        with pytest.raises(AuthError) as exc_info:
            fetch_access_token(transport, TENANT_TOKEN_URL, "tenant_access_token", "a", "b")
        assert exc_info.value.__cause__.status_code == 503


class TestClientTokenFailure:
    """Failed exchange through the client keeps the cached token."""

    def test_failed_refresh_keeps_cached_token(self, client, transport, clock):
        client.get_tenant_access_token()
        previous = client.tenant_token.cached

        clock.advance(7200)
        transport.reply(TENANT_TOKEN_URL, {"code": 99991663, "msg": "invalid"})
        with pytest.raises(AuthError):
            client.get_tenant_access_token()
        assert client.tenant_token.cached is previous

        transport.reply(TENANT_TOKEN_URL, token_body("t-new"))
        assert client.get_tenant_access_token() == "t-new"


class TestResponseWithoutCode:
    """Identity answers that omit ``code`` are successes."""

    def test_body_without_code_through_client(self, client, transport, clock):
        transport.reply(TENANT_TOKEN_URL, {"tenant_access_token": "T1", "expire": 7200})

        assert client.get_tenant_access_token() == "T1"
        clock.advance(7200 - 30 - 1)
        assert client.get_tenant_access_token() == "T1"
        assert len(transport.calls_to(TENANT_TOKEN_URL)) == 1

        clock.advance(1)
        assert client.get_tenant_access_token() == "T1"
        assert len(transport.calls_to(TENANT_TOKEN_URL)) == 2

    def test_generic_token_and_expires_in(self, transport, clock):
        transport.reply(TENANT_TOKEN_URL, {"token": "T1", "expires_in": 7200})
        token = fetch_access_token(transport, TENANT_TOKEN_URL, "tenant_access_token",
                                   "a", "b", clock=clock)
        assert token.value == "T1"
        assert token.expires_at == clock() + 7200

    def test_explicit_non_zero_code_still_fails(self, transport):
        transport.reply(TENANT_TOKEN_URL, {"code": 10003, "tenant_access_token": "T1", "expire": 7200})
        with pytest.raises(AuthError):
            fetch_access_token(transport, TENANT_TOKEN_URL, "tenant_access_token", "a", "b")
