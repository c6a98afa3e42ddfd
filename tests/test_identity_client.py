"""
Identity Client Tests

Tests for bearer extraction and credential resolution against a mocked
auth service (httpx.MockTransport).
"""

import asyncio
import pytest
import httpx

from app.identity.client import IdentityClient, IdentityError, extract_bearer_token


BASE_URL = "https://auth.example.test"
ANON_KEY = "anon-key"


def make_client(handler) -> IdentityClient:
    return IdentityClient(
        base_url=BASE_URL,
        anon_key=ANON_KEY,
        transport=httpx.MockTransport(handler),
    )


def run(coro):
    return asyncio.run(coro)


# ============================================
# BEARER EXTRACTION
# ============================================

class TestExtractBearerToken:

    def test_bearer(self):
        assert extract_bearer_token("Bearer abc.def") == "abc.def"

    def test_scheme_case_insensitive(self):
        assert extract_bearer_token("bearer abc") == "abc"

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Basic abc", "abc"])
    def test_invalid(self, header):
        assert extract_bearer_token(header) is None


# ============================================
# CREDENTIAL RESOLUTION
# ============================================

class TestGetUser:

    def test_resolves_user(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["apikey"] = request.headers["apikey"]
            return httpx.Response(200, json={"id": "user-1", "email": "a@example.test"})

        user = run(make_client(handler).get_user("token-1"))

        assert user.user_id == "user-1"
        assert user.email == "a@example.test"
        assert seen == {
            "url": f"{BASE_URL}/auth/v1/user",
            "auth": "Bearer token-1",
            "apikey": ANON_KEY,
        }

    def test_rejected_credential(self):
        client = make_client(lambda request: httpx.Response(401, json={"msg": "invalid JWT"}))

        with pytest.raises(IdentityError) as exc_info:
            run(client.get_user("expired"))

        assert exc_info.value.status_code == 401

    def test_missing_user_id(self):
        client = make_client(lambda request: httpx.Response(200, json={"email": "x"}))

        with pytest.raises(IdentityError):
            run(client.get_user("token"))

    def test_non_json_body(self):
        client = make_client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(IdentityError):
            run(client.get_user("token"))

    def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(IdentityError):
            run(make_client(handler).get_user("token"))

    def test_empty_credential(self):
        with pytest.raises(IdentityError):
            run(make_client(lambda request: httpx.Response(200, json={"id": "u"})).get_user(""))

    def test_unconfigured_client(self):
        with pytest.raises(IdentityError):
            run(IdentityClient().get_user("token"))
