import asyncio
from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from lcshop.auth.google import GoogleAuthError, GoogleOAuthClient, normalize_userinfo


def _transport(token_status=200, userinfo=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "oauth2.googleapis.com":
            if token_status != 200:
                return httpx.Response(token_status, json={"error": "invalid_grant"})
            form = parse_qs(request.content.decode())
            assert form["code"] == ["auth-code"]
            assert form["grant_type"] == ["authorization_code"]
            return httpx.Response(200, json={"access_token": "at-123"})
        assert request.headers["Authorization"] == "Bearer at-123"
        return httpx.Response(200, json=userinfo or {})
    return httpx.MockTransport(handler)


def test_authorization_url_requests_profile_and_email():
    client = GoogleOAuthClient("cid", "csecret")
    url = urlparse(client.authorization_url("https://api.test/auth/google/callback"))
    params = parse_qs(url.query)
    assert url.netloc == "accounts.google.com"
    assert params["scope"] == ["profile email"]
    assert params["client_id"] == ["cid"]
    assert params["response_type"] == ["code"]
    assert params["redirect_uri"] == ["https://api.test/auth/google/callback"]

def test_fetch_profile_normalizes_userinfo():
    userinfo = {"sub": "42", "email": "a@b.com", "email_verified": True, "name": "A B"}
    client = GoogleOAuthClient("cid", "csecret", transport=_transport(userinfo=userinfo))
    profile = asyncio.run(client.fetch_profile("auth-code", "https://api.test/cb"))
    assert profile == {"id": "42", "displayName": "A B", "emails": [{"value": "a@b.com", "verified": True}]}

def test_fetch_profile_provider_error():
    client = GoogleOAuthClient("cid", "csecret", transport=_transport(token_status=400))
    with pytest.raises(GoogleAuthError):
        asyncio.run(client.fetch_profile("auth-code", "https://api.test/cb"))

def test_normalize_userinfo_without_email():
    assert normalize_userinfo({"sub": "1"}) == {"id": "1", "displayName": None, "emails": []}

def test_configured_flag():
    assert GoogleOAuthClient("cid", "csecret").configured is True
    assert GoogleOAuthClient("", "csecret").configured is False
