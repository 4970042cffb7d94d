import pytest
from typing import Any, Dict, Generator, List, Optional
from fastapi.testclient import TestClient

from lcshop.app import create_app
from lcshop.auth.google import GoogleOAuthClient
from lcshop.auth.tokens import issue_token
from lcshop.config import Settings
from lcshop.payments.iyzico_client import UnconfiguredGateway

TEST_SECRET = "test-secret-with-enough-entropy-for-hs256"

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class FakeGateway:
    """Passerelle iyzico configurée, sans réseau: enregistre les appels."""

    configured = True

    def __init__(
        self,
        init_result: Optional[Dict[str, Any]] = None,
        retrieve_result: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ):
        self.init_result = init_result if init_result is not None else {
            "status": "success",
            "checkoutFormContent": "<script>iyzi</script>",
            "token": "form-token",
        }
        self.retrieve_result = retrieve_result if retrieve_result is not None else {
            "status": "success",
            "paymentStatus": "SUCCESS",
        }
        self.error = error
        self.init_requests: List[Dict[str, Any]] = []
        self.retrieved_tokens: List[str] = []

    def initialize_checkout_form(self, request):
        self.init_requests.append(request)
        if self.error:
            raise self.error
        return self.init_result

    def retrieve_checkout_form(self, token):
        self.retrieved_tokens.append(token)
        if self.error:
            raise self.error
        return self.retrieve_result


class SpyUnconfiguredGateway(UnconfiguredGateway):
    def __init__(self):
        self.calls = 0

    def initialize_checkout_form(self, request):
        self.calls += 1
        return super().initialize_checkout_form(request)

    def retrieve_checkout_form(self, token):
        self.calls += 1
        return super().retrieve_checkout_form(token)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        frontend_url="https://front.test",
        jwt_secret=TEST_SECRET,
        iyzico_api_key="api-key",
        iyzico_secret_key="secret-key",
        iyzico_uri="https://sandbox-api.iyzipay.com",
        public_base_url="https://api.test",
        google_client_id="google-client",
        google_client_secret="google-secret",
    )

@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()

@pytest.fixture
def identity(settings) -> GoogleOAuthClient:
    return GoogleOAuthClient(settings.google_client_id, settings.google_client_secret)

@pytest.fixture
def app(settings, gateway, identity):
    return create_app(settings, gateway=gateway, identity=identity)

@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture
def auth_headers() -> Dict[str, str]:
    token = issue_token({"email": "buyer@example.com", "name": "Buyer Name"}, TEST_SECRET)
    return {"Authorization": f"Bearer {token}"}
