from starlette.requests import Request

from lcshop.payments.checkout import build_checkout_request, client_ip


def _request(headers=None, client=("10.0.0.9", 5555)):
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/api/iyzico/checkout-init",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": client,
    }
    return Request(scope)

def test_payload_shape_for_quarter_plan():
    payload = build_checkout_request(
        plan="quarter",
        price="269.00",
        claims={"email": "a@b.com", "name": "A B"},
        ip="1.2.3.4",
        callback_url="https://api.test/api/iyzico/callback",
        now_ms=1700000000000,
    )
    assert payload["locale"] == "tr"
    assert payload["conversationId"] == "LC-1700000000000"
    assert payload["basketId"] == "B1700000000000"
    assert payload["price"] == payload["paidPrice"] == "269.00"
    assert payload["currency"] == "TRY"
    assert payload["paymentGroup"] == "PRODUCT"
    assert payload["callbackUrl"] == "https://api.test/api/iyzico/callback"

    buyer = payload["buyer"]
    assert buyer["id"] == "U1700000000000"
    assert buyer["name"] == "A B"
    assert buyer["surname"] == "User"
    assert buyer["email"] == "a@b.com"
    assert buyer["identityNumber"] == "11111111111"
    assert buyer["ip"] == "1.2.3.4"
    assert (buyer["city"], buyer["country"]) == ("Istanbul", "Turkey")

    assert payload["shippingAddress"]["contactName"] == "A B"
    assert payload["billingAddress"]["address"] == "Digital Delivery"

    assert payload["basketItems"] == [{
        "id": "P-quarter",
        "name": "Discord Boost - quarter",
        "category1": "Digital",
        "itemType": "VIRTUAL",
        "price": "269.00",
    }]

def test_payload_placeholders_when_claims_are_empty():
    payload = build_checkout_request(
        plan="month", price="139.00", claims={}, ip="", callback_url="cb", now_ms=1,
    )
    assert payload["buyer"]["name"] == "LC"
    assert payload["buyer"]["email"] == "user@example.com"
    assert payload["shippingAddress"]["contactName"] == "LC User"
    assert payload["billingAddress"]["contactName"] == "LC User"

def test_client_ip_prefers_first_forwarded_entry():
    req = _request({"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})
    assert client_ip(req) == "203.0.113.7"

def test_client_ip_falls_back_to_socket_address():
    assert client_ip(_request()) == "10.0.0.9"
    assert client_ip(_request(client=None)) == ""
