import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import requests
from django.urls import reverse

from payments.exceptions import GatewayError, InvalidAmountError
from payments.gateway import RazorpayClient, RazorpayError
from payments.services import create_checkout_order, parse_amount, to_minor_units

pytestmark = pytest.mark.django_db

RAZORPAY_ORDER = {
    "id": "order_IluGWxBm9U8zJ8",
    "entity": "order",
    "amount": 1999,
    "currency": "INR",
    "status": "created",
}


@pytest.fixture
def gateway():
    gw = MagicMock()
    gw.create_order.return_value = dict(RAZORPAY_ORDER)
    return gw


@pytest.fixture
def patched_gateway(mocker, gateway):
    mocker.patch("payments.views.build_gateway", return_value=gateway)
    return gateway


@pytest.mark.parametrize("raw", [0, -5, "abc", None, "", True, "NaN", "Infinity", "0.001", [10]])
def test_invalid_amount_never_reaches_gateway(gateway, raw):
    with pytest.raises(InvalidAmountError):
        create_checkout_order(gateway, raw)
    gateway.create_order.assert_not_called()


@pytest.mark.parametrize("raw, minor", [
    (19.99, 1999),
    ("19.99", 1999),
    (500, 50000),
    ("0.005", 1),
    (1234.565, 123457),
])
def test_amount_is_sent_in_minor_units(gateway, raw, minor):
    create_checkout_order(gateway, raw)
    payload = gateway.create_order.call_args.args[0]
    assert payload["amount"] == minor


def test_checkout_request_shape(gateway):
    order = create_checkout_order(gateway, 19.99)

    payload = gateway.create_order.call_args.args[0]
    assert payload["amount"] == 1999
    assert payload["currency"] == "INR"
    assert payload["payment_capture"] == 1
    assert len(payload["receipt"]) == 32
    assert order == RAZORPAY_ORDER


def test_each_checkout_gets_a_fresh_receipt(gateway):
    create_checkout_order(gateway, 10)
    create_checkout_order(gateway, 10)
    first, second = (c.args[0]["receipt"] for c in gateway.create_order.call_args_list)
    assert first != second


def test_gateway_failure_is_reported_generically(gateway):
    gateway.create_order.side_effect = RazorpayError("API error 401: bad key")
    with pytest.raises(GatewayError) as exc:
        create_checkout_order(gateway, 100)
    assert exc.value.status_code == 500
    assert exc.value.message == "An error occurred during checkout"


def test_parse_amount_and_minor_units():
    assert parse_amount(" 42.50 ") == Decimal("42.50")
    assert to_minor_units(Decimal("42.50")) == 4250


# --- HTTP ---

def test_checkout_view_returns_gateway_order(client, patched_gateway):
    resp = client.post("/checkout", data=json.dumps({"amount": 19.99}),
                       content_type="application/json")
    assert resp.status_code == 200
    assert resp.json() == {"status": True, "order": RAZORPAY_ORDER}


def test_checkout_view_accepts_form_body(client, patched_gateway):
    resp = client.post("/checkout", data={"amount": "250"})
    assert resp.status_code == 200
    assert patched_gateway.create_order.call_args.args[0]["amount"] == 25000


@pytest.mark.parametrize("body", [{"amount": 0}, {"amount": -5}, {"amount": "abc"}, {"amount": None}, {}])
def test_checkout_view_rejects_bad_amount(client, patched_gateway, body):
    resp = client.post("/checkout", data=json.dumps(body), content_type="application/json")
    assert resp.status_code == 400
    assert resp.json() == {"status": False, "message": "Invalid amount"}
    patched_gateway.create_order.assert_not_called()


def test_checkout_view_hides_gateway_error(client, patched_gateway):
    patched_gateway.create_order.side_effect = RazorpayError("API error 500: internal details")
    resp = client.post("/checkout", data=json.dumps({"amount": 10}), content_type="application/json")
    assert resp.status_code == 500
    assert resp.json() == {"status": False, "message": "An error occurred during checkout"}


def test_checkout_view_rejects_bad_json(client, patched_gateway):
    resp = client.post("/checkout", data="{amount", content_type="application/json")
    assert resp.status_code == 400
    patched_gateway.create_order.assert_not_called()


def test_checkout_requires_post(client):
    assert client.get("/checkout").status_code == 405


def test_api_key_view(client):
    resp = client.get("/api-key")
    assert resp.status_code == 200
    assert resp.json() == {"key": "rzp_test_key"}


@pytest.mark.parametrize("name, path", [
    ("payments:checkout", "/checkout"),
    ("payments:payment_verification", "/payment-verification"),
    ("payments:api_key", "/api-key"),
])
def test_storefront_paths_are_unprefixed(name, path):
    assert reverse(name) == path


# --- Razorpay client ---

def _response(status, body):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = body
    resp.text = json.dumps(body)
    return resp


def test_client_posts_order_with_basic_auth_and_timeout():
    session = MagicMock()
    session.post.return_value = _response(200, RAZORPAY_ORDER)
    client = RazorpayClient("key", "secret", base_url="https://api.razorpay.com/v1/", timeout=7, session=session)

    assert client.create_order({"amount": 1999}) == RAZORPAY_ORDER
    session.post.assert_called_once_with(
        "https://api.razorpay.com/v1/orders",
        auth=("key", "secret"),
        json={"amount": 1999},
        timeout=7,
    )


def test_client_raises_on_api_error():
    session = MagicMock()
    session.post.return_value = _response(400, {"error": {"description": "amount too small"}})
    client = RazorpayClient("key", "secret", base_url="https://api.razorpay.com/v1", timeout=7, session=session)

    with pytest.raises(RazorpayError, match="API error 400"):
        client.create_order({"amount": 1})


def test_client_raises_on_network_error():
    session = MagicMock()
    session.post.side_effect = requests.Timeout("read timed out")
    client = RazorpayClient("key", "secret", base_url="https://api.razorpay.com/v1", timeout=7, session=session)

    with pytest.raises(RazorpayError, match="Network error"):
        client.create_order({"amount": 100})


def test_client_requires_credentials():
    session = MagicMock()
    client = RazorpayClient("", "", base_url="https://api.razorpay.com/v1", timeout=7, session=session)

    with pytest.raises(RazorpayError):
        client.create_order({"amount": 100})
    session.post.assert_not_called()
