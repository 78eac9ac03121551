"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest

from orders.models import Order, OrderItem
from payments.signature import expected_signature

TEST_SECRET = "rzp_test_secret"


@pytest.fixture(autouse=True)
def test_settings(settings):
    """Razorpay and site settings for tests."""
    settings.RAZORPAY_KEY_ID = "rzp_test_key"
    settings.RAZORPAY_KEY_SECRET = TEST_SECRET
    settings.RAZORPAY_CURRENCY = "INR"
    settings.DOMAIN = "https://shop.example.com"
    settings.DEFAULT_FROM_EMAIL = "noreply@shop.example.com"
    settings.CONTACTS_NOTIFY_EMAILS = []
    settings.LEDGER_TIME_ZONE = "Asia/Kolkata"
    return settings


@pytest.fixture
def customer(django_user_model):
    return django_user_model.objects.create_user(
        username="buyer", email="buyer@example.com", password="S3cure-pass-123",
    )


@pytest.fixture
def vendor(django_user_model):
    return django_user_model.objects.create_user(
        username="seller", email="seller@example.com", password="S3cure-pass-123", is_vendor=True,
    )


@pytest.fixture
def order(customer, vendor):
    order = Order.objects.create(
        customer=customer, vendor=vendor, total_price=Decimal("500.00"), tax=Decimal("50.00"),
    )
    OrderItem.objects.create(order=order, name="Brass lamp", quantity=2, unit_price=Decimal("225.00"))
    return order


@pytest.fixture
def make_callback():
    """Builds a Razorpay callback payload signed with the test secret."""
    def _make(order_id="order_Lz3k9x1", payment_id="pay_Lz3kQ7v", secret=TEST_SECRET):
        return {
            "razorpay_order_id": order_id,
            "razorpay_payment_id": payment_id,
            "razorpay_signature": expected_signature(order_id, payment_id, secret),
        }
    return _make
