from decimal import Decimal

import pytest

from orders.models import Order, OrderItem
from orders.services import find_order, mark_order_paid, set_item_status

pytestmark = pytest.mark.django_db


def test_vendor_share_excludes_tax(order):
    assert order.vendor_share == Decimal("450.00")


def test_mark_order_paid(order):
    updated = mark_order_paid(order.pk)

    assert updated.pk == order.pk
    order.refresh_from_db()
    assert order.payment_status == Order.PaymentStatus.PAID
    assert order.paid_at is not None


@pytest.mark.parametrize("order_id", [None, "", "abc", 999999])
def test_mark_order_paid_missing_order(order_id):
    assert mark_order_paid(order_id) is None


def test_find_order_accepts_string_ids(order):
    assert find_order(str(order.pk)) == order


def test_item_status_change_notifies_customer(order, mailoutbox, django_capture_on_commit_callbacks):
    item = order.items.get()
    with django_capture_on_commit_callbacks(execute=True):
        assert set_item_status(item, OrderItem.Status.SHIPPED) is True

    item.refresh_from_db()
    assert item.status == OrderItem.Status.SHIPPED
    assert len(mailoutbox) == 1
    mail = mailoutbox[0]
    assert mail.subject == "Product status updated: Brass lamp"
    assert mail.to == ["buyer@example.com"]
    assert f"order id {order.pk}" in mail.body
    assert "Shipped" in mail.body


def test_unchanged_status_sends_nothing(order, mailoutbox, django_capture_on_commit_callbacks):
    item = order.items.get()
    with django_capture_on_commit_callbacks(execute=True):
        assert set_item_status(item, OrderItem.Status.PROCESSING) is False
    assert mailoutbox == []


def test_unknown_status_is_rejected(order):
    with pytest.raises(ValueError):
        set_item_status(order.items.get(), "lost")
