# orders/services.py
import logging

from django.db import transaction
from django.utils import timezone

from core.mail import send_quietly, send_templated_mail
from .models import Order, OrderItem

logger = logging.getLogger('mail')


def find_order(order_id, *, lock=False):
    """Order by primary key, or None for a missing or malformed id."""
    if order_id in (None, ''):
        return None
    qs = Order.objects.select_related('vendor', 'customer')
    if lock:
        qs = qs.select_for_update()
    try:
        return qs.get(pk=order_id)
    except (Order.DoesNotExist, ValueError):
        return None


def mark_order_paid(order_id):
    """
    Sets payment_status=paid on the order under a row lock.
    Returns the updated order, or None if there is no such order.
    Must run inside a transaction.
    """
    order = find_order(order_id, lock=True)
    if order is None:
        return None

    order.payment_status = Order.PaymentStatus.PAID
    order.paid_at = timezone.now()
    order.save(update_fields=['payment_status', 'paid_at', 'updated_at'])
    return order


def send_order_paid_email(order_id) -> int:
    order = Order.objects.select_related('customer').prefetch_related('items').get(pk=order_id)
    if not order.customer.email:
        logger.warning("send_order_paid_email: order %s customer has no email", order.pk)
        return 0
    return send_templated_mail(
        f"Payment received for order #{order.pk}",
        'order_paid',
        {'order': order},
        [order.customer.email],
    )


def send_item_status_email(item: OrderItem) -> int:
    customer = item.order.customer
    if not customer.email:
        logger.warning("send_item_status_email: order %s customer has no email", item.order_id)
        return 0
    return send_templated_mail(
        f"Product status updated: {item.name}",
        'item_status',
        {'item': item, 'order_id': item.order_id},
        [customer.email],
    )


def set_item_status(item: OrderItem, status: str) -> bool:
    """
    Changes the item status and notifies the customer after commit.
    Returns False when the status is unchanged.
    """
    if status not in OrderItem.Status.values:
        raise ValueError(f"Unknown item status: {status}")
    if item.status == status:
        return False

    item.status = status
    item.save(update_fields=['status'])
    transaction.on_commit(lambda: send_quietly(send_item_status_email, item))
    return True
