# payments/services.py
import logging
import uuid
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.conf import settings
from django.db import IntegrityError, transaction

from core.mail import send_quietly
from ledger.services import credit_vendor
from orders.services import find_order, mark_order_paid, send_order_paid_email
from .exceptions import (
    DuplicatePaymentError, GatewayError, InvalidAmountError, OrderUpdateError, SignatureMismatchError,
)
from .gateway import RazorpayError
from .models import Payment
from .signature import verify_payment_signature

logger = logging.getLogger('payments')


def parse_amount(raw) -> Decimal:
    """Positive finite amount in major units; anything else is InvalidAmountError."""
    if raw is None or isinstance(raw, bool) or raw == '':
        raise InvalidAmountError()
    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmountError()
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError()
    return amount


def to_minor_units(amount: Decimal) -> int:
    # 19.99 -> 1999 (paise)
    return int((amount * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def create_checkout_order(gateway, raw_amount) -> dict:
    """
    Creates a Razorpay order for the amount and returns the gateway
    order object verbatim.
    """
    amount = to_minor_units(parse_amount(raw_amount))
    if amount <= 0:
        # e.g. 0.001 rounds down to nothing
        raise InvalidAmountError()

    payload = {
        "amount": amount,
        "currency": settings.RAZORPAY_CURRENCY,
        "receipt": uuid.uuid4().hex,
        "payment_capture": 1,
    }
    try:
        order = gateway.create_order(payload)
    except RazorpayError as e:
        logger.exception("Checkout error: receipt=%s amount=%s: %s", payload["receipt"], amount, e)
        raise GatewayError()

    logger.info("Razorpay order created: id=%s amount=%s receipt=%s",
                order.get("id"), amount, payload["receipt"])
    return order


def payment_exists(razorpay_order_id, razorpay_payment_id) -> bool:
    return Payment.objects.filter(
        razorpay_order_id=razorpay_order_id,
        razorpay_payment_id=razorpay_payment_id,
    ).exists()


def record_payment(*, user, order, razorpay_order_id, razorpay_payment_id, razorpay_signature) -> Payment:
    """
    Inserts the payment row. The unique constraint on the Razorpay id pair
    is the duplicate check, so two concurrent callbacks cannot both pass.
    """
    try:
        with transaction.atomic():
            return Payment.objects.create(
                user=user,
                order=order,
                razorpay_order_id=razorpay_order_id,
                razorpay_payment_id=razorpay_payment_id,
                razorpay_signature=razorpay_signature,
            )
    except IntegrityError:
        raise DuplicatePaymentError()


def verify_payment(*, razorpay_order_id, razorpay_payment_id, razorpay_signature,
                   order_id, user=None, secret=None) -> Payment:
    """
    Confirms a Razorpay payment:
    signature -> payment row (duplicate guard) -> order paid -> ledgers.

    All writes share one transaction: if a later step fails the payment row
    is rolled back too and the same callback can be retried.
    """
    secret = settings.RAZORPAY_KEY_SECRET if secret is None else secret
    if not verify_payment_signature(razorpay_order_id, razorpay_payment_id, razorpay_signature, secret):
        logger.warning("Signature mismatch: razorpay_order_id=%s razorpay_payment_id=%s",
                       razorpay_order_id, razorpay_payment_id)
        raise SignatureMismatchError()

    with transaction.atomic():
        order = find_order(order_id)
        payer = user if user is not None and user.is_authenticated else getattr(order, 'customer', None)
        if payer is None:
            # no one to attribute a new row to, but a repeat is still a repeat
            if payment_exists(razorpay_order_id, razorpay_payment_id):
                raise DuplicatePaymentError()
            logger.error("Order %r not found for razorpay_payment_id=%s", order_id, razorpay_payment_id)
            raise OrderUpdateError()

        payment = record_payment(
            user=payer,
            order=order,
            razorpay_order_id=razorpay_order_id,
            razorpay_payment_id=razorpay_payment_id,
            razorpay_signature=razorpay_signature,
        )

        order = mark_order_paid(order_id)
        if order is None:
            logger.error("Order %r not found for razorpay_payment_id=%s", order_id, razorpay_payment_id)
            raise OrderUpdateError()

        credit_vendor(order.vendor, order.vendor_share)
        transaction.on_commit(lambda: send_quietly(send_order_paid_email, order.pk))

    logger.info("Payment verified: order=%s razorpay_order_id=%s razorpay_payment_id=%s",
                order.pk, razorpay_order_id, razorpay_payment_id)
    return payment
