import hashlib
import hmac


def expected_signature(order_id: str, payment_id: str, secret: str) -> str:
    body = f"{order_id}|{payment_id}"
    return hmac.new(secret.encode('utf-8'), body.encode('utf-8'), hashlib.sha256).hexdigest()


def verify_payment_signature(order_id, payment_id, signature, secret) -> bool:
    """
    Checks Razorpay's HMAC-SHA256 signature of "<order_id>|<payment_id>".
    Any missing field counts as a mismatch.
    """
    if not (order_id and payment_id and signature and secret):
        return False
    expected = expected_signature(str(order_id), str(payment_id), secret)
    return hmac.compare_digest(expected.encode('utf-8'), str(signature).encode('utf-8'))
