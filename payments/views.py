import logging
from urllib.parse import urlencode

from django.conf import settings
from django.http import HttpResponseRedirect, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from core.http import read_payload
from .exceptions import PaymentError
from .gateway import build_gateway
from .services import create_checkout_order, verify_payment

logger = logging.getLogger('payments')


def _fail(message, status):
    return JsonResponse({"status": False, "message": message}, status=status)


@csrf_exempt
@require_POST
def checkout(request):
    """Creates a Razorpay order for {amount} and returns it to the storefront."""
    try:
        data = read_payload(request)
    except ValueError:
        return _fail("Bad JSON", 400)

    try:
        order = create_checkout_order(build_gateway(), data.get("amount"))
    except PaymentError as e:
        return _fail(e.message, e.status_code)
    except Exception:
        logger.exception("Checkout failed")
        return _fail("An error occurred during checkout", 500)

    return JsonResponse({"status": True, "order": order})


@csrf_exempt
@require_POST
def payment_verification(request):
    """
    Razorpay callback. On success redirects to <DOMAIN>/success carrying the
    three razorpay_* ids, which the storefront success page reads.
    """
    try:
        data = read_payload(request)
    except ValueError:
        return _fail("Bad JSON", 400)

    ids = {
        "razorpay_order_id": data.get("razorpay_order_id") or "",
        "razorpay_payment_id": data.get("razorpay_payment_id") or "",
        "razorpay_signature": data.get("razorpay_signature") or "",
    }

    try:
        verify_payment(order_id=request.GET.get("orderId"), user=request.user, **ids)
    except PaymentError as e:
        return _fail(e.message, e.status_code)
    except Exception:
        logger.exception("Payment verification failed: razorpay_order_id=%s razorpay_payment_id=%s",
                         ids["razorpay_order_id"], ids["razorpay_payment_id"])
        return _fail("Payment verification failed", 500)

    return HttpResponseRedirect(f"{settings.DOMAIN}/success?{urlencode(ids)}")


@require_GET
def api_key(request):
    return JsonResponse({"key": settings.RAZORPAY_KEY_ID})
