# users/views.py
import logging

from django.contrib.auth.forms import SetPasswordForm
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from core.http import read_payload
from core.mail import MailDeliveryError
from .forms import EmailTokenForm, PasswordResetRequestForm
from .models import User
from .services import RESET, clear_token, find_user_by_token, send_account_email, verify_email

logger = logging.getLogger('mail')


def _fail(message, status=400):
    return JsonResponse({"status": False, "message": message}, status=status)


def _form_errors(form):
    return JsonResponse({"status": False, "errors": form.errors}, status=400)


@csrf_exempt
@require_POST
def verify_email_view(request):
    try:
        form = EmailTokenForm(read_payload(request))
    except ValueError:
        return _fail("Bad JSON")
    if not form.is_valid():
        return _form_errors(form)

    user = verify_email(form.cleaned_data["token"])
    if user is None:
        return _fail("Invalid or expired token")
    return JsonResponse({"status": True, "message": "Email verified"})


@csrf_exempt
@require_POST
def password_reset_request(request):
    try:
        form = PasswordResetRequestForm(read_payload(request))
    except ValueError:
        return _fail("Bad JSON")
    if not form.is_valid():
        return _form_errors(form)

    # same answer for known and unknown addresses
    user = User.objects.filter(email=form.cleaned_data["email"], is_active=True).first()
    if user:
        try:
            send_account_email(user, RESET)
        except MailDeliveryError:
            logger.exception("Password reset mail failed: user=%s", user.pk)
            return _fail("Could not send the reset email", status=500)
    return JsonResponse({"status": True, "message": "If the address is registered, a reset link was sent"})


@csrf_exempt
@require_POST
def password_reset_confirm(request):
    try:
        data = read_payload(request)
    except ValueError:
        return _fail("Bad JSON")

    user = find_user_by_token(RESET, data.get("token") or "")
    if user is None:
        return _fail("Invalid or expired token")

    password = data.get("password") or ""
    form = SetPasswordForm(user, {"new_password1": password, "new_password2": password})
    if not form.is_valid():
        return _form_errors(form)
    form.save()
    clear_token(user, RESET)
    return JsonResponse({"status": True, "message": "Password updated"})
