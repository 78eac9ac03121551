# users/services.py
import secrets
from datetime import timedelta
from urllib.parse import urlencode

from django.conf import settings
from django.utils import timezone

from core.mail import send_templated_mail
from .models import User

VERIFY = 'VERIFY'
RESET = 'RESET'

# kind -> (token field, expiry field)
_TOKEN_FIELDS = {
    VERIFY: ('verify_token', 'verify_token_expiry'),
    RESET: ('reset_token', 'reset_token_expiry'),
}

# kind -> (subject, template, storefront path)
_ACCOUNT_MAILS = {
    VERIFY: ("Verify your email", 'verify_email', '/auth/verify-email'),
    RESET: ("Reset your password", 'reset_password', '/auth/reset-password'),
}


def issue_token(user: User, kind: str) -> str:
    """Stores a fresh one-time token on the user and returns it."""
    token_field, expiry_field = _TOKEN_FIELDS[kind]
    token = secrets.token_urlsafe(32)
    setattr(user, token_field, token)
    setattr(user, expiry_field, timezone.now() + timedelta(seconds=settings.EMAIL_TOKEN_TTL))
    user.save(update_fields=[token_field, expiry_field])
    return token


def send_account_email(user: User, kind: str) -> int:
    """
    Issues a VERIFY or RESET token and mails the storefront link to the user.
    Delivery errors propagate (MailDeliveryError).
    """
    if kind not in _ACCOUNT_MAILS:
        raise ValueError(f"Unknown account email kind: {kind}")

    token = issue_token(user, kind)
    subject, template, path = _ACCOUNT_MAILS[kind]
    link = f"{settings.DOMAIN}{path}?{urlencode({'token': token})}"
    return send_templated_mail(subject, template, {'user': user, 'link': link}, [user.email])


def find_user_by_token(kind: str, token: str):
    """User holding a non-expired token of this kind, or None."""
    if not token:
        return None
    token_field, expiry_field = _TOKEN_FIELDS[kind]
    return (User.objects
            .filter(**{token_field: token, f'{expiry_field}__gt': timezone.now()})
            .first())


def clear_token(user: User, kind: str) -> None:
    token_field, expiry_field = _TOKEN_FIELDS[kind]
    setattr(user, token_field, '')
    setattr(user, expiry_field, None)
    user.save(update_fields=[token_field, expiry_field])


def verify_email(token: str):
    user = find_user_by_token(VERIFY, token)
    if user is None:
        return None
    user.is_verified = True
    user.save(update_fields=['is_verified'])
    clear_token(user, VERIFY)
    return user
