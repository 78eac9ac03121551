from django.conf import settings

from core.mail import send_templated_mail
from .models import ContactMessage


def contact_recipients():
    notify_to = getattr(settings, 'CONTACTS_NOTIFY_EMAILS', None)
    if notify_to:
        return list(notify_to)
    # by default the site inbox, if configured
    default = getattr(settings, 'DEFAULT_FROM_EMAIL', None)
    return [default] if default else []


def send_contact_email(message: ContactMessage) -> int:
    to = contact_recipients()
    if not to:
        return 0
    return send_templated_mail(
        f"New contact form submission: {message.subject}",
        'contact_form',
        {'m': message},
        to,
        # reply straight to the sender
        reply_to=[message.email],
    )
