# core/mail.py
import logging
from smtplib import SMTPException

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

logger = logging.getLogger('mail')


class MailDeliveryError(Exception):
    pass


def send_templated_mail(subject: str, template: str, context: dict, to, reply_to=None) -> int:
    """
    Renders email/<template>.txt and .html and sends them as one message.
    Transport errors are raised to the caller as MailDeliveryError.
    """
    ctx = {'site_name': settings.SITE_NAME, 'domain': settings.DOMAIN, **context}
    text = render_to_string(f'email/{template}.txt', ctx)
    html = render_to_string(f'email/{template}.html', ctx)

    msg = EmailMultiAlternatives(
        subject=subject,
        body=text,
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=list(to),
        reply_to=list(reply_to) if reply_to else None,
    )
    msg.attach_alternative(html, 'text/html')

    try:
        sent = msg.send(fail_silently=False)
    except (SMTPException, OSError) as e:
        raise MailDeliveryError(f"{template} mail to {', '.join(to)} failed: {e}") from e

    logger.info("Mail sent: template=%s to=%s result=%s", template, ', '.join(to), sent)
    return sent


def send_quietly(send_fn, *args, **kwargs):
    """Fire-and-forget: delivery errors are logged, never raised."""
    try:
        return send_fn(*args, **kwargs)
    except Exception as e:
        logger.exception("Mail FAILED in %s: %s", getattr(send_fn, '__name__', send_fn), e)
        return 0
